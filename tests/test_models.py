import pytest
import yaml
from pydantic import ValidationError

from htmltree.build import render_page
from htmltree.models import (
    BoolAttributeSpec,
    ElementSpec,
    LeafSpec,
    PageSpec,
    ParentSpec,
    TextAttributeSpec,
    TextSpec,
)
from htmltree.attributes import bool_attribute, text_attribute
from htmltree.nodes import document, leaf, parent, text
from htmltree.render import render


def test_page_renders_like_hand_built_tree() -> None:
    page = PageSpec.model_validate(
        {
            "children": [
                {
                    "tag": "html",
                    "attrs": {"lang": "en"},
                    "children": [
                        {"tag": "head", "children": [{"tag": "meta", "attrs": {"charset": "utf-8"}}]},
                        {
                            "tag": "body",
                            "children": [
                                {"tag": "h1", "children": ["Hello"]},
                                {"tag": "input", "attrs": {"type": "checkbox", "checked": True, "hidden": False}},
                            ],
                        },
                    ],
                }
            ]
        }
    )
    expected = document(
        [
            parent(
                "html",
                [text_attribute("lang", "en")],
                [
                    parent("head", [], [leaf("meta", [text_attribute("charset", "utf-8")])]),
                    parent(
                        "body",
                        [],
                        [
                            parent("h1", [], [text("Hello")]),
                            leaf(
                                "input",
                                [
                                    text_attribute("type", "checkbox"),
                                    bool_attribute("checked", True),
                                    bool_attribute("hidden", False),
                                ],
                            ),
                        ],
                    ),
                ],
            )
        ]
    )
    assert render_page(page) == render(expected)
    assert render_page(page) == (
        '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8"></head>'
        '<body><h1>Hello</h1><input type="checkbox" checked></body></html>'
    )


def test_attribute_list_form() -> None:
    spec = ElementSpec.model_validate(
        {"tag": "canvas", "attrs": [{"name": "height", "value": 500}, {"name": "width", "value": "500"}]}
    )
    assert spec.attrs == [TextAttributeSpec(name="height", value="500"), TextAttributeSpec(name="width", value="500")]
    assert render(spec.to_node()) == '<canvas height="500" width="500"></canvas>'


def test_attribute_union_picks_matching_shape() -> None:
    spec = LeafSpec.model_validate({"tag": "x", "attrs": [{"name": "open", "flag": True}, {"name": "id", "value": "a"}]})
    assert isinstance(spec.attrs[0], BoolAttributeSpec)
    assert isinstance(spec.attrs[1], TextAttributeSpec)


def test_null_attribute_value_renders_nothing() -> None:
    spec = ElementSpec.model_validate({"tag": "a", "attrs": {"href": None}, "children": ["x"]})
    assert render(spec.to_node()) == "<a>x</a>"


def test_explicit_kinds_allow_any_tag() -> None:
    page = PageSpec.model_validate(
        {
            "doctype": None,
            "children": [
                {"kind": "parent", "tag": "my-card", "children": [{"kind": "leaf", "tag": "my-icon"}]},
                {"kind": "leaf", "tag": "div"},
            ],
        }
    )
    assert isinstance(page.children[0], ParentSpec)
    assert render_page(page) == "<my-card><my-icon></my-card><div>"


def test_text_spec_escape_flag() -> None:
    assert render(TextSpec(text="<b>").to_node()) == "<b>"
    assert render(TextSpec(text="<b>", escape=True).to_node()) == "&lt;b&gt;"


def test_page_from_bare_list() -> None:
    page = PageSpec.model_validate(["one", {"text": "two"}])
    assert render_page(page) == "<!DOCTYPE html>onetwo"


def test_custom_doctype() -> None:
    page = PageSpec.model_validate({"doctype": "doctype html", "children": []})
    assert render_page(page) == "<!doctype html>"


def test_unknown_element_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        PageSpec.model_validate({"children": [{"tag": "blink", "children": ["hi"]}]})
    assert "Unknown element <blink>" in str(excinfo.value)


def test_children_on_void_element_are_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        PageSpec.model_validate({"children": [{"tag": "br", "children": ["x"]}]})
    assert "<br> cannot have children" in str(excinfo.value)


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        PageSpec.model_validate({"children": [{"tag": "p", "colour": "red"}]})
    with pytest.raises(ValidationError):
        PageSpec.model_validate({"title": "x"})


def test_number_children_become_text() -> None:
    page = PageSpec.model_validate({"doctype": None, "children": [{"tag": "td", "children": [500, 2.5]}]})
    assert render_page(page) == "<td>5002.5</td>"


def test_boolean_children_are_rejected() -> None:
    with pytest.raises(ValidationError):
        PageSpec.model_validate({"children": [{"tag": "td", "children": [True]}]})


def test_null_attribute_value_in_list_form() -> None:
    spec = ElementSpec.model_validate({"tag": "a", "attrs": [{"name": "href", "value": None}], "children": ["x"]})
    assert spec.attrs == [TextAttributeSpec(name="href", value="")]
    assert render(spec.to_node()) == "<a>x</a>"


def test_date_attribute_value_is_written_as_text() -> None:
    data = yaml.safe_load("tag: time\nattrs: {datetime: 2024-05-01}\nchildren: [May]\n")
    spec = ElementSpec.model_validate(data)
    assert render(spec.to_node()) == '<time datetime="2024-05-01">May</time>'


@pytest.mark.parametrize("value", [["a", "b"], {"a": "b"}])
def test_non_scalar_attribute_values_are_rejected(value: object) -> None:
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": "div", "attrs": {"class": value}})
