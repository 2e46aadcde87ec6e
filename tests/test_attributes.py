import pytest

from htmltree.attributes import (
    BoolAttribute,
    TextAttribute,
    bool_attribute,
    encode,
    encode_all,
    text_attribute,
)


@pytest.mark.parametrize("name", ["disabled", "hidden", "x", ""])
def test_false_bool_attribute_encodes_to_nothing(name: str) -> None:
    assert encode(bool_attribute(name, False)) == ""


@pytest.mark.parametrize("name", ["disabled", "hidden", "data-x"])
def test_true_bool_attribute_encodes_to_bare_name(name: str) -> None:
    assert encode(bool_attribute(name, True)) == " " + name


@pytest.mark.parametrize("name", ["class", "id", "href", ""])
def test_empty_text_attribute_encodes_to_nothing(name: str) -> None:
    assert encode(text_attribute(name, "")) == ""


def test_text_attribute_encodes_name_and_quoted_value() -> None:
    assert encode(text_attribute("type", "submit")) == ' type="submit"'
    assert encode(text_attribute("class", "a b c")) == ' class="a b c"'


def test_text_attribute_value_is_not_escaped() -> None:
    assert encode(text_attribute("title", 'say "hi" & <go>')) == ' title="say "hi" & <go>"'


def test_constructors_build_frozen_values() -> None:
    attr = text_attribute("id", "main")
    assert attr == TextAttribute(name="id", value="main")
    assert bool_attribute("open", True) == BoolAttribute(name="open", flag=True)
    with pytest.raises(AttributeError):
        attr.value = "other"  # type: ignore[misc]


def test_encode_all_concatenates_in_order() -> None:
    attrs = [
        text_attribute("height", "500"),
        bool_attribute("hidden", False),
        text_attribute("width", "500"),
        bool_attribute("controls", True),
        text_attribute("alt", ""),
    ]
    assert encode_all(attrs) == ' height="500" width="500" controls'
    assert encode_all(attrs) == "".join(encode(attr) for attr in attrs)


def test_encode_all_is_order_sensitive() -> None:
    first = [text_attribute("a", "1"), text_attribute("b", "2")]
    assert encode_all(first) == ' a="1" b="2"'
    assert encode_all(list(reversed(first))) == ' b="2" a="1"'


def test_encode_all_of_nothing_is_empty() -> None:
    assert encode_all([]) == ""
    assert encode_all(iter(())) == ""


def test_encode_rejects_non_attributes() -> None:
    with pytest.raises(TypeError):
        encode("class")  # type: ignore[arg-type]
