"""One constructor per HTML element, generated from a name table.

Leaf constructors take ``(attrs=())`` and parent constructors take
``(attrs=(), children=())``::

    from htmltree import tags

    tags.p([], [text("Hello")])
    tags.img([text_attribute("src", "cat.png")])

Names that collide with Python keywords or builtins carry a trailing
underscore (``del_``, ``input_``, ``map_``, ``object_``).
"""

from __future__ import annotations

import keyword
from typing import Callable, Dict, Iterable, List, Literal

from .attributes import Attribute, text_attribute
from .nodes import Node, document, leaf, parent

TagKind = Literal["leaf", "parent"]

LEAF_TAGS = (
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
)

PARENT_TAGS = (
    "a",
    "abbr",
    "address",
    "article",
    "aside",
    "audio",
    "b",
    "bdi",
    "bdo",
    "blockquote",
    "body",
    "button",
    "canvas",
    "caption",
    "cite",
    "code",
    "colgroup",
    "data",
    "datalist",
    "dd",
    "del",
    "details",
    "dfn",
    "dialog",
    "div",
    "dl",
    "dt",
    "em",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "html",
    "i",
    "iframe",
    "ins",
    "kbd",
    "label",
    "legend",
    "li",
    "main",
    "map",
    "mark",
    "menu",
    "meter",
    "nav",
    "noscript",
    "object",
    "ol",
    "optgroup",
    "option",
    "output",
    "p",
    "picture",
    "pre",
    "progress",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "script",
    "search",
    "section",
    "select",
    "slot",
    "small",
    "span",
    "strong",
    "style",
    "sub",
    "summary",
    "sup",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "time",
    "title",
    "tr",
    "u",
    "ul",
    "var",
    "video",
)

TAGS: Dict[str, TagKind] = {
    **{name: "leaf" for name in LEAF_TAGS},
    **{name: "parent" for name in PARENT_TAGS},
}

_RESERVED = {"input", "map", "object"}


def python_name(tag: str) -> str:
    """Module attribute name for ``tag``."""
    if keyword.iskeyword(tag) or tag in _RESERVED:
        return f"{tag}_"
    return tag


def is_leaf(tag: str) -> bool:
    return TAGS[tag] == "leaf"


def element(tag: str, attrs: Iterable[Attribute] = (), children: Iterable[Node] = ()) -> Node:
    """Build a known element, choosing leaf or parent from the table.

    Raises ``KeyError`` for names outside the table and ``ValueError`` when
    children are given to a leaf element.
    """
    if tag not in TAGS:
        raise KeyError(f"Unknown element <{tag}>")
    if TAGS[tag] == "leaf":
        children = list(children)
        if children:
            raise ValueError(f"<{tag}> cannot have children")
        return leaf(tag, attrs)
    return parent(tag, attrs, children)


def _leaf_constructor(tag: str) -> Callable[..., Node]:
    def build(attrs: Iterable[Attribute] = ()) -> Node:
        return leaf(tag, attrs)

    build.__name__ = build.__qualname__ = python_name(tag)
    build.__doc__ = f"``<{tag}>`` element (no closing tag)."
    return build


def _parent_constructor(tag: str) -> Callable[..., Node]:
    def build(attrs: Iterable[Attribute] = (), children: Iterable[Node] = ()) -> Node:
        return parent(tag, attrs, children)

    build.__name__ = build.__qualname__ = python_name(tag)
    build.__doc__ = f"``<{tag}>...</{tag}>`` element."
    return build


CONSTRUCTORS: Dict[str, Callable[..., Node]] = {}
for _tag, _kind in TAGS.items():
    if _kind == "leaf":
        CONSTRUCTORS[_tag] = _leaf_constructor(_tag)
    else:
        CONSTRUCTORS[_tag] = _parent_constructor(_tag)
    globals()[python_name(_tag)] = CONSTRUCTORS[_tag]
del _tag, _kind


def html_document(
    head_children: Iterable[Node] = (),
    body_children: Iterable[Node] = (),
    lang: str = "",
) -> Node:
    """``<!DOCTYPE html><html><head>...</head><body>...</body></html>``.

    An empty ``lang`` leaves the attribute out.
    """
    html_attrs: List[Attribute] = [text_attribute("lang", lang)] if lang else []
    return document(
        [
            parent(
                "html",
                html_attrs,
                [parent("head", [], head_children), parent("body", [], body_children)],
            )
        ]
    )


__all__ = [
    "CONSTRUCTORS",
    "LEAF_TAGS",
    "PARENT_TAGS",
    "TAGS",
    "TagKind",
    "element",
    "html_document",
    "is_leaf",
    "python_name",
    *(python_name(name) for name in TAGS),
]
