"""Attribute constructors named after common HTML attributes.

Boolean attributes take an optional flag (``disabled()``, ``hidden(False)``);
text attributes take the value (``href("/")``, ``class_("card")``). Python
names map to markup names by dropping a trailing underscore and turning the
remaining underscores into hyphens, so ``http_equiv`` renders as
``http-equiv``.
"""

from __future__ import annotations

from typing import Callable, Dict

from .attributes import Attribute, bool_attribute, text_attribute

BOOL_ATTRIBUTES = (
    "allowfullscreen",
    "async_",
    "autofocus",
    "autoplay",
    "checked",
    "controls",
    "default",
    "defer",
    "disabled",
    "formnovalidate",
    "hidden",
    "inert",
    "ismap",
    "itemscope",
    "loop",
    "multiple",
    "muted",
    "nomodule",
    "novalidate",
    "open_",
    "playsinline",
    "readonly",
    "required",
    "reversed_",
    "selected",
)

TEXT_ATTRIBUTES = (
    "accept",
    "accept_charset",
    "action",
    "alt",
    "autocomplete",
    "charset",
    "class_",
    "cols",
    "colspan",
    "content",
    "crossorigin",
    "datetime",
    "dir_",
    "download",
    "enctype",
    "for_",
    "form",
    "height",
    "href",
    "hreflang",
    "http_equiv",
    "id_",
    "integrity",
    "lang",
    "loading",
    "max_",
    "maxlength",
    "method",
    "min_",
    "minlength",
    "name",
    "pattern",
    "placeholder",
    "poster",
    "referrerpolicy",
    "rel",
    "role",
    "rows",
    "rowspan",
    "sandbox",
    "scope",
    "sizes",
    "span",
    "src",
    "srcdoc",
    "srcset",
    "start",
    "step",
    "style",
    "tabindex",
    "target",
    "title",
    "type_",
    "value",
    "width",
    "wrap",
)


def markup_name(python_name: str) -> str:
    return python_name.rstrip("_").replace("_", "-")


def _bool_constructor(python_name: str) -> Callable[..., Attribute]:
    name = markup_name(python_name)

    def build(flag: bool = True) -> Attribute:
        return bool_attribute(name, flag)

    build.__name__ = build.__qualname__ = python_name
    return build


def _text_constructor(python_name: str) -> Callable[[str], Attribute]:
    name = markup_name(python_name)

    def build(value: str) -> Attribute:
        return text_attribute(name, value)

    build.__name__ = build.__qualname__ = python_name
    return build


CONSTRUCTORS: Dict[str, Callable[..., Attribute]] = {}
for _name in BOOL_ATTRIBUTES:
    CONSTRUCTORS[_name] = _bool_constructor(_name)
for _name in TEXT_ATTRIBUTES:
    CONSTRUCTORS[_name] = _text_constructor(_name)
globals().update(CONSTRUCTORS)
del _name


def data(name: str, value: str) -> Attribute:
    """``data-<name>`` attribute."""
    return text_attribute(f"data-{name}", value)


def aria(name: str, value: str) -> Attribute:
    """``aria-<name>`` attribute."""
    return text_attribute(f"aria-{name}", value)


__all__ = [
    "BOOL_ATTRIBUTES",
    "CONSTRUCTORS",
    "TEXT_ATTRIBUTES",
    "aria",
    "data",
    "markup_name",
    *CONSTRUCTORS,
]
