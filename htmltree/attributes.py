"""Attribute model for HTML elements.

An attribute renders either to nothing or to a single fragment carrying its
own leading space, so a sequence of attributes can be concatenated directly
after the tag name. Values are written verbatim: a ``"`` inside a value
produces broken markup and callers are expected to pre-escape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class BoolAttribute:
    """Attribute whose presence alone carries meaning (``disabled``, ``open``)."""

    name: str
    flag: bool


@dataclass(frozen=True)
class TextAttribute:
    """Attribute rendered as ``name="value"``; an empty value renders as nothing."""

    name: str
    value: str


Attribute = BoolAttribute | TextAttribute


def bool_attribute(name: str, flag: bool) -> Attribute:
    return BoolAttribute(name=name, flag=flag)


def text_attribute(name: str, value: str) -> Attribute:
    return TextAttribute(name=name, value=value)


def encode(attribute: Attribute) -> str:
    if isinstance(attribute, BoolAttribute):
        return f" {attribute.name}" if attribute.flag else ""
    if isinstance(attribute, TextAttribute):
        if not attribute.value:
            return ""
        return f' {attribute.name}="{attribute.value}"'
    raise TypeError(f"Expected an attribute, got {type(attribute).__name__}")


def encode_all(attributes: Iterable[Attribute]) -> str:
    parts: List[str] = [encode(attribute) for attribute in attributes]
    return "".join(parts)


__all__ = [
    "Attribute",
    "BoolAttribute",
    "TextAttribute",
    "bool_attribute",
    "encode",
    "encode_all",
    "text_attribute",
]
