"""Immutable node tree for HTML generation.

The generated ``==``, ``repr()`` and ``hash()`` of the node dataclasses recurse
through children and raise ``RecursionError`` on trees deeper than the
interpreter recursion limit. ``render`` has no such limit; compare very deep
trees through their rendered strings.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, Tuple

from .attributes import Attribute

DOCTYPE_HTML = "DOCTYPE html"


class _Renderable:
    def __str__(self) -> str:
        from .render import render

        return render(self)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Text(_Renderable):
    """Literal text, written out verbatim."""

    text: str


@dataclass(frozen=True)
class Leaf(_Renderable):
    """Element without children or closing tag (``<br>``, ``<img ...>``)."""

    tag: str
    attrs: Tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class Parent(_Renderable):
    """Element with an opening tag, ordered children and a closing tag."""

    tag: str
    attrs: Tuple[Attribute, ...] = ()
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Root(_Renderable):
    """Declaration such as ``<!DOCTYPE html>`` followed by top-level content."""

    label: str
    children: Tuple["Node", ...] = ()


Node = Text | Leaf | Parent | Root


def text(s: str) -> Node:
    return Text(s)


def escaped(s: str) -> Node:
    """Text node with ``&``, ``<``, ``>`` and quotes replaced by entities.

    ``text`` never escapes; use this for untrusted input.
    """
    return Text(html.escape(s, quote=True))


def leaf(tag: str, attrs: Iterable[Attribute] = ()) -> Node:
    return Leaf(tag, tuple(attrs))


def parent(tag: str, attrs: Iterable[Attribute] = (), children: Iterable[Node] = ()) -> Node:
    return Parent(tag, tuple(attrs), tuple(children))


def root(label: str, children: Iterable[Node] = ()) -> Node:
    return Root(label, tuple(children))


def document(children: Iterable[Node] = ()) -> Node:
    return root(DOCTYPE_HTML, children)


__all__ = [
    "DOCTYPE_HTML",
    "Leaf",
    "Node",
    "Parent",
    "Root",
    "Text",
    "document",
    "escaped",
    "leaf",
    "parent",
    "root",
    "text",
]
