"""Minified serialization of node trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union

from .attributes import encode_all
from .nodes import Leaf, Node, Parent, Root, Text


@dataclass(frozen=True)
class _Close:
    tag: str


def _write(nodes: Iterable[Node], out: List[str]) -> None:
    # Explicit stack: tree depth is not bounded by the recursion limit.
    # Node equality, repr and hash still recurse (see nodes.py).
    stack: List[Union[Node, _Close]] = list(nodes)
    stack.reverse()
    while stack:
        item = stack.pop()
        if isinstance(item, Text):
            out.append(item.text)
        elif isinstance(item, Leaf):
            out.append(f"<{item.tag}{encode_all(item.attrs)}>")
        elif isinstance(item, Parent):
            out.append(f"<{item.tag}{encode_all(item.attrs)}>")
            stack.append(_Close(item.tag))
            stack.extend(reversed(item.children))
        elif isinstance(item, _Close):
            out.append(f"</{item.tag}>")
        elif isinstance(item, Root):
            out.append(f"<!{item.label}>")
            stack.extend(reversed(item.children))
        else:
            raise TypeError(f"Cannot render {type(item).__name__}")


def render(node: Node) -> str:
    parts: List[str] = []
    _write([node], parts)
    return "".join(parts)


def render_all(nodes: Iterable[Node]) -> str:
    parts: List[str] = []
    _write(nodes, parts)
    return "".join(parts)


__all__ = ["render", "render_all"]
