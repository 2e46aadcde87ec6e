"""Pydantic models for page documents and build configuration.

A page document is a YAML or JSON description of a node tree::

    doctype: DOCTYPE html
    children:
      - tag: html
        attrs: {lang: en}
        children:
          - tag: body
            children:
              - tag: p
                children: ["Hello"]

Children may be bare strings (text nodes) or mappings. A mapping without a
``kind`` is an ``element`` when it has a ``tag`` and ``text`` otherwise.
"""

from datetime import date, time
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .attributes import Attribute, bool_attribute, text_attribute
from .nodes import DOCTYPE_HTML, Node, escaped, leaf, parent, text
from .tags import TAGS, element


def _is_scalar(value: Any) -> bool:
    """Numbers and YAML dates, which are written as text. Booleans are not."""
    return isinstance(value, (int, float, date, time)) and not isinstance(value, bool)


class BoolAttributeSpec(BaseModel):
    """Boolean attribute, rendered as a bare name when the flag is set."""

    name: str = Field(..., description="Attribute name.")
    flag: bool = Field(..., description="Whether the attribute is present.")

    model_config = ConfigDict(extra="forbid")

    def to_attribute(self) -> Attribute:
        return bool_attribute(self.name, self.flag)


class TextAttributeSpec(BaseModel):
    """Attribute rendered as name="value"; an empty value is left out."""

    name: str = Field(..., description="Attribute name.")
    value: str = Field(..., description="Attribute value, written verbatim.")

    model_config = ConfigDict(extra="forbid")

    @field_validator("value", mode="before")
    @classmethod
    def scalars_as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if _is_scalar(value):
            return str(value)
        return value

    def to_attribute(self) -> Attribute:
        return text_attribute(self.name, self.value)


AttributeSpec = Union[BoolAttributeSpec, TextAttributeSpec]


def _attributes_from_mapping(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    specs: List[dict] = []
    for name, item in value.items():
        if isinstance(item, bool):
            specs.append({"name": str(name), "flag": item})
        else:
            # Lists and mappings are left for TextAttributeSpec to reject.
            specs.append({"name": str(name), "value": item})
    return specs


def _normalize_children(value: Any) -> Any:
    if not isinstance(value, list):
        return value
    normalized: List[Any] = []
    for item in value:
        if isinstance(item, str):
            normalized.append({"kind": "text", "text": item})
        elif _is_scalar(item):
            normalized.append({"kind": "text", "text": str(item)})
        elif isinstance(item, dict) and "kind" not in item:
            kind = "element" if "tag" in item else "text"
            normalized.append({"kind": kind, **item})
        else:
            normalized.append(item)
    return normalized


class TextSpec(BaseModel):
    """Literal text. Set ``escape`` to replace markup characters with entities."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="Text content.")
    escape: bool = Field(False, description="Escape &, <, > and quotes.")

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        return escaped(self.text) if self.escape else text(self.text)


class _ElementSpec(BaseModel):
    tag: str = Field(..., description="Element name.")
    attrs: List[AttributeSpec] = Field(
        default_factory=list,
        description="Attributes in output order, as a list or an ordered mapping.",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("attrs", mode="before")
    @classmethod
    def attrs_from_mapping(cls, value: Any) -> Any:
        return _attributes_from_mapping(value)

    def attributes(self) -> List[Attribute]:
        return [spec.to_attribute() for spec in self.attrs]


class LeafSpec(_ElementSpec):
    """Element without children or closing tag, whatever its name."""

    kind: Literal["leaf"] = "leaf"

    def to_node(self) -> Node:
        return leaf(self.tag, self.attributes())


class ParentSpec(_ElementSpec):
    """Element with a closing tag, whatever its name."""

    kind: Literal["parent"] = "parent"
    children: List["NodeSpec"] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def children_shorthand(cls, value: Any) -> Any:
        return _normalize_children(value)

    def to_node(self) -> Node:
        return parent(self.tag, self.attributes(), [child.to_node() for child in self.children])


class ElementSpec(_ElementSpec):
    """Known HTML element; leaf or parent is looked up from the tag table."""

    kind: Literal["element"] = "element"
    children: List["NodeSpec"] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def children_shorthand(cls, value: Any) -> Any:
        return _normalize_children(value)

    @model_validator(mode="after")
    def check_tag(self) -> "ElementSpec":
        if self.tag not in TAGS:
            raise ValueError(f"Unknown element <{self.tag}>; use kind 'leaf' or 'parent'")
        if TAGS[self.tag] == "leaf" and self.children:
            raise ValueError(f"<{self.tag}> cannot have children")
        return self

    def to_node(self) -> Node:
        return element(self.tag, self.attributes(), [child.to_node() for child in self.children])


NodeSpec = Annotated[
    Union[TextSpec, LeafSpec, ParentSpec, ElementSpec],
    Field(discriminator="kind"),
]

ParentSpec.model_rebuild()
ElementSpec.model_rebuild()


class PageSpec(BaseModel):
    """A whole page: an optional declaration followed by top-level nodes."""

    doctype: Optional[str] = Field(
        DOCTYPE_HTML,
        description="Declaration label rendered as <!label>; null for a fragment.",
    )
    children: List[NodeSpec] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def list_as_children(cls, value: Any) -> Any:
        if isinstance(value, list):
            return {"children": value}
        return value

    @field_validator("children", mode="before")
    @classmethod
    def children_shorthand(cls, value: Any) -> Any:
        return _normalize_children(value)

    def to_nodes(self) -> List[Node]:
        return [child.to_node() for child in self.children]


class PageEntry(BaseModel):
    """One page of a build."""

    source: str = Field(..., description="Page document path, relative to the config.")
    output: str = Field(..., description="Output path, relative to out_dir.")


class BuildConfig(BaseModel):
    """Schema for a build configuration file."""

    out_dir: str = Field(
        "dist", description="Output directory, relative to the config file."
    )
    pages: List[PageEntry] = Field(
        default_factory=list, description="Pages to render."
    )


__all__ = [
    "AttributeSpec",
    "BoolAttributeSpec",
    "BuildConfig",
    "ElementSpec",
    "LeafSpec",
    "NodeSpec",
    "PageEntry",
    "PageSpec",
    "ParentSpec",
    "TextAttributeSpec",
    "TextSpec",
]
