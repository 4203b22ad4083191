"""
Semantic document tree for docmark.

This module defines the node types recovered from a word-processing
document (paragraphs, headings, lists, emphasis) together with the
formatting signatures captured from the source markup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class NodeType(str, Enum):
    """Kinds of nodes in the semantic tree (mdast names)."""

    ROOT = "root"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    LIST_ITEM = "listItem"
    TEXT = "text"
    LINK = "link"
    STRONG = "strong"


@dataclass(frozen=True)
class RunSignature:
    """
    Formatting captured from a run's properties.

    Font size is kept in the source unit (half-points).
    """

    font_size: int | None = None
    is_bold: bool = False
    is_underlined: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "fontSize": self.font_size,
            "isBold": self.is_bold,
            "isUnderlined": self.is_underlined,
        }


@dataclass(frozen=True)
class ParagraphSignature(RunSignature):
    """
    Formatting captured from a paragraph's properties.

    Adds the paragraph-only fields to the run-level ones taken from the
    paragraph mark's run properties.
    """

    paragraph_id: str | None = None
    justify_class: str | None = None
    paragraph_style: str | None = None

    def cluster_key(self) -> tuple[int | None, bool, bool, str | None]:
        """Fields compared when grouping paragraphs into style clusters."""
        return (self.font_size, self.is_bold, self.is_underlined, self.justify_class)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "id": self.paragraph_id,
                "justifyClass": self.justify_class,
                "paragraphStyle": self.paragraph_style,
            }
        )
        return data


class Node(ABC):
    """Base class for every node in the semantic tree."""

    type: ClassVar[NodeType]

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize the node and its subtree as an mdast-shaped dict."""


def _require_children(node: Node, children: list[Any]) -> None:
    if not children:
        raise ValueError(f"{node.type.value} node requires at least one child")


@dataclass
class Text(Node):
    """A run of plain text."""

    type: ClassVar[NodeType] = NodeType.TEXT

    value: str
    signature: RunSignature | None = None

    @property
    def is_bold(self) -> bool:
        return self.signature is not None and self.signature.is_bold

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value, "value": self.value}
        if self.signature is not None:
            data["data"] = self.signature.to_dict()
        return data


@dataclass
class Link(Node):
    """A hyperlink wrapping a single text child."""

    type: ClassVar[NodeType] = NodeType.LINK

    url: str
    children: list[Text] = field(default_factory=list)
    signature: RunSignature | None = None

    @property
    def is_bold(self) -> bool:
        return self.signature is not None and self.signature.is_bold

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "url": self.url,
            "children": [child.to_dict() for child in self.children],
        }
        if self.signature is not None:
            data["data"] = self.signature.to_dict()
        return data


@dataclass
class Strong(Node):
    """Bold emphasis over one or more runs."""

    type: ClassVar[NodeType] = NodeType.STRONG

    children: list[Run]

    def __post_init__(self) -> None:
        _require_children(self, self.children)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "children": [child.to_dict() for child in self.children],
        }


# Inline (phrasing) content of paragraphs and headings
Run = Union[Text, Link, Strong]


@dataclass
class Paragraph(Node):
    """A block of inline runs with the formatting of its source paragraph."""

    type: ClassVar[NodeType] = NodeType.PARAGRAPH

    children: list[Run] = field(default_factory=list)
    signature: ParagraphSignature | None = None
    # Read from w:pStyle even when the paragraph has no signature
    style: str | None = None

    @property
    def style_name(self) -> str | None:
        """Internal style name of the source paragraph, if any."""
        if self.style is not None:
            return self.style
        return self.signature.paragraph_style if self.signature else None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "children": [child.to_dict() for child in self.children],
        }
        if self.signature is not None:
            data["data"] = self.signature.to_dict()
        elif self.style is not None:
            data["data"] = {"paragraphStyle": self.style}
        return data


@dataclass
class Heading(Node):
    """A heading of depth 1-6."""

    type: ClassVar[NodeType] = NodeType.HEADING

    depth: int
    children: list[Run]

    def __post_init__(self) -> None:
        if not 1 <= self.depth <= 6:
            raise ValueError(f"Heading depth must be between 1 and 6, got {self.depth}")
        _require_children(self, self.children)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "depth": self.depth,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class ListItem(Node):
    """A list entry holding exactly one paragraph."""

    type: ClassVar[NodeType] = NodeType.LIST_ITEM

    children: list[Paragraph]

    def __post_init__(self) -> None:
        if len(self.children) != 1:
            raise ValueError("listItem node requires exactly one paragraph")

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class List(Node):
    """An unordered list of items."""

    type: ClassVar[NodeType] = NodeType.LIST

    children: list[ListItem]

    def __post_init__(self) -> None:
        _require_children(self, self.children)

    @classmethod
    def from_paragraphs(cls, paragraphs: list[Paragraph]) -> List:
        """Wrap each paragraph in its own list item."""
        return cls(children=[ListItem(children=[p]) for p in paragraphs])

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "ordered": False,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class Root(Node):
    """Document root handed to exporters."""

    type: ClassVar[NodeType] = NodeType.ROOT

    children: list[Node] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "children": [child.to_dict() for child in self.children],
        }


def plain_text(node: Node) -> str:
    """Concatenate the text values below a node."""
    if isinstance(node, Text):
        return node.value
    children = getattr(node, "children", [])
    return "".join(plain_text(child) for child in children)
