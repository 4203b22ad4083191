"""Core data structures for docmark."""

from docmark.core.document import (
    Heading,
    Link,
    List,
    ListItem,
    Node,
    NodeType,
    Paragraph,
    ParagraphSignature,
    Root,
    Run,
    RunSignature,
    Strong,
    Text,
    plain_text,
)

__all__ = [
    "Heading",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeType",
    "Paragraph",
    "ParagraphSignature",
    "Root",
    "Run",
    "RunSignature",
    "Strong",
    "Text",
    "plain_text",
]
