"""
Markdown exporter for docmark.

Renders the semantic tree as CommonMark: ATX headings, tight bullet lists,
``**`` for strong emphasis and inline links.
"""

from __future__ import annotations

import re
from typing import ClassVar

from docmark.core.document import (
    Heading,
    Link,
    List,
    Node,
    Paragraph,
    Root,
    Strong,
    Text,
)
from docmark.exporters.base import BaseExporter, ExporterRegistry

_INLINE_SPECIAL = re.compile(r"([\\`*_\[\]<&])")

# Text that would otherwise start a heading, quote or list item
_BLOCK_START = re.compile(r"^(#|>|[-+](?=\s|$)|\d+(?=[.)](?:\s|$)))")


def escape_text(value: str) -> str:
    """Escape characters with inline Markdown meaning."""
    return _INLINE_SPECIAL.sub(r"\\\1", value)


def escape_block_start(line: str) -> str:
    """
    Make a rendered line safe to open a block.

    Leading indentation is dropped, since four spaces start a code block,
    and a leading marker that would change the block type is escaped.
    """
    line = line.lstrip(" \t")
    match = _BLOCK_START.match(line)
    if match is None:
        return line
    marker = match.group(1)
    if marker.isdigit():
        # Escape the delimiter after the number: "1\. text"
        return f"{marker}\\{line[len(marker):]}"
    return f"\\{line}"


def _format_url(url: str) -> str:
    if re.search(r"[\s()]", url):
        return f"<{url}>"
    return url


@ExporterRegistry.register
class MarkdownExporter(BaseExporter):
    """
    Render documents as Markdown.

    Args:
        bullet: Marker used for list items.
    """

    EXPORTER_NAME: ClassVar[str] = "markdown"
    FILE_EXTENSION: ClassVar[str] = ".md"

    def __init__(self, bullet: str = "-") -> None:
        if bullet not in ("-", "*", "+"):
            raise ValueError(f"Unsupported bullet marker: {bullet!r}")
        self.bullet = bullet

    def render(self, root: Root) -> str:
        blocks = [self.render_block(child) for child in root.children]
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def render_block(self, node: Node) -> str:
        """Render a block-level node."""
        if isinstance(node, Heading):
            return "#" * node.depth + " " + self.render_inline(node.children).lstrip(" \t")

        if isinstance(node, Paragraph):
            return escape_block_start(self.render_inline(node.children))

        if isinstance(node, List):
            lines = []
            for item in node.children:
                paragraph = item.children[0]
                text = escape_block_start(self.render_inline(paragraph.children))
                lines.append(f"{self.bullet} {text}")
            return "\n".join(lines)

        raise ValueError(f"Cannot render block node of type {node.type.value}")

    def render_inline(self, nodes: list) -> str:
        """Render a sequence of inline nodes."""
        return "".join(self._render_run(node) for node in nodes)

    def _render_run(self, node: Node) -> str:
        if isinstance(node, Text):
            return escape_text(node.value)
        if isinstance(node, Strong):
            return "**" + self.render_inline(node.children) + "**"
        if isinstance(node, Link):
            return f"[{self.render_inline(node.children)}]({_format_url(node.url)})"
        raise ValueError(f"Cannot render inline node of type {node.type.value}")
