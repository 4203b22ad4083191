"""
List accumulation.

Paragraphs styled as list paragraphs carry no list container in the source
document; consecutive ones are gathered into a single ``List`` node.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import ClassVar

from docmark.core.document import List, Node, Paragraph
from docmark.processors.base import ProcessResult, Processor

logger = logging.getLogger(__name__)

LIST_PARAGRAPH_STYLE = "ListParagraph"


class ListProcessor(Processor[Node]):
    """Accumulates consecutive list-styled paragraphs into one ``List``."""

    PROCESSOR_NAME: ClassVar[str] = "list"

    def __init__(self, list_style_name: str = LIST_PARAGRAPH_STYLE) -> None:
        self.list_style_name = list_style_name
        self._current: list[Paragraph] = []

    def process_node(self, node: Node, index: int, nodes: Sequence[Node]) -> ProcessResult[Node] | None:
        if isinstance(node, Paragraph) and node.style_name == self.list_style_name:
            self._current.append(node)
            return ProcessResult.consume()

        # Any other node closes the open list; it still flows to later stages
        if self._current:
            return ProcessResult.emit_and_continue(self._flush())

        return None

    def end(self, output: Sequence[Node]) -> ProcessResult[Node] | None:
        if self._current:
            return ProcessResult.emit_and_continue(self._flush())
        return None

    def _flush(self) -> List:
        """Return the open list as a single node and clear it."""
        list_node = List.from_paragraphs(self._current)
        logger.debug("Flushed list with %d items", len(self._current))
        self._current = []
        return list_node
