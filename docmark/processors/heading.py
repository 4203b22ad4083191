"""
Heading promotion.

Replaces paragraphs with headings, either from the document's own style
names or, when those are missing, from the style classifier's prediction.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import ClassVar

from docmark.classify.styles import StyleClassifier, StylePrediction
from docmark.core.document import Heading, Node, Paragraph, plain_text
from docmark.processors.base import ProcessResult, Processor

logger = logging.getLogger(__name__)

STYLE_HEADING_DEPTHS: dict[str, int] = {
    "Title": 1,
    "Heading1": 1,
    "Subtitle": 2,
    "Heading2": 2,
    "Heading3": 3,
    "Heading4": 4,
    "Heading5": 5,
    "Heading6": 6,
}


class HeadingStrategy(str, Enum):
    """How headings are recognised."""

    AUTO = "auto"
    CLASSIFIER = "classifier"
    STYLE = "style"


def has_heading_styles(paragraphs: Sequence[Paragraph]) -> bool:
    """Check whether any paragraph uses a known heading style name."""
    return any(p.style_name in STYLE_HEADING_DEPTHS for p in paragraphs)


class HeadingProcessor(Processor[Node]):
    """
    Promotes paragraphs to headings.

    With ``HeadingStrategy.AUTO`` the style-name table is used when at
    least one paragraph carries a heading style, and the classifier
    otherwise.
    """

    PROCESSOR_NAME: ClassVar[str] = "heading"

    def __init__(self, strategy: HeadingStrategy = HeadingStrategy.AUTO) -> None:
        self.strategy = HeadingStrategy(strategy)
        self.resolved_strategy: HeadingStrategy | None = None
        self.prediction: StylePrediction | None = None

    def start(self, nodes: Sequence[Node]) -> None:
        paragraphs = [node for node in nodes if isinstance(node, Paragraph)]

        strategy = self.strategy
        if strategy is HeadingStrategy.AUTO:
            strategy = (
                HeadingStrategy.STYLE
                if has_heading_styles(paragraphs)
                else HeadingStrategy.CLASSIFIER
            )
            logger.debug("Heading strategy resolved to %s", strategy.value)
        self.resolved_strategy = strategy

        if strategy is HeadingStrategy.CLASSIFIER:
            self.prediction = StyleClassifier.classify(paragraphs)

    def heading_depth(self, paragraph: Paragraph) -> int | None:
        """Return the heading depth for a paragraph, or None if it is body text."""
        if self.resolved_strategy is HeadingStrategy.STYLE:
            return STYLE_HEADING_DEPTHS.get(paragraph.style_name or "")
        if self.prediction is None:
            return None
        return self.prediction.heading_depth(paragraph)

    def process_node(self, node: Node, index: int, nodes: Sequence[Node]) -> ProcessResult[Node] | None:
        if not isinstance(node, Paragraph) or not node.children:
            return None

        depth = self.heading_depth(node)
        if depth is None:
            return None

        logger.debug("Promoted %r to heading depth %d", plain_text(node), depth)
        return ProcessResult.replace(Heading(depth=depth, children=node.children))
