"""Runs a nested pipeline over the inline content of each paragraph."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import ClassVar

from docmark.core.document import Node, Paragraph, Run
from docmark.processors.base import ProcessResult, Processor, process_nodes
from docmark.processors.bold import BoldProcessor
from docmark.processors.passthrough import PassthroughProcessor


def default_phrasing_processors() -> list[Processor[Run]]:
    """Fresh inline stages: bold merging, then keep everything else."""
    return [BoldProcessor(), PassthroughProcessor()]


class PhrasingProcessor(Processor[Node]):
    """
    Rewrites the children of paragraph nodes.

    The paragraph itself is left to later stages; only its children are
    replaced by the output of the nested pipeline.

    Args:
        processor_factory: Builds the inline stages. Called once per
            paragraph because stages hold buffered state.
    """

    PROCESSOR_NAME: ClassVar[str] = "phrasing"

    def __init__(
        self,
        processor_factory: Callable[[], list[Processor[Run]]] = default_phrasing_processors,
    ) -> None:
        self._processor_factory = processor_factory

    def process_node(self, node: Node, index: int, nodes: Sequence[Node]) -> ProcessResult[Node] | None:
        if not isinstance(node, Paragraph):
            return None

        node.children = process_nodes(node.children, self._processor_factory())
        return None
