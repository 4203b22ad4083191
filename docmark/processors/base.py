"""
Generic node-processing pipeline.

A pipeline runs an ordered list of processors over a node sequence. It is
generic over the node type so the same engine handles top-level blocks and
the inline runs inside a paragraph.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ProcessResult(Generic[T]):
    """
    Outcome of a processor handling one node.

    Attributes:
        nodes: Nodes to append to the pipeline output, possibly empty.
        continue_processing: When False, later processors do not see the
            current input node. When True, they still receive it.
    """

    nodes: list[T] = field(default_factory=list)
    continue_processing: bool = False

    @classmethod
    def consume(cls) -> ProcessResult[T]:
        """Absorb the node without emitting anything."""
        return cls(nodes=[], continue_processing=False)

    @classmethod
    def replace(cls, *nodes: T) -> ProcessResult[T]:
        """Emit replacement nodes and stop handling the input node."""
        return cls(nodes=list(nodes), continue_processing=False)

    @classmethod
    def emit_and_continue(cls, *nodes: T) -> ProcessResult[T]:
        """Emit extra nodes but let later processors see the input node."""
        return cls(nodes=list(nodes), continue_processing=True)


class PipelineError(Exception):
    """Raised when a processor fails while the pipeline is running."""

    def __init__(self, message: str, processor_name: str, index: int | None = None):
        self.processor_name = processor_name
        self.index = index
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        return {
            "error": str(self),
            "processor": self.processor_name,
            "index": self.index,
        }


class Processor(ABC, Generic[T]):
    """
    A stateful pipeline stage.

    Processors may buffer nodes between calls. Each instance is meant for a
    single pipeline run.
    """

    PROCESSOR_NAME: ClassVar[str] = "base"

    def start(self, nodes: Sequence[T]) -> None:
        """Inspect the whole input before any node is processed."""

    @abstractmethod
    def process_node(
        self, node: T, index: int, nodes: Sequence[T]
    ) -> ProcessResult[T] | None:
        """
        Handle one input node.

        Args:
            node: The input node, always in its original form.
            index: Position of the node in the input.
            nodes: The full input sequence.

        Returns:
            A ProcessResult, or None to leave the node to later processors.
        """

    def end(self, output: Sequence[T]) -> ProcessResult[T] | None:
        """Flush buffered state once all input has been seen."""
        return None


def _fail(processor: Processor[T], stage: str, index: int | None, exc: Exception) -> PipelineError:
    location = f" at node {index}" if index is not None else ""
    return PipelineError(
        f"Processor '{processor.PROCESSOR_NAME}' failed during {stage}{location}: {exc}",
        processor_name=processor.PROCESSOR_NAME,
        index=index,
    )


def process_nodes(nodes: Sequence[T], processors: Sequence[Processor[T]]) -> list[T]:
    """
    Run processors over a node sequence and return the output sequence.

    Every processor is offered each input node in declared order until one
    returns a result with ``continue_processing`` False. Emitted nodes are
    appended in the order the processors ran. After the last node, each
    processor's ``end`` result is appended the same way.

    Raises:
        PipelineError: If any processor raises. No partial output is returned.
    """
    output: list[T] = []

    for processor in processors:
        try:
            processor.start(nodes)
        except Exception as exc:
            raise _fail(processor, "start", None, exc) from exc

    for index, node in enumerate(nodes):
        for processor in processors:
            try:
                result = processor.process_node(node, index, nodes)
            except Exception as exc:
                raise _fail(processor, "processing", index, exc) from exc

            if result is None:
                continue

            output.extend(result.nodes)

            if not result.continue_processing:
                break

    for processor in processors:
        try:
            result = processor.end(output)
        except Exception as exc:
            raise _fail(processor, "end", None, exc) from exc

        if result is None:
            continue

        output.extend(result.nodes)

        if not result.continue_processing:
            break

    logger.debug("Processed %d nodes into %d", len(nodes), len(output))
    return output
