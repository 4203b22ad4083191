"""Default stage that keeps any node no earlier stage claimed."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from docmark.processors.base import ProcessResult, Processor


class PassthroughProcessor(Processor[Any]):
    """Emit the input node unchanged. Place it last in a pipeline."""

    PROCESSOR_NAME: ClassVar[str] = "passthrough"

    def process_node(self, node: Any, index: int, nodes: Sequence[Any]) -> ProcessResult[Any]:
        return ProcessResult.replace(node)
