"""Pipeline stages that turn mapped paragraphs into the semantic tree."""

from docmark.processors.base import PipelineError, ProcessResult, Processor, process_nodes
from docmark.processors.bold import BoldProcessor, merge_bold_runs
from docmark.processors.heading import HeadingProcessor, HeadingStrategy
from docmark.processors.list import ListProcessor
from docmark.processors.passthrough import PassthroughProcessor
from docmark.processors.phrasing import PhrasingProcessor

__all__ = [
    "BoldProcessor",
    "HeadingProcessor",
    "HeadingStrategy",
    "ListProcessor",
    "PassthroughProcessor",
    "PhrasingProcessor",
    "PipelineError",
    "ProcessResult",
    "Processor",
    "merge_bold_runs",
    "process_nodes",
]
