"""Exporters from the semantic tree to text formats."""

from docmark.exporters.base import BaseExporter, ExporterRegistry
from docmark.exporters.json_export import JSONExporter
from docmark.exporters.markdown import MarkdownExporter

__all__ = [
    "BaseExporter",
    "ExporterRegistry",
    "JSONExporter",
    "MarkdownExporter",
]
