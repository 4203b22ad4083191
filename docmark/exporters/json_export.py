"""
JSON exporter for docmark.

Writes the semantic tree as mdast-shaped JSON, including the formatting
signatures, for debugging or custom integrations.
"""

from __future__ import annotations

import json
from typing import ClassVar

from docmark.core.document import Root
from docmark.exporters.base import BaseExporter, ExporterRegistry


@ExporterRegistry.register
class JSONExporter(BaseExporter):
    """Export the document tree as JSON."""

    EXPORTER_NAME: ClassVar[str] = "json"
    FILE_EXTENSION: ClassVar[str] = ".json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render(self, root: Root) -> str:
        return json.dumps(root.to_dict(), indent=self.indent, ensure_ascii=False) + "\n"
