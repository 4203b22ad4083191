"""
Base exporter class and registry.

Exporters serialize the semantic tree to text. All exporters inherit from
BaseExporter and register themselves with the ExporterRegistry.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from docmark.core.document import Root

logger = logging.getLogger(__name__)


class BaseExporter(ABC):
    """Abstract base class for tree exporters."""

    EXPORTER_NAME: ClassVar[str] = "base"
    FILE_EXTENSION: ClassVar[str] = ""

    @abstractmethod
    def render(self, root: Root) -> str:
        """
        Serialize a document tree.

        Args:
            root: Document root

        Returns:
            The serialized document
        """

    def export(self, root: Root, path: Path) -> Path:
        """
        Serialize a document tree to a file.

        Returns:
            Path to exported file
        """
        path = self._ensure_extension(path)
        path.write_text(self.render(root), encoding="utf-8")
        logger.info("Exported %d blocks to %s", len(root.children), path)
        return path

    def _ensure_extension(self, path: Path) -> Path:
        """Ensure the path has the correct extension."""
        if path.suffix.lower() != self.FILE_EXTENSION.lower():
            return path.with_suffix(self.FILE_EXTENSION)
        return path


class ExporterRegistry:
    """Registry of available exporters."""

    _exporters: ClassVar[dict[str, type[BaseExporter]]] = {}

    @classmethod
    def register(cls, exporter_class: type[BaseExporter]) -> type[BaseExporter]:
        """Register an exporter class."""
        cls._exporters[exporter_class.EXPORTER_NAME] = exporter_class
        return exporter_class

    @classmethod
    def get_exporter(cls, name: str, **options: Any) -> BaseExporter | None:
        """Get an exporter by name, passing options to its constructor."""
        exporter_class = cls._exporters.get(name)
        if exporter_class:
            return exporter_class(**options)
        return None

    @classmethod
    def available_exporters(cls) -> list[str]:
        """Get list of available exporter names."""
        return list(cls._exporters.keys())

    @classmethod
    def require_exporter(cls, name: str, **options: Any) -> BaseExporter:
        """Get an exporter by name or raise ValueError."""
        exporter = cls.get_exporter(name, **options)
        if exporter is None:
            available = ", ".join(cls.available_exporters())
            raise ValueError(f"Unknown export format: {name}. Available: {available}")
        return exporter
