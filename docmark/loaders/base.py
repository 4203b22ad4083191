"""
Base loader class and registry for document loaders.

Loaders unpack a source file and return its body as an ordered list of raw
structural elements for the mappers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from lxml import etree

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Base exception for loader errors."""

    def __init__(self, message: str, source_path: Path | None = None, details: str | None = None):
        self.source_path = source_path
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "source_path": str(self.source_path) if self.source_path else None,
            "details": self.details,
        }


class BaseLoader(ABC):
    """Abstract base class for document loaders."""

    SUPPORTED_EXTENSIONS: ClassVar[list[str]] = []
    LOADER_NAME: ClassVar[str] = "base"

    @classmethod
    def can_load(cls, path: Path) -> bool:
        """Check if this loader can handle the given file."""
        return path.suffix.lower() in cls.SUPPORTED_EXTENSIONS

    @abstractmethod
    def load(self, path: Path) -> list[etree._Element]:
        """
        Load a document and return its body elements in order.

        Raises:
            LoaderError: If loading fails
        """

    def load_elements(self, path: Path) -> list[etree._Element]:
        """Validate the path, then load it."""
        if not path.exists():
            raise LoaderError(f"File not found: {path}", source_path=path)

        if not self.can_load(path):
            raise LoaderError(
                f"Unsupported file type: {path.suffix}",
                source_path=path,
                details=f"Supported types: {', '.join(self.SUPPORTED_EXTENSIONS)}",
            )

        elements = self.load(path)
        logger.info("Loaded %d elements from %s with %s loader", len(elements), path.name, self.LOADER_NAME)
        return elements


class LoaderRegistry:
    """
    Registry of available document loaders.

    Use this to automatically select the appropriate loader for a file.
    """

    _loaders: ClassVar[list[type[BaseLoader]]] = []

    @classmethod
    def register(cls, loader_class: type[BaseLoader]) -> type[BaseLoader]:
        """Register a loader class. Can be used as a decorator."""
        if loader_class not in cls._loaders:
            cls._loaders.append(loader_class)
        return loader_class

    @classmethod
    def get_loader(cls, path: Path) -> BaseLoader | None:
        """Get an appropriate loader for the given file path."""
        for loader_class in cls._loaders:
            if loader_class.can_load(path):
                return loader_class()
        return None

    @classmethod
    def supported_extensions(cls) -> list[str]:
        """Get all supported file extensions."""
        extensions = []
        for loader_class in cls._loaders:
            extensions.extend(loader_class.SUPPORTED_EXTENSIONS)
        return sorted(set(extensions))

    @classmethod
    def load_elements(cls, path: Path) -> list[etree._Element]:
        """
        Load a document using the appropriate loader.

        Raises:
            LoaderError: If no loader is available or loading fails
        """
        loader = cls.get_loader(path)
        if loader is None:
            supported = ", ".join(cls.supported_extensions())
            raise LoaderError(
                f"No loader available for file type: {path.suffix}",
                source_path=path,
                details=f"Supported types: {supported}",
            )
        return loader.load_elements(path)
