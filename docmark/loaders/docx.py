"""
DOCX document loader using python-docx.

Opens the package and returns the children of ``w:body`` untouched, so
that formatting properties stay available to the mappers.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from docx import Document
from lxml import etree

from docmark.loaders.base import BaseLoader, LoaderError, LoaderRegistry


@LoaderRegistry.register
class DocxLoader(BaseLoader):
    """Load the body elements of a Word document."""

    SUPPORTED_EXTENSIONS: ClassVar[list[str]] = [".docx"]
    LOADER_NAME: ClassVar[str] = "docx"

    def load(self, path: Path) -> list[etree._Element]:
        """Load a DOCX and return its body elements in document order."""
        try:
            doc = Document(str(path))
        except Exception as e:
            raise LoaderError(
                f"Failed to load DOCX: {e}",
                source_path=path,
                details=str(e),
            ) from e

        body = doc.element.body
        if body is None:
            raise LoaderError("Document is missing its body element", source_path=path)

        # Skip comments and processing instructions
        return [element for element in body if isinstance(element.tag, str)]
