"""Document loaders for docmark."""

from docmark.loaders.base import BaseLoader, LoaderError, LoaderRegistry
from docmark.loaders.docx import DocxLoader

__all__ = [
    "BaseLoader",
    "DocxLoader",
    "LoaderError",
    "LoaderRegistry",
]
