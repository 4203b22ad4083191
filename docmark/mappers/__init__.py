"""Mappers from raw document elements to intermediate nodes."""

from docmark.mappers.base import Mapper, map_elements
from docmark.mappers.paragraph import ParagraphMapper, is_email

__all__ = [
    "Mapper",
    "ParagraphMapper",
    "is_email",
    "map_elements",
]
