"""Conversion settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from docmark.processors.heading import HeadingStrategy
from docmark.processors.list import LIST_PARAGRAPH_STYLE


@dataclass
class ConversionConfig:
    """
    Settings for one conversion run.

    Only the pipeline composition and output are configurable; the style
    scoring rules are fixed.
    """

    heading_strategy: HeadingStrategy = HeadingStrategy.AUTO
    list_style_name: str = LIST_PARAGRAPH_STYLE
    merge_bold: bool = True  # Consolidate bold runs into strong emphasis
    output_format: str = "markdown"
    bullet: str = "-"  # Markdown list marker

    def __post_init__(self) -> None:
        self.heading_strategy = HeadingStrategy(self.heading_strategy)

    def to_dict(self) -> dict[str, Any]:
        return {
            "heading_strategy": self.heading_strategy.value,
            "list_style_name": self.list_style_name,
            "merge_bold": self.merge_bold,
            "output_format": self.output_format,
            "bullet": self.bullet,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConversionConfig:
        return cls(
            heading_strategy=HeadingStrategy(data.get("heading_strategy", "auto")),
            list_style_name=data.get("list_style_name", LIST_PARAGRAPH_STYLE),
            merge_bold=data.get("merge_bold", True),
            output_format=data.get("output_format", "markdown"),
            bullet=data.get("bullet", "-"),
        )

    def exporter_options(self) -> dict[str, Any]:
        """Constructor options for the configured exporter."""
        if self.output_format == "markdown":
            return {"bullet": self.bullet}
        return {}
