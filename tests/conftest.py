"""
Pytest configuration and fixtures for docmark tests.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from docx import Document


@pytest.fixture
def make_docx(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing a .docx built with python-docx.

    Takes a callable that fills in a ``docx.Document``.
    """

    def _make(build: Callable[[object], None], name: str = "sample.docx") -> Path:
        doc = Document()
        build(doc)
        path = tmp_path / name
        doc.save(str(path))
        return path

    return _make


@pytest.fixture
def sample_docx(make_docx: Callable[..., Path]) -> Path:
    """A small report with a title, headings, lists and bold text."""

    def build(doc) -> None:
        doc.add_heading("Quarterly Report", level=0)
        doc.add_heading("Summary", level=1)
        p = doc.add_paragraph("Revenue grew ")
        p.add_run("strongly").bold = True
        p.add_run(" this quarter.")
        doc.add_paragraph("First point", style="List Paragraph")
        doc.add_paragraph("Second point", style="List Paragraph")
        doc.add_heading("Details", level=2)
        doc.add_paragraph("Closing remarks.")
        doc.add_paragraph("Last item", style="List Paragraph")

    return make_docx(build)


SAMPLE_MARKDOWN = """\
# Quarterly Report

# Summary

Revenue grew **strongly** this quarter.

- First point
- Second point

## Details

Closing remarks.

- Last item
"""


@pytest.fixture
def sample_markdown() -> str:
    """Expected Markdown for ``sample_docx``."""
    return SAMPLE_MARKDOWN
