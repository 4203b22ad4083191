"""
Paragraph mapping.

Maps ``w:p`` elements to ``Paragraph`` nodes made of text and link runs,
keeping the formatting signatures used later for classification and bold
merging.
"""

from __future__ import annotations

import re
from typing import ClassVar

from docx.oxml.ns import qn
from lxml import etree

from docmark.core.document import Link, Paragraph, Run, Text
from docmark.mappers.base import Mapper
from docmark.mappers.signature import (
    get_child,
    get_children,
    get_paragraph_signature,
    get_paragraph_style,
    get_run_signature,
)
from docmark.processors.base import process_nodes
from docmark.processors.phrasing import default_phrasing_processors

# Same strings as ^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$ without the
# nested optional quantifier that backtracks exponentially
EMAIL_PATTERN = re.compile(
    r"\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+",
    re.ASCII | re.IGNORECASE,
)


def is_email(value: str) -> bool:
    """Check whether link text looks like an email address."""
    return EMAIL_PATTERN.fullmatch(value) is not None


def get_run_text(run: etree._Element) -> str:
    """Concatenate the ``w:t`` children of a run."""
    return "".join(t.text or "" for t in get_children(run, "w:t"))


class ParagraphMapper(Mapper):
    """
    Maps a paragraph element to a ``Paragraph`` node.

    Runs without text and hyperlinks without a text run are dropped. A
    paragraph left with no runs maps to nothing.

    Args:
        merge_bold: Consolidate bold runs into ``Strong`` nodes while mapping.
    """

    MAPPER_NAME: ClassVar[str] = "paragraph"

    def __init__(self, merge_bold: bool = True) -> None:
        self.merge_bold = merge_bold

    def map_element(self, element: etree._Element) -> Paragraph | None:
        if element.tag != qn("w:p"):
            return None

        children: list[Run] = []
        for child in get_children(element):
            run = self.map_run(child)
            if run is not None:
                children.append(run)

        if not children:
            return None

        if self.merge_bold:
            children = process_nodes(children, default_phrasing_processors())

        return Paragraph(
            children=children,
            signature=get_paragraph_signature(element),
            style=get_paragraph_style(element),
        )

    def map_run(self, element: etree._Element) -> Run | None:
        """Map a direct child of a paragraph to a text or link run."""
        if element.tag == qn("w:r"):
            value = get_run_text(element)
            if not value:
                return None
            return Text(value=value, signature=get_run_signature(element))

        if element.tag == qn("w:hyperlink"):
            run = get_child(element, "w:r")
            if run is None:
                return None

            value = get_run_text(run)
            if not value:
                return None

            run_signature = get_run_signature(run)
            return Link(
                url=f"mailto:{value}" if is_email(value) else value,
                children=[Text(value=value, signature=run_signature)],
                signature=get_run_signature(element) or run_signature,
            )

        return None
