"""
Formatting signature extraction from WordprocessingML elements.

Reads the ``w:pPr`` / ``w:rPr`` property blocks of raw paragraph and run
elements into immutable signatures.
"""

from __future__ import annotations

from docx.oxml.ns import qn
from lxml import etree

from docmark.core.document import ParagraphSignature, RunSignature

W14_NAMESPACE = "http://schemas.microsoft.com/office/word/2010/wordml"
PARAGRAPH_ID_ATTRIBUTE = f"{{{W14_NAMESPACE}}}paraId"

_OFF_VALUES = frozenset({"0", "false", "off"})
_UNDERLINE_OFF_VALUES = _OFF_VALUES | {"none"}


def get_child(element: etree._Element, tag: str) -> etree._Element | None:
    """Return the first direct child with the given prefixed tag."""
    return element.find(qn(tag))


def get_children(element: etree._Element, tag: str | None = None) -> list[etree._Element]:
    """Return direct element children, optionally filtered by prefixed tag."""
    if tag is not None:
        return element.findall(qn(tag))
    # Skip comments and processing instructions
    return [child for child in element if isinstance(child.tag, str)]


def get_value(element: etree._Element | None) -> str | None:
    """Return the ``w:val`` attribute of an element, if present."""
    if element is None:
        return None
    return element.get(qn("w:val"))


def _is_toggled(element: etree._Element | None, off_values: frozenset[str]) -> bool:
    if element is None:
        return False
    value = get_value(element)
    return value is None or value.lower() not in off_values


def _parse_font_size(element: etree._Element | None) -> int | None:
    value = get_value(element)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def get_run_signature(element: etree._Element) -> RunSignature | None:
    """
    Read the run properties directly under an element.

    Works for runs, hyperlinks and paragraph property blocks alike.
    Returns None when the element has no ``w:rPr`` child.
    """
    run_properties = get_child(element, "w:rPr")
    if run_properties is None:
        return None

    return RunSignature(
        font_size=_parse_font_size(get_child(run_properties, "w:sz")),
        is_bold=_is_toggled(get_child(run_properties, "w:b"), _OFF_VALUES),
        is_underlined=_is_toggled(get_child(run_properties, "w:u"), _UNDERLINE_OFF_VALUES),
    )


def get_paragraph_signature(element: etree._Element) -> ParagraphSignature | None:
    """
    Read a paragraph's formatting signature.

    Returns None unless the paragraph has both a ``w:pPr`` block and a
    paragraph mark ``w:pPr/w:rPr``. Paragraphs without one take no part in
    style classification. Use ``get_paragraph_style`` for the style name alone.
    """
    paragraph_properties = get_child(element, "w:pPr")
    if paragraph_properties is None:
        return None

    run_signature = get_run_signature(paragraph_properties)
    if run_signature is None:
        return None

    return ParagraphSignature(
        font_size=run_signature.font_size,
        is_bold=run_signature.is_bold,
        is_underlined=run_signature.is_underlined,
        paragraph_id=element.get(PARAGRAPH_ID_ATTRIBUTE),
        justify_class=get_value(get_child(paragraph_properties, "w:jc")),
        paragraph_style=get_value(get_child(paragraph_properties, "w:pStyle")),
    )


def get_paragraph_style(element: etree._Element) -> str | None:
    """Return the ``w:pStyle`` value of a paragraph, if any."""
    paragraph_properties = get_child(element, "w:pPr")
    if paragraph_properties is None:
        return None
    return get_value(get_child(paragraph_properties, "w:pStyle"))
