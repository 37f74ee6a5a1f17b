from __future__ import annotations

"""Helper utilities for DOCX to HTML conversion.

Small, side-effect-free functions used by the core conversion logic for
heading detection and HTML element creation.
"""

import logging
import re
from typing import List, Optional

from lxml import etree as ET  # type: ignore

from wordhtml.core.exceptions import MalformedDocumentError
from wordhtml.core.models import ListKind

__all__ = [
    "HEADING_STYLE_PREFIX",
    "get_heading_level",
    "create_html_root",
    "create_text_element",
    "create_list_element",
    "create_table_element",
]

logger = logging.getLogger(__name__)

HEADING_STYLE_PREFIX = "Heading"

_LEVEL_PATTERN = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Heading detection
# ---------------------------------------------------------------------------

def get_heading_level(style_id: Optional[str], *, strict: bool = True) -> Optional[int]:
    """Return the heading level encoded in a paragraph style id.

    ``Heading3`` gives 3; styles that do not start with ``Heading`` give
    None.  A ``Heading`` prefix followed by anything but digits
    (``Heading``, ``HeadingText``) raises :class:`MalformedDocumentError`,
    or gives None when *strict* is False.

    Examples:
        >>> get_heading_level("Heading2")
        2
        >>> get_heading_level("Normal") is None
        True
    """
    if not style_id or not style_id.startswith(HEADING_STYLE_PREFIX):
        return None

    suffix = style_id[len(HEADING_STYLE_PREFIX):]
    if _LEVEL_PATTERN.fullmatch(suffix):
        return int(suffix)

    if strict:
        raise MalformedDocumentError(f"Heading style {style_id!r} has no numeric level")
    logger.warning("Heading style %r has no numeric level; rendering as paragraph", style_id)
    return None


# ---------------------------------------------------------------------------
# HTML element builders
# ---------------------------------------------------------------------------

def create_html_root() -> tuple[ET._Element, ET._Element]:
    """Return a fresh ``<html>`` element and its ``<body>`` child."""
    root = ET.Element("html")
    body = ET.SubElement(root, "body")
    return root, body


def create_text_element(tag: str, text: str) -> ET._Element:
    """Create ``<tag>text</tag>``; the text is escaped on serialisation."""
    el = ET.Element(tag)
    el.text = text
    return el


def create_list_element(kind: ListKind) -> ET._Element:
    return ET.Element(kind.value)


def create_table_element(rows: List[List[str]]) -> ET._Element:
    """Create a ``<table>`` with one ``<tr>`` per row and one ``<td>`` per cell."""
    table = ET.Element("table")
    for row in rows:
        tr = ET.SubElement(table, "tr")
        for cell_text in row:
            td = ET.SubElement(tr, "td")
            td.text = cell_text
    return table
