from __future__ import annotations

"""Low-level DOCX utilities shared by the reader.

Thin wrappers over python-docx objects and their lxml elements, kept apart
from the reader so they can be unit-tested on hand-built documents.
"""

from typing import Generator, List, Optional
import logging

from docx.document import Document as _Document  # type: ignore
from docx.oxml.ns import qn  # type: ignore
from docx.oxml.table import CT_Tbl  # type: ignore
from docx.oxml.text.paragraph import CT_P  # type: ignore
from docx.table import Table  # type: ignore
from docx.text.paragraph import Paragraph  # type: ignore

from wordhtml.core.exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

__all__ = [
    "iter_block_items",
    "xp",
    "element_text",
    "paragraph_style_id",
    "paragraph_num_id",
    "table_rows",
]

_NS = {"w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main"}


# ---------------------------------------------------------------------------
# iter_block_items – body traversal
# ---------------------------------------------------------------------------

def iter_block_items(doc: _Document) -> Generator[Paragraph | Table, None, None]:
    """Yield *Paragraph* and *Table* objects for the body children, in order.

    Only direct children count as blocks; section properties, bookmarks and
    content controls at body level are skipped.
    """
    if not isinstance(doc, _Document):
        raise ValueError("Unsupported parent type for iter_block_items")

    body = doc.element.body
    if body is None:
        raise MalformedDocumentError("Document has no body element")

    for child in body.iterchildren():
        if isinstance(child, CT_P):
            yield Paragraph(child, doc)
        elif isinstance(child, CT_Tbl):
            yield Table(child, doc)
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("Skipping body element %s", child.tag)


# ---------------------------------------------------------------------------
# Element queries
# ---------------------------------------------------------------------------

def xp(el, path: str):
    """Namespace-aware XPath helper for python-docx and plain lxml elements."""
    try:
        return el.xpath(path, namespaces=_NS)
    except TypeError:
        # python-docx elements bind their own namespace map
        return el.xpath(path)


def element_text(element) -> str:
    """Return the concatenated ``w:t`` text below *element*, in document order."""
    return "".join(xp(element, ".//w:t/text()"))


def paragraph_style_id(paragraph: Paragraph) -> Optional[str]:
    """Return the paragraph style id (``w:pStyle/@w:val``), e.g. ``Heading1``."""
    return paragraph._p.style


def paragraph_num_id(paragraph: Paragraph) -> Optional[int]:
    """Return the numbering id of a list paragraph, or None for other paragraphs.

    A ``w:numPr`` without a usable ``w:numId`` is reported as malformed.
    """
    pPr = paragraph._p.pPr
    if pPr is None or pPr.numPr is None:
        return None
    num_id_el = pPr.numPr.find(qn("w:numId"))
    raw = num_id_el.get(qn("w:val")) if num_id_el is not None else None
    if raw is None:
        raise MalformedDocumentError("List paragraph has numbering properties but no numbering id")
    try:
        return int(raw)
    except ValueError as exc:
        raise MalformedDocumentError(f"Invalid numbering id {raw!r}", cause=exc) from exc


def table_rows(table: Table) -> List[List[str]]:
    """Return the text of every cell, row by row.

    Reads the raw ``w:tr``/``w:tc`` children so merged cells appear once, the
    way they are stored, instead of being expanded by python-docx.
    """
    rows: List[List[str]] = []
    for tr in table._tbl.tr_lst:
        rows.append([element_text(tc) for tc in tr.tc_lst])
    return rows
