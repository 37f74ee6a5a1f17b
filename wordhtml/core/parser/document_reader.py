from __future__ import annotations

"""DOCX → :class:`DocumentModel` reader.

Opens the container with python-docx and flattens the body into paragraph
and table blocks, resolving the list kind of every numbering id in use.
"""

from pathlib import Path
from typing import List
import logging
import zipfile

from docx import Document  # type: ignore
from docx.opc.exceptions import PackageNotFoundError  # type: ignore
from docx.table import Table  # type: ignore
from lxml import etree as ET  # type: ignore

from wordhtml.core.exceptions import MalformedDocumentError
from wordhtml.core.models import Block, DocumentModel, ParagraphBlock, TableBlock
from wordhtml.core.parser.docx_utils import (
    element_text,
    iter_block_items,
    paragraph_num_id,
    paragraph_style_id,
    table_rows,
)
from wordhtml.core.parser.numbering import collect_list_kinds

logger = logging.getLogger(__name__)

__all__ = ["read_document", "document_from_docx"]


def read_document(file_path: str | Path) -> DocumentModel:
    """Open the DOCX at *file_path* and return its block model.

    Raises
    ------
    MalformedDocumentError
        The file is not a readable DOCX container, or its body breaks an
        assumption of the reader.
    """
    file_path = str(file_path)
    logger.info("Loading DOCX file: %s", file_path)
    try:
        doc = Document(file_path)
    except (PackageNotFoundError, zipfile.BadZipFile, ET.XMLSyntaxError, KeyError, ValueError) as exc:
        # ValueError: a zip package that is not a Word document
        raise MalformedDocumentError(f"Cannot open document: {exc}", file_path, exc) from exc

    try:
        model = document_from_docx(doc)
    except MalformedDocumentError as exc:
        if exc.file_path is None:
            exc.file_path = file_path
        raise
    except (AttributeError, ET.LxmlError) as exc:
        # python-docx assumes a schema-valid part tree; a broken one surfaces here
        raise MalformedDocumentError(f"Unexpected document structure: {exc}", file_path, exc) from exc
    model.source_path = file_path
    return model


def document_from_docx(doc) -> DocumentModel:
    """Build a :class:`DocumentModel` from an opened python-docx document."""
    blocks: List[Block] = []
    for item in iter_block_items(doc):
        if isinstance(item, Table):
            blocks.append(TableBlock(rows=table_rows(item)))
        else:
            blocks.append(
                ParagraphBlock(
                    text=element_text(item._p),
                    style_id=paragraph_style_id(item),
                    num_id=paragraph_num_id(item),
                )
            )

    num_ids = [b.num_id for b in blocks if isinstance(b, ParagraphBlock) and b.num_id is not None]
    list_kinds = collect_list_kinds(doc, num_ids)

    tables = sum(1 for b in blocks if isinstance(b, TableBlock))
    logger.info(
        "Read %d blocks (paragraphs=%d tables=%d list_items=%d)",
        len(blocks), len(blocks) - tables, tables, len(num_ids),
    )
    return DocumentModel(blocks=blocks, list_kinds=list_kinds)
