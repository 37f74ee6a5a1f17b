from __future__ import annotations

"""DOCX → HTML conversion implementation.

Single forward pass over the document blocks.  Consecutive list paragraphs
of the same kind are gathered into one pending ``<ol>``/``<ul>``; the pending
list is appended to ``<body>`` as soon as a non-list block arrives, the kind
changes, or the input ends.
"""

from pathlib import Path
from typing import Optional
import logging
import time

import lxml.html  # type: ignore
from lxml import etree as ET  # type: ignore

from wordhtml.core.exceptions import MalformedDocumentError
from wordhtml.core.models import ConversionSettings, DocumentModel, ListKind, ParagraphBlock, TableBlock
from wordhtml.core.parser import read_document
from wordhtml.core.utils import strip_base64_blobs

from .helpers import (
    create_html_root,
    create_list_element,
    create_table_element,
    create_text_element,
    get_heading_level,
)

logger = logging.getLogger(__name__)

__all__ = ["build_html_tree", "serialize_html", "render_html", "convert_docx_to_html"]


def build_html_tree(document: DocumentModel, settings: Optional[ConversionSettings] = None) -> ET._Element:
    """Return the ``<html><body>…</body></html>`` tree for *document*."""
    settings = settings or ConversionSettings()
    strict_headings = settings.invalid_heading_style == "error"

    root, body = create_html_root()
    current_list: Optional[ET._Element] = None
    current_kind: Optional[ListKind] = None

    def finish_current_list() -> None:
        nonlocal current_list, current_kind
        if current_list is None:
            return
        body.append(current_list)
        current_list = None
        current_kind = None

    for index, block in enumerate(document.blocks):
        if isinstance(block, ParagraphBlock):
            if block.is_list_item:
                kind = document.list_kind(block.num_id)  # type: ignore[arg-type]
                if current_kind != kind:
                    finish_current_list()
                    current_list = create_list_element(kind)
                    current_kind = kind
                current_list.append(create_text_element("li", block.text))  # type: ignore[union-attr]
                continue

            finish_current_list()
            try:
                level = get_heading_level(block.style_id, strict=strict_headings)
            except MalformedDocumentError:
                logger.error("Block %d: unsupported heading style %r", index, block.style_id)
                raise
            tag = f"h{level}" if level is not None else "p"
            body.append(create_text_element(tag, block.text))

        elif isinstance(block, TableBlock):
            finish_current_list()
            body.append(create_table_element(block.rows))

        else:
            raise TypeError(f"Unsupported block type: {type(block).__name__}")

    finish_current_list()
    return root


def serialize_html(root: ET._Element) -> str:
    """Render *root* as HTML markup (no doctype, no pretty printing)."""
    return lxml.html.tostring(root, encoding="unicode", method="html")


def render_html(document: DocumentModel, settings: Optional[ConversionSettings] = None) -> str:
    """Build, serialise and clean the HTML for *document*."""
    settings = settings or ConversionSettings()
    raw_markup = serialize_html(build_html_tree(document, settings))
    cleaned = strip_base64_blobs(raw_markup, settings.min_blob_length)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Base64 filter removed %d chars", len(raw_markup) - len(cleaned))
    return cleaned


def convert_docx_to_html(file_path: str | Path, settings: Optional[ConversionSettings] = None) -> str:
    """Convert the DOCX at *file_path* into cleaned HTML markup.

    Nothing is written to disk; see
    :class:`~wordhtml.core.services.ConversionService` for that.
    """
    logger.info("Starting DOCX->HTML conversion: %s", file_path)
    t0 = time.perf_counter()
    document = read_document(file_path)
    try:
        markup = render_html(document, settings)
    except MalformedDocumentError as exc:
        if exc.file_path is None:
            exc.file_path = str(file_path)
        raise
    logger.info(
        "Conversion finished: blocks=%d chars=%d ms=%d",
        len(document.blocks), len(markup), int((time.perf_counter() - t0) * 1000),
    )
    return markup
