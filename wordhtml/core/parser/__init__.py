from __future__ import annotations

"""Word-processing parser helpers.

Provides DOCX traversal, numbering classification and the reader that turns
a DOCX file into a :class:`~wordhtml.core.models.DocumentModel`.
"""

from .docx_utils import iter_block_items, element_text, table_rows  # noqa: F401
from .numbering import resolve_list_kind, collect_list_kinds  # noqa: F401
from .document_reader import read_document, document_from_docx  # noqa: F401

__all__: list[str] = [
    "iter_block_items",
    "element_text",
    "table_rows",
    "resolve_list_kind",
    "collect_list_kinds",
    "read_document",
    "document_from_docx",
]
