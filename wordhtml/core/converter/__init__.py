from __future__ import annotations

"""DOCX to HTML conversion logic.

Key modules:
- docx_to_html: tree building, serialisation and the file-level entry point
- helpers: heading detection and HTML element builders
"""

from .docx_to_html import build_html_tree, convert_docx_to_html, render_html, serialize_html
from .helpers import get_heading_level

__all__ = [
    "build_html_tree",
    "serialize_html",
    "render_html",
    "convert_docx_to_html",
    "get_heading_level",
]
