"""Top-level package for Word Html Toolkit.

Front-ends should only depend on the public API exposed here rather than
importing internal modules directly.
"""

from .core.converter import convert_docx_to_html, render_html  # re-export for convenience
from .core.exceptions import (
    ConversionError,
    InputNotFoundError,
    MalformedDocumentError,
    OutputWriteError,
)
from .core.models import ConversionSettings, DocumentModel
from .core.services import ConversionService

__all__: list[str] = [
    "convert_docx_to_html",
    "render_html",
    "ConversionService",
    "ConversionSettings",
    "DocumentModel",
    "ConversionError",
    "InputNotFoundError",
    "MalformedDocumentError",
    "OutputWriteError",
]
