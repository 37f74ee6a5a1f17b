from __future__ import annotations

"""Conversion exception classes.

A missing input is recoverable (the caller asks for another path); every
other error is fatal for the conversion attempt that raised it.
"""

from pathlib import Path
from typing import Optional

__all__ = [
    "ConversionError",
    "InputNotFoundError",
    "MalformedDocumentError",
    "OutputWriteError",
]


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, file_path: Optional[str | Path] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.file_path = str(file_path) if file_path is not None else None
        self.cause = cause

    def __str__(self) -> str:
        if self.file_path:
            return f"[{self.file_path}] {super().__str__()}"
        return super().__str__()


class InputNotFoundError(ConversionError):
    """Raised when the input path does not name an existing file."""

    def __init__(self, file_path: str | Path) -> None:
        super().__init__("Input file not found", file_path)


class MalformedDocumentError(ConversionError):
    """Raised when the document cannot be opened or breaks a structural assumption.

    Examples are a container python-docx cannot read, a ``Heading`` style
    without a numeric level, or list numbering without a numbering id.
    """
    pass


class OutputWriteError(ConversionError):
    """Raised when the HTML file cannot be written."""
    pass
