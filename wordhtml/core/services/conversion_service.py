from __future__ import annotations

"""High-level conversion service for DOCX to HTML transformation.

Entry-point for any front-end (CLI, scripts) that needs to turn a document
into an HTML file next to it.  Validates the input, runs the conversion in
memory and writes the result in one step.
"""

import logging
from pathlib import Path
from typing import Optional

from wordhtml.core.converter import convert_docx_to_html
from wordhtml.core.exceptions import (
    ConversionError,
    InputNotFoundError,
    MalformedDocumentError,
    OutputWriteError,
)
from wordhtml.core.models import ConversionSettings
from wordhtml.core.utils import derive_output_path, save_html_file

logger = logging.getLogger(__name__)

__all__ = ["ConversionService"]


class ConversionService:
    """Business-logic façade with no console or prompt handling."""

    def __init__(self, settings: Optional[ConversionSettings] = None) -> None:
        self.settings = settings or ConversionSettings.from_config()
        self.logger = logger

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def output_path_for(self, input_path: str | Path) -> Path:
        """Return where the HTML for *input_path* is written."""
        return derive_output_path(input_path, self.settings.output_extension)

    def render(self, input_path: str | Path) -> str:
        """Validate *input_path* and return its cleaned HTML markup.

        Raises:
            InputNotFoundError: If the path is missing or not a regular file
            MalformedDocumentError: If the document cannot be converted
        """
        input_path = Path(input_path)
        if not input_path.is_file():
            raise InputNotFoundError(input_path)
        try:
            return convert_docx_to_html(input_path, self.settings)
        except ConversionError:
            raise
        except (OSError, ValueError) as e:
            self.logger.error("Conversion failed: %s", e, exc_info=True)
            raise MalformedDocumentError(f"Conversion failed: {e}", input_path, e) from e

    def convert(self, input_path: str | Path) -> Path:
        """Convert *input_path* and write the HTML file next to it.

        An existing output file is overwritten.  The markup is fully built
        before anything is written.

        Returns:
            Path of the written HTML file

        Raises:
            InputNotFoundError: If the path is missing or not a regular file
            MalformedDocumentError: If the document cannot be converted
            OutputWriteError: If the HTML file cannot be written
        """
        input_path = Path(input_path)
        self.logger.info("Convert: %s", input_path)

        markup = self.render(input_path)

        output_path = self.output_path_for(input_path)
        try:
            save_html_file(markup, output_path)
        except OSError as e:
            raise OutputWriteError(f"Cannot write HTML file: {e}", output_path, e) from e

        self.logger.info("Conversion OK: %s -> %s", input_path, output_path)
        return output_path
