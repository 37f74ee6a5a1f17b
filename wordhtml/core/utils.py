from __future__ import annotations

"""Simple reusable helper functions.

Text and path helpers are side-effect-free; :func:`save_html_file` is the
single place that writes converted markup to disk.
"""

from pathlib import Path
import logging
import os
import re
import shutil
import tempfile

__all__ = [
    "BASE64_ALPHABET",
    "strip_base64_blobs",
    "derive_output_path",
    "save_html_file",
]

logger = logging.getLogger(__name__)

BASE64_ALPHABET = "A-Za-z0-9+/="

_BLOB_PATTERNS: dict[int, re.Pattern[str]] = {}


def _blob_pattern(min_length: int) -> re.Pattern[str]:
    pattern = _BLOB_PATTERNS.get(min_length)
    if pattern is None:
        pattern = re.compile(rf"[{BASE64_ALPHABET}]{{{min_length},}}")
        _BLOB_PATTERNS[min_length] = pattern
    return pattern


def strip_base64_blobs(markup: str, min_length: int = 30) -> str:
    """Remove every run of *min_length* or more base64 alphabet characters.

    The filter runs over the whole string, tags and attributes included, so
    a long enough tag name or attribute value is removed as well.

    Examples:
        >>> strip_base64_blobs("<p>" + "A" * 40 + "</p>")
        '<p></p>'
        >>> strip_base64_blobs("<p>" + "A" * 29 + "</p>") == "<p>" + "A" * 29 + "</p>"
        True
    """
    if min_length < 1:
        raise ValueError(f"min_length must be positive, got {min_length}")
    return _blob_pattern(min_length).sub("", markup)


def derive_output_path(input_path: str | Path, extension: str = ".html") -> Path:
    """Return the output path: same folder and stem as *input_path*, new extension."""
    input_path = Path(input_path)
    return input_path.with_name(input_path.stem + extension)


def save_html_file(markup: str, path: str | Path) -> None:
    """Write *markup* to *path* as UTF-8, replacing any existing file in one step.

    The content goes to a temporary file in the destination folder first and
    is moved over *path* once fully written, so a failed write never leaves a
    truncated HTML file behind.
    """
    path = Path(path)
    data = markup.encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}_", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        # mkstemp creates owner-only files; keep the permissions of a replaced output
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: wrote HTML path=%s bytes=%d", path, len(data))
    except Exception:
        logger.error("I/O FAIL: write HTML path=%s", path, exc_info=True)
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
