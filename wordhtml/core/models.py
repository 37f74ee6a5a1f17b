from __future__ import annotations

"""Shared data structures used across the Word Html Toolkit core.

This module is intentionally free of I/O code so that the contained objects
can be built by the DOCX reader or directly by unit-tests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

__all__ = [
    "ListKind",
    "ParagraphBlock",
    "TableBlock",
    "Block",
    "DocumentModel",
    "ConversionSettings",
]


class ListKind(str, Enum):
    """HTML list flavour; the value is the tag name."""

    ORDERED = "ol"
    UNORDERED = "ul"


@dataclass
class ParagraphBlock:
    """A body paragraph.

    Attributes
    ----------
    text
        Raw text content (every ``w:t`` run text, in order).
    style_id
        Paragraph style id such as ``Heading2``, or None.
    num_id
        Numbering id the paragraph refers to; None when it is not a list item.
    """

    text: str = ""
    style_id: Optional[str] = None
    num_id: Optional[int] = None

    @property
    def is_list_item(self) -> bool:
        return self.num_id is not None


@dataclass
class TableBlock:
    """A body table as rows of cell texts."""

    rows: List[List[str]] = field(default_factory=list)


Block = Union[ParagraphBlock, TableBlock]


@dataclass
class DocumentModel:
    """Ordered body blocks plus the list classification of each numbering id."""

    blocks: List[Block] = field(default_factory=list)
    list_kinds: Dict[int, ListKind] = field(default_factory=dict)
    source_path: Optional[str] = None

    def list_kind(self, num_id: int) -> ListKind:
        # Unknown numbering definitions render as ordered lists
        return self.list_kinds.get(num_id, ListKind.ORDERED)


@dataclass
class ConversionSettings:
    """Effective conversion options (see ``config/conversion.yml``)."""

    min_blob_length: int = 30
    output_extension: str = ".html"
    invalid_heading_style: str = "error"

    @classmethod
    def from_config(cls) -> "ConversionSettings":
        """Build settings from :class:`ConfigManager`, ignoring unknown keys."""
        from wordhtml.config import ConfigManager

        cfg = ConfigManager().get_conversion_config() or {}
        defaults = cls()
        try:
            min_blob_length = int(cfg.get("min_blob_length", defaults.min_blob_length))
        except (TypeError, ValueError):
            min_blob_length = defaults.min_blob_length
        ext = str(cfg.get("output_extension", defaults.output_extension))
        if not ext.startswith("."):
            ext = f".{ext}"
        policy = str(cfg.get("invalid_heading_style", defaults.invalid_heading_style)).lower()
        if policy not in ("error", "paragraph"):
            policy = defaults.invalid_heading_style
        return cls(
            min_blob_length=min_blob_length,
            output_extension=ext,
            invalid_heading_style=policy,
        )
