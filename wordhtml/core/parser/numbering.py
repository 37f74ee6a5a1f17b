from __future__ import annotations

"""List classification from Word numbering definitions.

A numbering id (``w:numId``) points to a ``w:num`` instance, which points to
an ``w:abstractNum`` definition.  Only the definition's ``w:multiLevelType``
is consulted: ``singleLevel`` and ``hybridMultilevel`` lists become ``<ul>``,
everything else becomes ``<ol>``.  Number formats (decimal, roman, bullet
glyphs) are not looked at.
"""

from typing import Dict, Iterable, Optional
import logging

from docx.document import Document  # type: ignore
from docx.oxml.ns import qn  # type: ignore

from wordhtml.core.models import ListKind

logger = logging.getLogger(__name__)

__all__ = [
    "UNORDERED_MULTILEVEL_TYPES",
    "get_numbering_root",
    "resolve_list_kind",
    "collect_list_kinds",
]

UNORDERED_MULTILEVEL_TYPES = frozenset({"singleLevel", "hybridMultilevel"})


def get_numbering_root(doc: Document):
    """Return the ``w:numbering`` element of *doc*, or None when it has none."""
    try:
        return doc.part.numbering_part.element
    except (KeyError, NotImplementedError):
        # python-docx cannot create a numbering part for documents without one
        return None


def _child_with_attr(parent, tag: str, attr: str, value: str):
    for child in parent.iterchildren(qn(tag)):
        if child.get(qn(attr)) == value:
            return child
    return None


def _multilevel_type(numbering_root, num_id: int) -> Optional[str]:
    # Attribute values are compared in Python, never spliced into an XPath
    num = _child_with_attr(numbering_root, "w:num", "w:numId", str(num_id))
    abs_ref = num.find(qn("w:abstractNumId")) if num is not None else None
    abs_id = abs_ref.get(qn("w:val")) if abs_ref is not None else None
    if abs_id is None:
        return None
    abstract = _child_with_attr(numbering_root, "w:abstractNum", "w:abstractNumId", abs_id)
    ml_type = abstract.find(qn("w:multiLevelType")) if abstract is not None else None
    return ml_type.get(qn("w:val")) if ml_type is not None else None


def resolve_list_kind(numbering_root, num_id: int) -> ListKind:
    """Classify the list behind *num_id*.

    A missing numbering part, instance, definition or multi-level type all
    resolve to :attr:`ListKind.ORDERED`.
    """
    if numbering_root is None:
        return ListKind.ORDERED
    ml_type = _multilevel_type(numbering_root, num_id)
    if ml_type in UNORDERED_MULTILEVEL_TYPES:
        return ListKind.UNORDERED
    return ListKind.ORDERED


def collect_list_kinds(doc: Document, num_ids: Iterable[int]) -> Dict[int, ListKind]:
    """Resolve every distinct id in *num_ids* against the numbering part of *doc*."""
    numbering_root = get_numbering_root(doc)
    kinds: Dict[int, ListKind] = {}
    for num_id in num_ids:
        if num_id not in kinds:
            kinds[num_id] = resolve_list_kind(numbering_root, num_id)
    if kinds:
        logger.debug("List kinds: %s", {k: v.value for k, v in sorted(kinds.items())})
    return kinds
