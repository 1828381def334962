"""Splitting a list entry into its link and its description."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..models import Node, NodeKind
from .base import IssueKind, Reporter

LINK_KINDS = frozenset({NodeKind.LINK, NodeKind.LINK_REFERENCE})


class EntryStatus(Enum):
    INVALID = "invalid"
    EXEMPT = "exempt"
    LINKED = "linked"


@dataclass(frozen=True)
class DecomposedEntry:
    """Result of decomposing one list item."""

    status: EntryStatus
    link: Optional[Node] = None
    description: Tuple[Node, ...] = ()


def decompose_entry(item: Node, reporter: Reporter) -> DecomposedEntry:
    """Locate the link candidate and the description of ``item``.

    Entries whose paragraph starts with plain text (category separators, free
    form notes) are exempt from every further check.
    """
    paragraph = item.children[0] if item.children else None
    if (
        paragraph is None
        or paragraph.kind is not NodeKind.PARAGRAPH
        or not paragraph.children
    ):
        reporter.report(IssueKind.INVALID_ENTRY, paragraph or item)
        return DecomposedEntry(status=EntryStatus.INVALID)

    if paragraph.children[0].kind is NodeKind.TEXT:
        return DecomposedEntry(status=EntryStatus.EXEMPT)

    link, *description = paragraph.children
    # Leading images or badges may precede the link: '{image} {text} {link} { - description}'.
    while link.kind not in LINK_KINDS and len(description) > 1:
        link, description = description[0], description[1:]

    return DecomposedEntry(status=EntryStatus.LINKED, link=link, description=tuple(description))


__all__ = ["DecomposedEntry", "EntryStatus", "LINK_KINDS", "decompose_entry"]
