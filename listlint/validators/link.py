"""Validation of the link that opens a list entry."""

from __future__ import annotations

from ..models import Node, NodeKind, to_string
from ..urls import is_absolute_url
from .base import IssueKind, Reporter

LINK_CHILD_KINDS = frozenset({NodeKind.EMPHASIS, NodeKind.INLINE_CODE, NodeKind.TEXT})


class LinkValidator:
    """Checks the kind, URL, text and inline content of an entry link."""

    def validate(self, link: Node, reporter: Reporter) -> bool:
        return self._validate_link(link, reporter) and self._validate_children(link, reporter)

    @staticmethod
    def _validate_link(link: Node, reporter: Reporter) -> bool:
        # Whether a reference resolves to a definition is checked elsewhere.
        if link.kind is NodeKind.LINK_REFERENCE:
            return True

        if link.kind is not NodeKind.LINK:
            reporter.report(IssueKind.INVALID_LINK, link)
            return False

        if not is_absolute_url(link.url):
            reporter.report(IssueKind.INVALID_LINK_URL, link)
            return False

        if not to_string(link):
            reporter.report(IssueKind.INVALID_LINK_TEXT, link)
            return False

        return True

    @staticmethod
    def _validate_children(link: Node, reporter: Reporter) -> bool:
        for child in link.children:
            if child.kind not in LINK_CHILD_KINDS:
                reporter.report(IssueKind.INVALID_LINK, child)
                return False
        return True


__all__ = ["LINK_CHILD_KINDS", "LinkValidator"]
