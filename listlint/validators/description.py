"""Validation of the description that follows an entry link."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from ..casing import CaseStyle, classify
from ..emojis import ends_with_emoji, strip_emoji
from ..identifiers import IdentifierAllowList
from ..logging import get_logger
from ..models import Node, NodeKind, to_string
from .base import IssueKind, Reporter
from .punctuation import has_valid_ending, tokenize_words

DASH_SEPARATOR = " - "

PREFIX_CASE_STYLES = frozenset(
    {CaseStyle.CAMEL, CaseStyle.CAPITAL, CaseStyle.CONSTANT, CaseStyle.PASCAL, CaseStyle.UPPER}
)

DESCRIPTION_NODE_KINDS = frozenset(
    {
        NodeKind.EMPHASIS,
        NodeKind.FOOTNOTE_REFERENCE,
        NodeKind.HTML,
        NodeKind.IMAGE,
        NodeKind.INLINE_CODE,
        NodeKind.LINK,
        NodeKind.LINK_REFERENCE,
        NodeKind.STRONG,
        NodeKind.TEXT,
    }
)

# Node kinds allowed as the last element before any trailing badges.
DESCRIPTION_SUFFIX_NODE_KINDS = frozenset(
    {
        NodeKind.EMPHASIS,
        NodeKind.HTML,
        NodeKind.IMAGE,
        NodeKind.LINK,
        NodeKind.STRONG,
        NodeKind.TEXT,
    }
)

_PARENTHETICAL_ONLY = re.compile(r"^\s\([^)]+\)\s*\Z")
_PARENTHETICAL_WITH_EMOJI = re.compile(r"^\([^)]+\)\Z")
_WHITESPACE_SEPARATOR = re.compile(r"^[\s\u00a0]-[\s\u00a0]")
_DASH_SEPARATOR = re.compile(r"^\s*[/\u2013\u2014]")
_BLANK = re.compile(r"^\s*\Z")
_NON_WORD = re.compile(r"\W+")
_DIGIT = re.compile(r"\d")
_OPENING_QUOTE = re.compile(r"^[\"“'(]")


def is_special_case(description_text: str) -> bool:
    """True for emoji-only and parenthetical-only descriptions."""
    if description_text.startswith(DASH_SEPARATOR):
        return False

    text = strip_emoji(description_text).strip()
    if not text:
        return True

    if _PARENTHETICAL_ONLY.search(description_text):
        return True

    return bool(_PARENTHETICAL_WITH_EMOJI.search(text))


def has_valid_separator(description_text: str, dash_text: str) -> bool:
    if dash_text.startswith(DASH_SEPARATOR):
        return True
    # An entry whose whole description is a trailing emoji marker.
    return ends_with_emoji(dash_text) and description_text == dash_text


def badge_boundary(description: Sequence[Node]) -> int:
    """Return the index of the last element that is not a trailing badge (or -1).

    A leading dash separator followed only by whitespace counts as part of the
    badges, so ' - `Beta` `Stale`' has no description before its badges.
    """
    index = len(description) - 1
    while index >= 0 and _is_badge(description[index], leading=index == 0):
        index -= 1
    return index


def _is_badge(node: Node, *, leading: bool = False) -> bool:
    if node.kind is NodeKind.INLINE_CODE:
        return True
    if node.kind is not NodeKind.TEXT:
        return False
    text = to_string(node)
    if leading and text.startswith(DASH_SEPARATOR):
        text = text[len(DASH_SEPARATOR) :]
    return bool(_BLANK.search(text))


class DescriptionValidator:
    """Checks separator, punctuation, casing and markup of entry descriptions."""

    def __init__(self, identifiers: Optional[IdentifierAllowList] = None) -> None:
        self._identifiers = identifiers if identifiers is not None else IdentifierAllowList()
        self.logger = get_logger("validators.description")

    def validate(self, description: Sequence[Node], reporter: Reporter) -> bool:
        if not description:
            return True

        description_text = to_string(description)
        if is_special_case(description_text):
            self.logger.debug("Description %r accepted as a special case", description_text)
            return True

        dash = description[0]
        if not self._validate_separator(dash, description_text, reporter):
            return False

        boundary = badge_boundary(description)
        if boundary < 0:
            reporter.report(IssueKind.ONLY_BADGES, description[0])
            return False

        suffix = description[boundary]
        if suffix.kind not in DESCRIPTION_SUFFIX_NODE_KINDS:
            reporter.report(IssueKind.MISSING_PUNCTUATION, suffix)
            return False

        has_badges = boundary < len(description) - 1
        before_badges = description[: boundary + 1]

        if suffix.kind is NodeKind.TEXT:
            suffix_text = to_string(before_badges)
            if has_badges:
                suffix_text = suffix_text.rstrip()
            if not has_valid_ending(suffix_text, to_string(suffix)):
                reporter.report(IssueKind.MISSING_PUNCTUATION, suffix)
                return False

        if dash is suffix:
            return self._validate_prefix_casing(dash, reporter)

        for node in before_badges:
            if node.kind not in DESCRIPTION_NODE_KINDS:
                reporter.report(IssueKind.INVALID_MARKUP, node)
                return False

        if len(to_string(dash)) > len(DASH_SEPARATOR):
            return self._validate_prefix_casing(dash, reporter)

        return True

    @staticmethod
    def _validate_separator(dash: Node, description_text: str, reporter: Reporter) -> bool:
        dash_text = to_string(dash)
        if dash.kind is NodeKind.TEXT and has_valid_separator(description_text, dash_text):
            return True

        if _WHITESPACE_SEPARATOR.search(dash_text):
            reporter.report(IssueKind.INVALID_SEPARATOR_WHITESPACE, dash)
        elif _DASH_SEPARATOR.search(dash_text):
            # Editors often autocorrect ' - ' into an en-dash.
            reporter.report(IssueKind.INVALID_SEPARATOR_DASH, dash)
        else:
            reporter.report(IssueKind.MISSING_SEPARATOR, dash)
        return False

    def _validate_prefix_casing(self, dash: Node, reporter: Reporter) -> bool:
        words = tokenize_words(to_string(dash)[len(DASH_SEPARATOR):])
        if not words:
            reporter.report(IssueKind.EMPTY_DESCRIPTION, dash)
            return False

        first_word = words[0]
        if self._has_valid_casing(first_word):
            return True

        self.logger.debug("First word %r failed the casing check", first_word)
        reporter.report(IssueKind.INVALID_CASING, dash)
        return False

    def _has_valid_casing(self, word: str) -> bool:
        if classify(_NON_WORD.sub("", word)) in PREFIX_CASE_STYLES:
            return True
        if _DIGIT.search(word) or _OPENING_QUOTE.search(word):
            return True
        return self._identifiers.contains(word)


__all__ = [
    "DASH_SEPARATOR",
    "DESCRIPTION_NODE_KINDS",
    "DESCRIPTION_SUFFIX_NODE_KINDS",
    "DescriptionValidator",
    "PREFIX_CASE_STYLES",
    "badge_boundary",
    "has_valid_separator",
    "is_special_case",
]
