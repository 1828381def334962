"""Terminal punctuation rules for list item descriptions.

Each rule is a small predicate over the flattened description text so it can be
exercised on its own; :func:`has_valid_ending` chains them in order.
"""

from __future__ import annotations

import re
from typing import List

from ..emojis import ends_with_emoji

_FULLY_BACKTICKED = re.compile(r"^`.*[.!?…]*`[.!?…]*\Z")
_MULTIPLE_BACKTICK_SPANS = re.compile(r"^`.+`.+`.+\Z")
_PUNCTUATION_AFTER_QUOTE = re.compile(r"[\"”][.!?…]+\Z")
_PUNCTUATION_BEFORE_QUOTE = re.compile(r"[.!?…][\"”][.!?…]+\Z")
_ENDS_WITH_PUNCTUATION = re.compile(r"[.!?…][\"”]?\Z")
_ANY_PUNCTUATION = re.compile(r"[.!?…]")
_CLOSING_PARENTHESIS = re.compile(r"\)\s*\Z")
_WORD_SEPARATORS = re.compile(r"[- ;./']")


def tokenize_words(text: str) -> List[str]:
    """Split ``text`` on dashes, spaces, semicolons, periods, slashes and apostrophes."""
    return [token for token in _WORD_SEPARATORS.split(text) if token]


def is_fully_backticked(text: str) -> bool:
    """True when the whole text is one code span, optionally followed by punctuation."""
    return bool(_FULLY_BACKTICKED.search(text))


def has_multiple_backtick_spans(text: str) -> bool:
    return bool(_MULTIPLE_BACKTICK_SPANS.search(text))


def ends_with_punctuation_after_quote(text: str) -> bool:
    """True for endings such as ``"quoted".`` where the punctuation follows a quote."""
    return bool(_PUNCTUATION_AFTER_QUOTE.search(text))


def has_punctuation_before_quote(text: str) -> bool:
    """True for doubled endings such as ``"quoted.".``."""
    return bool(_PUNCTUATION_BEFORE_QUOTE.search(text))


def ends_with_punctuation(text: str) -> bool:
    """True when text ends with ``.``, ``!``, ``?`` or ``…``, optionally closed by a quote."""
    return bool(_ENDS_WITH_PUNCTUATION.search(text))


def has_punctuation(text: str) -> bool:
    return bool(_ANY_PUNCTUATION.search(text))


def ends_with_parenthesis(text: str) -> bool:
    return bool(_CLOSING_PARENTHESIS.search(text))


def is_short_emoji_ending(text: str) -> bool:
    """True for unpunctuated text of at most two words whose last word ends in an emoji."""
    tokens = tokenize_words(text)
    if not tokens or len(tokens) > 2:
        return False
    return ends_with_emoji(tokens[-1])


def has_valid_ending(description_text: str, suffix_text: str) -> bool:
    """Decide whether a description ends acceptably.

    ``description_text`` is the flattened description (before any badges) and
    ``suffix_text`` is the literal text of its last node.
    """
    if is_fully_backticked(description_text):
        return has_multiple_backtick_spans(description_text)

    if ends_with_punctuation_after_quote(description_text):
        return not has_punctuation_before_quote(description_text)

    if ends_with_punctuation(description_text):
        return True

    if not has_punctuation(description_text) and not is_short_emoji_ending(description_text):
        return False

    if ends_with_parenthesis(suffix_text):
        return True

    return ends_with_emoji(suffix_text)


__all__ = [
    "ends_with_parenthesis",
    "ends_with_punctuation",
    "ends_with_punctuation_after_quote",
    "has_multiple_backtick_spans",
    "has_punctuation",
    "has_punctuation_before_quote",
    "has_valid_ending",
    "is_fully_backticked",
    "is_short_emoji_ending",
    "tokenize_words",
]
