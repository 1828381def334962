"""Emoji matching helpers backed by the ``emoji`` package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import emoji


@dataclass(frozen=True)
class EmojiMatch:
    """Location of one emoji inside a string."""

    start: int
    end: int
    value: str


def find_emoji_matches(text: str) -> List[EmojiMatch]:
    """Return non-overlapping emoji matches in ``text`` from left to right."""
    return [
        EmojiMatch(start=item["match_start"], end=item["match_end"], value=item["emoji"])
        for item in emoji.emoji_list(text)
    ]


def strip_emoji(text: str) -> str:
    return emoji.replace_emoji(text, replace="")


def ends_with_emoji(text: str) -> bool:
    """Return True when the last visible content of ``text`` is an emoji."""
    matches = find_emoji_matches(text)
    if not matches:
        return False
    return matches[-1].end >= len(text)


__all__ = ["EmojiMatch", "ends_with_emoji", "find_emoji_matches", "strip_emoji"]
