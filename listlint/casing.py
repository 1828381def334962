"""Casing style classification for single words."""

from __future__ import annotations

import re
from enum import Enum


class CaseStyle(str, Enum):
    """Casing styles recognised by :func:`classify`."""

    LOWER = "lower"
    UPPER = "upper"
    CAPITAL = "capital"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    CONSTANT = "constant"
    OTHER = "other"


_CAMEL_PATTERN = re.compile(r"^[a-z][a-z0-9]*(?:[A-Z][a-z0-9]+)+$")
# Every capital starts a hump of at least one lowercase letter or digit.
_PASCAL_PATTERN = re.compile(r"^(?:[A-Z][a-z0-9]+){2,}$")
_LETTER_PATTERN = re.compile(r"[^\W\d_]")


def classify(word: str) -> CaseStyle:
    """Classify ``word`` (expected to contain only word characters)."""
    if not _LETTER_PATTERN.search(word):
        return CaseStyle.OTHER
    if "_" in word:
        stripped = word.strip("_")
        if stripped.isupper():
            return CaseStyle.CONSTANT
        if stripped.islower():
            return CaseStyle.SNAKE
        return CaseStyle.OTHER
    if word.isupper():
        return CaseStyle.UPPER
    if word.islower():
        return CaseStyle.LOWER
    if word[0].isupper():
        if word[1:].islower() or not _LETTER_PATTERN.search(word[1:]):
            return CaseStyle.CAPITAL
        if _PASCAL_PATTERN.match(word):
            return CaseStyle.PASCAL
        return CaseStyle.OTHER
    if _CAMEL_PATTERN.match(word):
        return CaseStyle.CAMEL
    return CaseStyle.OTHER


__all__ = ["CaseStyle", "classify"]
