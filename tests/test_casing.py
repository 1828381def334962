"""Tests for the casing classifier."""

from __future__ import annotations

import pytest

from listlint.casing import CaseStyle, classify


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("Tool", CaseStyle.CAPITAL),
        ("A", CaseStyle.UPPER),
        ("API", CaseStyle.UPPER),
        ("GitHub", CaseStyle.PASCAL),
        ("Tool2Go", CaseStyle.PASCAL),
        ("APIs", CaseStyle.OTHER),
        ("HTTPServer", CaseStyle.OTHER),
        ("jQuery", CaseStyle.CAMEL),
        ("getValue", CaseStyle.CAMEL),
        ("MAX_SIZE", CaseStyle.CONSTANT),
        ("snake_case", CaseStyle.SNAKE),
        ("tool", CaseStyle.LOWER),
        ("iOS", CaseStyle.OTHER),
        ("123", CaseStyle.OTHER),
        ("", CaseStyle.OTHER),
    ],
)
def test_classify(word: str, expected: CaseStyle) -> None:
    assert classify(word) is expected
