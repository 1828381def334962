"""Tests for list scope selection."""

from __future__ import annotations

from listlint.models import NodeKind, to_string
from listlint.parsing import parse_markdown
from listlint.scope import find_contents_heading, select_lists


def _entries(lists) -> list[str]:
    return [to_string(item.children[0]) for list_node in lists for item in list_node.children]


def test_all_lists_without_contents() -> None:
    root = parse_markdown("# Awesome\n\n- One\n  - Two\n\n## More\n\n- Three\n")
    assert _entries(select_lists(root)) == ["One", "Two", "Three"]


def test_contents_restricts_to_lists_after_following_heading() -> None:
    markdown = (
        "# Awesome\n\n"
        "- Intro list\n\n"
        "## Contents <!-- omit in toc -->\n\n"
        "- [Tools](#tools)\n\n"
        "## Tools\n\n"
        "- Hammer\n  - Nail\n\n"
        "## Related\n\n"
        "- Other\n"
    )
    root = parse_markdown(markdown)
    heading = find_contents_heading(root)
    assert heading is not None and heading.kind is NodeKind.HEADING
    assert _entries(select_lists(root)) == ["Hammer", "Nail", "Other"]


def test_contents_without_following_heading_selects_nothing() -> None:
    root = parse_markdown("# Awesome\n\n## Contents\n\n- [Tools](#tools)\n")
    assert select_lists(root) == []


def test_contents_heading_depth_must_match() -> None:
    root = parse_markdown("# Awesome\n\n### Contents\n\n- One\n\n## Tools\n\n- Two\n")
    assert _entries(select_lists(root)) == ["One", "Two"]
    assert _entries(select_lists(root, contents_depth=3)) == ["Two"]


def test_custom_contents_title() -> None:
    root = parse_markdown("## Table of Contents\n\n- Toc\n\n## Tools\n\n- Tool\n")
    assert _entries(select_lists(root, contents_heading="Table of Contents")) == ["Tool"]
