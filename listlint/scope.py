"""Selection of the lists a document's entries are validated from."""

from __future__ import annotations

import re
from typing import List, Optional

from .models import Node, NodeKind, to_string

_HTML_COMMENT = re.compile(r"<!--.*?-->")


def find_all_lists(node: Node) -> List[Node]:
    """Return every list under ``node`` (itself included) in document order."""
    return [child for child in node.walk() if child.kind is NodeKind.LIST]


def find_contents_heading(
    root: Node, *, title: str = "Contents", depth: int = 2
) -> Optional[Node]:
    for node in root.walk():
        if node.kind is not NodeKind.HEADING or node.depth != depth:
            continue
        if _HTML_COMMENT.sub("", to_string(node)).strip() == title:
            return node
    return None


def select_lists(
    root: Node, *, contents_heading: str = "Contents", contents_depth: int = 2
) -> List[Node]:
    """Return the lists whose entries should be validated.

    Documents with a table of contents only have the lists that follow the
    first heading after the contents heading validated; the table of contents
    itself is skipped.
    """
    toc = find_contents_heading(root, title=contents_heading, depth=contents_depth)
    if toc is None:
        return find_all_lists(root)

    siblings = _following_siblings(root, toc)
    start: Optional[int] = None
    for index, sibling in enumerate(siblings):
        if sibling.kind is NodeKind.HEADING:
            start = index + 1
            break
    if start is None:
        return []

    lists: List[Node] = []
    for sibling in siblings[start:]:
        if sibling.kind is NodeKind.LIST:
            lists.extend(find_all_lists(sibling))
    return lists


def _following_siblings(root: Node, target: Node) -> List[Node]:
    for parent in root.walk():
        for index, child in enumerate(parent.children):
            if child is target:
                return parent.children[index + 1 :]
    return []


__all__ = ["find_all_lists", "find_contents_heading", "select_lists"]
