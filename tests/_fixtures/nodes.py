"""Helpers for building inline node trees in tests."""

from __future__ import annotations

from typing import Optional

from listlint.models import Node, NodeKind


def text(value: str) -> Node:
    return Node(kind=NodeKind.TEXT, value=value)


def code(value: str) -> Node:
    return Node(kind=NodeKind.INLINE_CODE, value=value)


def html(value: str) -> Node:
    return Node(kind=NodeKind.HTML, value=value)


def image(alt: str = "badge", url: str = "https://example.com/badge.svg") -> Node:
    return Node(kind=NodeKind.IMAGE, url=url, alt=alt)


def link(*children: Node, url: Optional[str] = "https://example.com") -> Node:
    return Node(kind=NodeKind.LINK, url=url, children=list(children or (text("Foo"),)))


def link_reference(*children: Node) -> Node:
    return Node(kind=NodeKind.LINK_REFERENCE, children=list(children or (text("Foo"),)))


def emphasis(*children: Node) -> Node:
    return Node(kind=NodeKind.EMPHASIS, children=list(children))


def strong(*children: Node) -> Node:
    return Node(kind=NodeKind.STRONG, children=list(children))


def delete(*children: Node) -> Node:
    return Node(kind=NodeKind.DELETE, children=list(children))


def paragraph(*children: Node) -> Node:
    return Node(kind=NodeKind.PARAGRAPH, children=list(children))


def list_item(*children: Node) -> Node:
    return Node(kind=NodeKind.LIST_ITEM, children=list(children))


def bullet_list(*items: Node) -> Node:
    return Node(kind=NodeKind.LIST, children=list(items))


def entry(*inline: Node) -> Node:
    """A list item holding one paragraph with the given inline children."""
    return list_item(paragraph(*inline))


__all__ = [
    "bullet_list",
    "code",
    "delete",
    "emphasis",
    "entry",
    "html",
    "image",
    "link",
    "link_reference",
    "list_item",
    "paragraph",
    "strong",
    "text",
]
