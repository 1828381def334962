"""Core data models shared across listlint components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union


class NodeKind(str, Enum):
    """Closed set of markdown node kinds produced by the parser."""

    ROOT = "root"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    CODE = "code"
    HTML = "html"
    THEMATIC_BREAK = "thematicBreak"
    TABLE = "table"
    TABLE_ROW = "tableRow"
    TABLE_CELL = "tableCell"
    TEXT = "text"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    DELETE = "delete"
    INLINE_CODE = "inlineCode"
    BREAK = "break"
    LINK = "link"
    LINK_REFERENCE = "linkReference"
    IMAGE = "image"
    FOOTNOTE_REFERENCE = "footnoteReference"
    FOOTNOTE_DEFINITION = "footnoteDefinition"


_VALUE_KINDS = frozenset({NodeKind.TEXT, NodeKind.INLINE_CODE, NodeKind.HTML, NodeKind.CODE})


class MalformedTreeError(RuntimeError):
    """Raised when a node is missing a field its kind requires."""


@dataclass
class Node:
    """A markdown tree node in mdast shape."""

    kind: NodeKind
    children: List["Node"] = field(default_factory=list)
    value: Optional[str] = None
    url: Optional[str] = None
    alt: Optional[str] = None
    depth: Optional[int] = None
    line: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind in _VALUE_KINDS and self.value is None:
            raise MalformedTreeError(f"{self.kind.value} node requires a value")
        if self.kind is NodeKind.LINK and self.url is None:
            raise MalformedTreeError("link node requires a url")

    def walk(self) -> Iterable["Node"]:
        """Yield this node and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


def to_string(node: Union[Node, Iterable[Node]]) -> str:
    """Flatten a node (or a sequence of nodes) to its plain text content."""
    if not isinstance(node, Node):
        return "".join(to_string(child) for child in node)
    if node.value is not None:
        return node.value
    if node.kind is NodeKind.IMAGE:
        return node.alt or ""
    return "".join(to_string(child) for child in node.children)


__all__ = ["MalformedTreeError", "Node", "NodeKind", "to_string"]
