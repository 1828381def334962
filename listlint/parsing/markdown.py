"""Markdown parsing into the mdast-shaped :class:`~listlint.models.Node` tree."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin

from ..models import Node, NodeKind

_BLOCK_KINDS: Dict[str, NodeKind] = {
    "heading": NodeKind.HEADING,
    "paragraph": NodeKind.PARAGRAPH,
    "bullet_list": NodeKind.LIST,
    "ordered_list": NodeKind.LIST,
    "list_item": NodeKind.LIST_ITEM,
    "blockquote": NodeKind.BLOCKQUOTE,
    "table": NodeKind.TABLE,
    "tr": NodeKind.TABLE_ROW,
    "th": NodeKind.TABLE_CELL,
    "td": NodeKind.TABLE_CELL,
    "footnote": NodeKind.FOOTNOTE_DEFINITION,
}

_INLINE_KINDS: Dict[str, NodeKind] = {
    "em": NodeKind.EMPHASIS,
    "strong": NodeKind.STRONG,
    "s": NodeKind.DELETE,
}

_TEXT_TOKENS = frozenset({"text", "text_special"})


@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    # store_labels records the reference label on links written as [text][label] or [text].
    md = (
        MarkdownIt("commonmark", {"store_labels": True, "linkify": True})
        .enable(["strikethrough", "table", "linkify"])
        .use(footnote_plugin)
    )
    # Only URLs with an explicit scheme become links, so "README.md" stays text.
    md.linkify.set({"fuzzy_link": False, "fuzzy_email": False})
    return md


def parse_markdown(text: str) -> Node:
    """Parse ``text`` into a root node."""
    tokens = _parser().parse(text)
    return _TreeBuilder().build(tokens)


class _TreeBuilder:
    def __init__(self) -> None:
        self.root = Node(kind=NodeKind.ROOT, line=1)
        self.stack: List[Optional[Node]] = [self.root]

    @property
    def parent(self) -> Node:
        for node in reversed(self.stack):
            if node is not None:
                return node
        return self.root

    def build(self, tokens: Sequence[Token]) -> Node:
        for token in tokens:
            self._block(token)
        return self.root

    def _block(self, token: Token) -> None:
        line = token.map[0] + 1 if token.map else None
        if token.nesting == 1:
            kind = _BLOCK_KINDS.get(token.type[: -len("_open")])
            if kind is None:
                # Wrapper tokens (thead, tbody, footnote_block) have no node of their own.
                self.stack.append(None)
                return
            depth = int(token.tag[1]) if kind is NodeKind.HEADING else None
            node = Node(kind=kind, depth=depth, line=line)
            self.parent.children.append(node)
            self.stack.append(node)
        elif token.nesting == -1:
            self.stack.pop()
        elif token.type == "inline":
            self._inline(token.children or [], self.parent, line)
        elif token.type in {"fence", "code_block"}:
            self.parent.children.append(Node(kind=NodeKind.CODE, value=token.content, line=line))
        elif token.type == "html_block":
            self.parent.children.append(Node(kind=NodeKind.HTML, value=token.content, line=line))
        elif token.type == "hr":
            self.parent.children.append(Node(kind=NodeKind.THEMATIC_BREAK, line=line))

    def _inline(self, tokens: Sequence[Token], container: Node, line: Optional[int]) -> None:
        stack: List[Node] = [container]
        for token in tokens:
            parent = stack[-1]
            if token.nesting == 1:
                node = self._open_inline(token, line)
                parent.children.append(node)
                stack.append(node)
            elif token.nesting == -1:
                stack.pop()
            elif token.type in _TEXT_TOKENS:
                # Delimiter runs such as a leading "**" leave empty text tokens behind.
                if token.content:
                    _append_text(parent, token.content, line)
            elif token.type == "softbreak":
                _append_text(parent, "\n", line)
            elif token.type == "hardbreak":
                parent.children.append(Node(kind=NodeKind.BREAK, line=line))
            elif token.type == "code_inline":
                parent.children.append(Node(kind=NodeKind.INLINE_CODE, value=token.content, line=line))
            elif token.type == "html_inline":
                parent.children.append(Node(kind=NodeKind.HTML, value=token.content, line=line))
            elif token.type == "image":
                parent.children.append(
                    Node(
                        kind=NodeKind.IMAGE,
                        url=str(token.attrGet("src") or ""),
                        alt=token.content,
                        line=line,
                    )
                )
            elif token.type == "footnote_ref":
                parent.children.append(Node(kind=NodeKind.FOOTNOTE_REFERENCE, line=line))

    @staticmethod
    def _open_inline(token: Token, line: Optional[int]) -> Node:
        if token.type == "link_open":
            if token.meta.get("label"):
                return Node(kind=NodeKind.LINK_REFERENCE, line=line)
            return Node(kind=NodeKind.LINK, url=str(token.attrGet("href") or ""), line=line)
        kind = _INLINE_KINDS.get(token.type[: -len("_open")])
        if kind is None:
            raise ValueError(f"Unsupported inline token: {token.type}")
        return Node(kind=kind, line=line)


def _append_text(parent: Node, value: str, line: Optional[int]) -> None:
    if parent.children and parent.children[-1].kind is NodeKind.TEXT:
        last = parent.children[-1]
        last.value = (last.value or "") + value
        return
    parent.children.append(Node(kind=NodeKind.TEXT, value=value, line=line))


__all__ = ["parse_markdown"]
