"""Core validation data structures and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from ..models import Node


class IssueKind(str, Enum):
    """Every way a list entry can fail validation, with its message."""

    INVALID_ENTRY = "Invalid list item"
    INVALID_LINK = "Invalid list item link"
    INVALID_LINK_URL = "Invalid list item link URL"
    INVALID_LINK_TEXT = "Invalid list item link text"
    INVALID_SEPARATOR_WHITESPACE = "List item link and description separated by invalid whitespace"
    INVALID_SEPARATOR_DASH = "List item link and description separated by invalid en-dash or em-dash"
    MISSING_SEPARATOR = "List item link and description must be separated with a dash"
    ONLY_BADGES = "List item description must not consist of only badges"
    MISSING_PUNCTUATION = "List item description must end with proper punctuation"
    EMPTY_DESCRIPTION = "List item description must start with a non-empty string"
    INVALID_CASING = "List item description must start with valid casing"
    INVALID_MARKUP = "List item description contains invalid markdown"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A single validation failure attached to the offending node."""

    kind: IssueKind
    node: Optional[Node]

    @property
    def message(self) -> str:
        return self.kind.message

    @property
    def line(self) -> Optional[int]:
        return self.node.line if self.node is not None else None


class Reporter(Protocol):
    """Sink that receives diagnostics as they are found."""

    def report(self, kind: IssueKind, node: Optional[Node]) -> None:
        """Record one diagnostic."""


class DiagnosticCollector:
    """Reporter that keeps diagnostics in emission order."""

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def report(self, kind: IssueKind, node: Optional[Node]) -> None:
        self.diagnostics.append(Diagnostic(kind=kind, node=node))

    def kinds(self) -> List[IssueKind]:
        return [diagnostic.kind for diagnostic in self.diagnostics]


class ValidationError(RuntimeError):
    """Raised when a document has one or more invalid list entries."""

    def __init__(self, message: str, diagnostics: Sequence[Diagnostic]) -> None:
        super().__init__(message)
        self.diagnostics = list(diagnostics)


__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "IssueKind",
    "Reporter",
    "ValidationError",
]
