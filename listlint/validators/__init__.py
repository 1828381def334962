"""Validators for curated list entries."""

from .base import (
    Diagnostic,
    DiagnosticCollector,
    IssueKind,
    Reporter,
    ValidationError,
)
from .description import DescriptionValidator
from .entry import DecomposedEntry, EntryStatus, decompose_entry
from .link import LinkValidator
from .list_item import ListItemValidator

__all__ = [
    "DecomposedEntry",
    "DescriptionValidator",
    "Diagnostic",
    "DiagnosticCollector",
    "EntryStatus",
    "IssueKind",
    "LinkValidator",
    "ListItemValidator",
    "Reporter",
    "ValidationError",
    "decompose_entry",
]
