"""Lint curated markdown link lists for consistent entry formatting."""

from .models import MalformedTreeError, Node, NodeKind, to_string
from .orchestrator import FileReport, Orchestrator
from .parsing import parse_markdown
from .validators import Diagnostic, IssueKind, ListItemValidator

__all__ = [
    "Diagnostic",
    "FileReport",
    "IssueKind",
    "ListItemValidator",
    "MalformedTreeError",
    "Node",
    "NodeKind",
    "Orchestrator",
    "parse_markdown",
    "to_string",
]
