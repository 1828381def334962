from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable, List, Mapping, Optional

import pytest

from listlint.orchestrator import Orchestrator
from listlint.validators import DiagnosticCollector, IssueKind


@pytest.fixture
def collector() -> DiagnosticCollector:
    """Provide a fresh diagnostic sink for a single validation pass."""
    return DiagnosticCollector()


@pytest.fixture
def check_markdown() -> Callable[[str], List[IssueKind]]:
    """Return a helper that validates markdown text and yields the issue kinds."""
    orchestrator = Orchestrator()

    def _check(markdown: str) -> List[IssueKind]:
        diagnostics = orchestrator.check_text(textwrap.dedent(markdown).lstrip("\n"))
        return [diagnostic.kind for diagnostic in diagnostics]

    return _check


@pytest.fixture
def write_markdown(tmp_path: Path) -> Callable[..., Path]:
    """Write a markdown document (and optional extra files) into tmp_path."""

    def _write(
        markdown: str,
        name: str = "README.md",
        files: Optional[Mapping[str, str]] = None,
    ) -> Path:
        for relative, content in {name: markdown, **(files or {})}.items():
            (tmp_path / relative).write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return tmp_path / name

    return _write
