"""Pipeline orchestration for checking markdown files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .config import ListLintConfig, load_config
from .identifiers import IdentifierAllowList
from .logging import FileLogger, get_logger
from .models import Node
from .parsing import parse_markdown
from .scope import select_lists
from .validators import Diagnostic, DiagnosticCollector, ListItemValidator, ValidationError


@dataclass
class FileReport:
    """Diagnostics produced for one markdown file."""

    path: Path
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def as_dicts(self) -> List[Dict[str, object]]:
        return [
            {
                "path": str(self.path),
                "line": diagnostic.line,
                "rule": diagnostic.kind.name.lower(),
                "message": diagnostic.message,
            }
            for diagnostic in self.diagnostics
        ]


class Orchestrator:
    """Coordinates parsing, list selection and entry validation."""

    def __init__(
        self,
        config: ListLintConfig | None = None,
        validator: ListItemValidator | None = None,
    ) -> None:
        self.config = config
        self._validator = validator
        self.logger = get_logger("orchestrator")

    def check_document(self, root: Node, config: Optional[ListLintConfig] = None) -> List[Diagnostic]:
        """Validate every selected list of an already parsed document."""
        effective = config or self.config
        scope_kwargs = {}
        if effective is not None:
            scope_kwargs = {
                "contents_heading": effective.scope.contents_heading,
                "contents_depth": effective.scope.contents_depth,
            }
        lists = select_lists(root, **scope_kwargs)
        self.logger.debug("Selected %d lists for validation", len(lists))

        collector = DiagnosticCollector()
        self._validator_for(effective).validate_lists(lists, collector)
        return collector.diagnostics

    def check_text(self, markdown: str, config: Optional[ListLintConfig] = None) -> List[Diagnostic]:
        return self.check_document(parse_markdown(markdown), config)

    def check_file(self, path: Path | str, *, raise_on_issues: bool = False) -> FileReport:
        """Parse and validate one markdown file."""
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"No markdown file found at {file_path}")

        log = FileLogger(self.logger, file_path)
        config = self.config or load_config(file_path)
        log.info("Checking list entries")
        text = file_path.read_text(encoding="utf-8")
        diagnostics = self.check_text(text, config)
        report = FileReport(path=file_path, diagnostics=diagnostics)

        if diagnostics:
            log.info("%d invalid list entries", len(diagnostics))
            if raise_on_issues:
                raise ValidationError(
                    f"{file_path} has {len(diagnostics)} invalid list entries", diagnostics
                )
        return report

    def check_paths(self, paths: Iterable[Path | str]) -> List[FileReport]:
        return [self.check_file(path) for path in paths]

    def _validator_for(self, config: Optional[ListLintConfig]) -> ListItemValidator:
        if self._validator is not None:
            return self._validator
        if config is None:
            return ListItemValidator()
        identifiers = IdentifierAllowList.from_sources(
            extra=config.identifiers.allow,
            files=config.identifiers.files,
        )
        return ListItemValidator(identifiers)


__all__ = ["FileReport", "Orchestrator"]
