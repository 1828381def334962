"""Configuration loading for listlint (.listlint.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".listlint.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class IdentifierConfig:
    """Extra words exempt from the description casing rule."""

    allow: List[str] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)


@dataclass
class ScopeConfig:
    """Controls which lists of a document are validated."""

    contents_heading: str = "Contents"
    contents_depth: int = 2


@dataclass
class ListLintConfig:
    """Represents the settings defined in .listlint.yml."""

    root: Path
    identifiers: IdentifierConfig = field(default_factory=IdentifierConfig)
    scope: ScopeConfig = field(default_factory=ScopeConfig)


def load_config(config_path: Path) -> ListLintConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ListLintConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    identifiers = IdentifierConfig()
    identifier_data = _as_dict(data.get("identifiers"))
    if identifier_data:
        identifiers.allow = _as_str_list(identifier_data.get("allow"))
        identifiers.files = [root / name for name in _as_str_list(identifier_data.get("files"))]

    scope = ScopeConfig()
    scope_data = _as_dict(data.get("scope"))
    if scope_data:
        heading = _as_str(scope_data.get("contents_heading"))
        if heading:
            scope.contents_heading = heading
        depth = _as_int(scope_data.get("contents_depth"))
        if depth is not None:
            if not 1 <= depth <= 6:
                raise ConfigError("scope.contents_depth must be between 1 and 6")
            scope.contents_depth = depth

    return ListLintConfig(root=root, identifiers=identifiers, scope=scope)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix.lower() in {".md", ".markdown"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "IdentifierConfig",
    "ListLintConfig",
    "ScopeConfig",
    "load_config",
]
