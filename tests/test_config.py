"""Tests for listlint.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from listlint.config import ConfigError, ListLintConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ListLintConfig)
    assert config.root == tmp_path.resolve()
    assert config.identifiers.allow == []
    assert config.identifiers.files == []
    assert config.scope.contents_heading == "Contents"
    assert config.scope.contents_depth == 2


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".listlint.yml"
    config_file.write_text(
        """
identifiers:
  allow: [zlib, libuv]
  files:
    - words.txt
scope:
  contents_heading: "Table of Contents"
  contents_depth: 3
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.identifiers.allow == ["zlib", "libuv"]
    assert config.identifiers.files == [tmp_path.resolve() / "words.txt"]
    assert config.scope.contents_heading == "Table of Contents"
    assert config.scope.contents_depth == 3


def test_load_config_next_to_markdown_file(tmp_path: Path) -> None:
    (tmp_path / ".listlint.yml").write_text("identifiers:\n  allow: musl\n", encoding="utf-8")

    config = load_config(tmp_path / "README.md")

    assert config.identifiers.allow == ["musl"]


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".listlint.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".listlint.yml").write_text("scope: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_out_of_range_depth(tmp_path: Path) -> None:
    (tmp_path / ".listlint.yml").write_text("scope:\n  contents_depth: 9\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
