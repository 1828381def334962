"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from listlint.cli import _build_parser, main

VALID = "# Awesome\n\n- [Foo](https://example.com) - A short tool.\n"
INVALID = "# Awesome\n\n- [Foo](https://example.com) - a short tool.\n- [Bar](https://example.com) – Bar.\n"


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    assert parser.parse_args(["--verbose", "check"]).verbose is True
    assert parser.parse_args(["check", "--verbose"]).verbose is True


def test_cli_defaults_to_readme() -> None:
    args = _build_parser().parse_args(["check"])
    assert args.paths == ["README.md"]
    assert args.format == "text"
    assert args.quiet is False
    assert _build_parser().parse_args(["check", "-q"]).quiet is True


def test_check_valid_file_exits_cleanly(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    readme = tmp_path / "README.md"
    readme.write_text(VALID, encoding="utf-8")

    main(["check", str(readme)])

    assert capsys.readouterr().out == ""


def test_check_invalid_file_reports_and_exits_one(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    readme = tmp_path / "README.md"
    readme.write_text(INVALID, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(readme)])

    assert excinfo.value.code == 1
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(":3: List item description must start with valid casing")
    assert lines[1].endswith(":4: List item link and description separated by invalid en-dash or em-dash")


def test_check_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    readme = tmp_path / "README.md"
    readme.write_text(INVALID, encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["check", "--format", "json", str(readme)])

    payload = json.loads(capsys.readouterr().out)
    assert [item["rule"] for item in payload] == ["invalid_casing", "invalid_separator_dash"]
    assert payload[0]["line"] == 3


def test_check_missing_file_exits_two(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(tmp_path / "missing.md")])
    assert excinfo.value.code == 2


def test_check_uses_explicit_config(tmp_path: Path) -> None:
    readme = tmp_path / "README.md"
    readme.write_text("- [Foo](https://example.com) - zlib bindings.\n", encoding="utf-8")
    config = tmp_path / "custom.yml"
    config.write_text("identifiers:\n  allow: [zlib]\n", encoding="utf-8")

    main(["check", "--config", str(config), str(readme)])
