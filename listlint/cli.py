"""CLI entrypoints for listlint commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import FileReport, Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listlint",
        description="Check that curated markdown list entries follow the link - description format.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Validate list entries of one or more markdown files.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    check_parser.add_argument(
        "paths",
        nargs="*",
        default=["README.md"],
        help="Markdown files to check (defaults to README.md).",
    )
    check_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .listlint.yml file (defaults to the one next to each file).",
    )
    check_parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format for diagnostics.",
    )
    check_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors; diagnostics are still printed.",
    )
    check_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for listlint commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(getattr(args, "quiet", False)),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "check":
        try:
            config = load_config(args.config) if args.config is not None else None
            orchestrator = Orchestrator(config=config)
            reports = orchestrator.check_paths(args.paths)
        except (FileNotFoundError, ConfigError) as exc:
            parser.exit(2, f"{exc}\n")
        except OSError as exc:
            parser.exit(2, f"listlint check failed: {exc}\n")

        if args.format == "json":
            print(json.dumps(_as_json(reports), indent=2, ensure_ascii=False))
        else:
            for report in reports:
                for line in _format_report(report):
                    print(line)

        if any(not report.ok for report in reports):
            parser.exit(1)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(2, "Unknown command\n")


def _format_report(report: FileReport) -> List[str]:
    path = _relativize(report.path)
    lines: List[str] = []
    for diagnostic in report.diagnostics:
        location = f"{path}:{diagnostic.line}" if diagnostic.line is not None else path
        lines.append(f"{location}: {diagnostic.message}")
    return lines


def _as_json(reports: List[FileReport]) -> List[dict]:
    return [item for report in reports for item in report.as_dicts()]


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
