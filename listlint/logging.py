"""Logging helpers for listlint.

Diagnostics go to stdout through the CLI; log records always go to stderr so
``listlint check --format json`` output stays machine readable.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, MutableMapping, Tuple

_ROOT = "listlint"
_CONSOLE_FORMAT = "[listlint] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``listlint.<name>`` (or the package logger when ``name`` is empty)."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


class FileLogger(logging.LoggerAdapter):
    """Prefixes every message with the markdown file being checked."""

    def __init__(self, logger: logging.Logger, path: Path | str) -> None:
        super().__init__(logger, {"path": str(path)})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        return f"{self.extra['path']}: {msg}", kwargs


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the stderr handler and, when ``log_file`` is set, a DEBUG file handler.

    Calling it again replaces the handlers of the previous call.
    """
    console_level = _console_level(verbose, quiet)
    logger = logging.getLogger(_ROOT)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    level = console_level
    if log_file is not None:
        # The log file always gets the full trace, whatever the console shows.
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        level = logging.DEBUG

    logger.setLevel(level)
    return logger


__all__ = ["FileLogger", "configure_logging", "get_logger"]
