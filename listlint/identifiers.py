"""Words exempt from the description casing rule."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable

from .logging import get_logger

# Proper nouns and acronyms whose canonical spelling starts with a lowercase letter.
DEFAULT_IDENTIFIERS: FrozenSet[str] = frozenset(
    {
        "cURL",
        "eBay",
        "eBPF",
        "eslint",
        "gRPC",
        "htop",
        "i18n",
        "iCloud",
        "iMessage",
        "iOS",
        "iPad",
        "iPadOS",
        "iPhone",
        "iTerm",
        "iTunes",
        "jQuery",
        "k8s",
        "macOS",
        "mdast",
        "npm",
        "nginx",
        "npx",
        "pnpm",
        "tvOS",
        "vim",
        "visionOS",
        "watchOS",
        "webpack",
        "zsh",
    }
)


class IdentifierAllowList:
    """Static set of literal words accepted regardless of their casing."""

    def __init__(self, words: Iterable[str] = DEFAULT_IDENTIFIERS) -> None:
        self._words: FrozenSet[str] = frozenset(word for word in words if word)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def contains(self, word: str) -> bool:
        return word in self._words

    def extended(self, words: Iterable[str]) -> "IdentifierAllowList":
        """Return a new allow-list with ``words`` added."""
        return IdentifierAllowList(self._words | frozenset(words))

    @classmethod
    def from_sources(
        cls,
        *,
        extra: Iterable[str] = (),
        files: Iterable[Path] = (),
    ) -> "IdentifierAllowList":
        """Build the default allow-list extended by configured words and word files."""
        logger = get_logger("identifiers")
        words = set(DEFAULT_IDENTIFIERS)
        words.update(word.strip() for word in extra)
        for path in files:
            loaded = list(_read_word_file(path))
            logger.debug("Loaded %d identifiers from %s", len(loaded), path)
            words.update(loaded)
        return cls(words)


def _read_word_file(path: Path) -> Iterable[str]:
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if line:
            yield line


__all__ = ["DEFAULT_IDENTIFIERS", "IdentifierAllowList"]
