"""URL syntax checks for list item links."""

from __future__ import annotations

import re
from urllib.parse import urlparse

_WHITESPACE = re.compile(r"\s")


def is_absolute_url(text: str | None) -> bool:
    """Return True when ``text`` is an absolute URL with a scheme and a host."""
    if not text:
        return False
    candidate = text.strip()
    if not candidate or _WHITESPACE.search(candidate):
        return False
    try:
        parsed = urlparse(candidate)
        # Accessing the port validates the netloc (raises on malformed ports).
        parsed.port
    except ValueError:
        return False
    if not parsed.scheme or not parsed.hostname:
        return False
    return True


__all__ = ["is_absolute_url"]
