"""Field validation shared by the source parsers."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from ..core.errors import ParseError
from ..core.types import normalize_tags


def parse_id(value: Any, source: str, line: int | None = None) -> int:
    """Coerce an entry id to int.

    Raises:
        ParseError: If the value is missing, boolean, negative or not an integer
    """
    if value is None or value == "":
        raise ParseError("entry has no id", source, line)
    if isinstance(value, bool):
        raise ParseError(f"invalid id {value!r}", source, line)
    if isinstance(value, int):
        entry_id = value
    elif isinstance(value, str) and value.strip().isdigit():
        entry_id = int(value.strip())
    else:
        raise ParseError(f"invalid id {value!r}", source, line)
    if entry_id < 0:
        raise ParseError(f"invalid id {value!r}", source, line)
    return entry_id


def parse_link(value: Any, source: str, line: int | None = None) -> str | None:
    """Validate an optional http(s) link."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ParseError(f"invalid link {value!r}", source, line)
    link = value.strip()
    if not link:
        return None
    # Markdown authors often wrap bare links in angle brackets
    if link.startswith("<") and link.endswith(">"):
        link = link[1:-1].strip()
    parsed = urlparse(link)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ParseError(f"invalid link {value!r}", source, line)
    return link


def parse_tags(value: Any, source: str, line: int | None = None) -> frozenset[str]:
    """Accept a comma-separated string or a list of strings."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return normalize_tags(value.split(","))
    if isinstance(value, (list, tuple)):
        if not all(isinstance(tag, str) for tag in value):
            raise ParseError(f"tags must be strings, got {value!r}", source, line)
        return normalize_tags(value)
    raise ParseError(f"invalid tags {value!r}", source, line)
