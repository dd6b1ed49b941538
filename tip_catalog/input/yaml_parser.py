"""YAML parser for tip source documents.

Accepted layouts:
- a top-level list of entry mappings
- a mapping with an ``entries`` list (other top-level keys are ignored)

Each entry mapping has id, title and optional body, link, tags.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from ..core.errors import ParseError
from ..core.types import Entry
from .fields import parse_id, parse_link, parse_tags

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"id", "title", "body", "link", "tags"}


def parse_yaml(text: str, source: str = "<string>") -> list[Entry]:
    """Parse a YAML tip document into a list of Entry objects.

    Example:
        entries:
          - id: 2
            title: Guard statement
            link: https://example.com/guard
            tags: [control-flow]
            body: |
              Exit early when a condition is not met.

    Args:
        text: The raw YAML content
        source: Name used in error messages and stored on each entry

    Returns:
        Entries in document order

    Raises:
        ParseError: If the YAML is invalid or an entry violates the shape
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        line = None
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
        raise ParseError(f"invalid YAML: {exc}", source, line) from exc

    if data is None:
        return []
    if isinstance(data, dict):
        if "entries" not in data:
            raise ParseError("missing 'entries' key", source)
        data = data["entries"] or []
    if not isinstance(data, list):
        raise ParseError("expected a list of entries", source)

    entries: list[Entry] = []
    for position, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise ParseError(f"entry #{position} is not a mapping", source)
        entries.append(_parse_item(item, source, position))
    return entries


def _parse_item(item: dict[str, Any], source: str, position: int) -> Entry:
    where = f"entry #{position}"
    try:
        entry_id = parse_id(item.get("id"), source)
    except ParseError as exc:
        raise ParseError(f"{where}: {exc.message}", source) from exc

    title = item.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ParseError(f"{where}: entry {entry_id} has no title", source)

    body = item.get("body") or ""
    if not isinstance(body, str):
        raise ParseError(f"{where}: body must be text", source)

    unknown = set(item) - KNOWN_KEYS
    if unknown:
        logger.warning(
            f"Ignoring unknown keys in {source} entry {entry_id}: {', '.join(sorted(map(str, unknown)))}"
        )

    return Entry(
        id=entry_id,
        title=title.strip(),
        body=body.strip(),
        link=parse_link(item.get("link"), source),
        tags=parse_tags(item.get("tags"), source),
        source=source,
    )
