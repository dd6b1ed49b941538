"""
Markdown parser for tip source documents.

The format uses:
- # heading for the document title (ignored)
- ## headings for entries, optionally numbered ("## 3. Guard statement")
- - prefixed lines right below the heading for fields (Id, Link, Tags)
- everything after the fields, up to the next entry heading, as the body
"""

from __future__ import annotations

import re

from ..core.errors import ParseError
from ..core.types import Entry
from .fields import parse_id, parse_link, parse_tags


# Regex patterns for matching the tip document structure
ENTRY_RE = re.compile(r"^##\s+(?:(\d+)[.)]\s+)?(.+?)\s*$")  # Matches "## 1. Title"
FIELD_RE = re.compile(r"^[-*]\s+(Id|Link|Tags):\s*(.*?)\s*$", re.IGNORECASE)  # Matches "- Field: value"
FENCE_RE = re.compile(r"^\s*(```|~~~)")


def parse_markdown(text: str, source: str = "<string>") -> list[Entry]:
    """Parse a Markdown tip document into a list of Entry objects.

    The document structure:
        # Swift Tips
        ## 1. Auto closures
        - Link: https://example.com/autoclosures
        - Tags: closures, attributes

        Body text...

    Args:
        text: The full markdown content as a string
        source: Name used in error messages and stored on each entry

    Returns:
        Entries in document order

    Raises:
        ParseError: If an entry has no id, an invalid field, or no title
    """
    entries: list[Entry] = []
    current: dict | None = None  # Accumulator for the entry being read
    in_fence = False

    def flush():
        """Finalize the current entry and add it to the list."""
        if current is None:
            return
        line = current["line"]
        title = current["title"]
        if not title:
            raise ParseError("entry has no title", source, line)
        entry_id = current.get("heading_id")
        field_id = current.get("id")
        if field_id is not None:
            field_id = parse_id(field_id[0], source, field_id[1])
            if entry_id is not None and int(entry_id) != field_id:
                raise ParseError(
                    f"heading number {entry_id} disagrees with Id field {field_id}",
                    source,
                    line,
                )
            entry_id = field_id
        entry_id = parse_id(entry_id, source, line)
        link = current.get("link")
        tags = current.get("tags")
        entries.append(
            Entry(
                id=entry_id,
                title=title,
                body="\n".join(current["body"]).strip(),
                link=parse_link(link[0], source, link[1]) if link else None,
                tags=parse_tags(tags[0], source, tags[1]) if tags else frozenset(),
                source=source,
            )
        )

    for lineno, line in enumerate(text.splitlines(), start=1):
        if FENCE_RE.match(line):
            in_fence = not in_fence
        elif not in_fence:
            entry_match = ENTRY_RE.match(line)
            if entry_match:
                flush()
                current = {
                    "line": lineno,
                    "heading_id": entry_match.group(1),
                    "title": entry_match.group(2).strip(),
                    "body": [],
                    "in_fields": True,
                }
                continue

        if current is None:
            continue

        if current["in_fields"] and not in_fence:
            field_match = FIELD_RE.match(line)
            if field_match:
                key = field_match.group(1).lower()
                if key in current:
                    raise ParseError(f"duplicate {key} field", source, lineno)
                current[key] = (field_match.group(2), lineno)
                continue
            if not line.strip():
                continue
            current["in_fields"] = False

        current["body"].append(line)

    if in_fence:
        raise ParseError("unterminated code fence", source)

    # Don't forget the last entry
    flush()
    return entries
