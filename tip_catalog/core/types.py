"""
Core data types for the tip catalog.

- Entry: one immutable tip record loaded from a source document
- SimilarPair: two entries whose titles look like the same tip
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


def normalize_tag(tag: str) -> str:
    """Return the canonical form of a tag (stripped, lower-cased)."""
    return tag.strip().lower()


def normalize_tags(tags: Iterable[str]) -> frozenset[str]:
    """Normalize a collection of tags, dropping empty ones."""
    return frozenset(t for t in (normalize_tag(tag) for tag in tags) if t)


@dataclass(frozen=True)
class Entry:
    """Represents a single tip in the catalog.

    Attributes:
        id: Unique, stable identifier of the tip
        title: The tip headline
        body: Free text (may contain code fences)
        link: Optional external URL for further reading
        tags: Normalized labels used for grouping
        source: Name of the document the entry was loaded from
    """

    id: int
    title: str
    body: str = ""
    link: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)
    source: str = ""

    def sorted_tags(self) -> list[str]:
        return sorted(self.tags)


@dataclass(frozen=True)
class SimilarPair:
    """Two entries with near-identical titles.

    Attributes:
        first: The entry loaded earlier
        second: The entry loaded later
        score: rapidfuzz similarity ratio (0-100)
    """

    first: Entry
    second: Entry
    score: float
