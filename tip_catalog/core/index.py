"""
Lookup structures over a loaded entry store.

Builds, in a single pass over the entries in load order:
- tag -> ordered entry ids
- keyword (case-folded word token from title and body) -> ordered entry ids
"""

from __future__ import annotations

import re
from typing import Iterable

from .types import Entry, normalize_tag

WORD_RE = re.compile(r"\w+", re.UNICODE)


def tokenize(text: str) -> list[str]:
    """Split text into case-folded word tokens."""
    return [token.casefold() for token in WORD_RE.findall(text)]


class Index:
    """Tag and keyword lookups for a fixed set of entries.

    Use ``Index.build`` to construct; an Index is never modified after that.
    """

    def __init__(
        self,
        entries: dict[int, Entry],
        by_tag: dict[str, tuple[int, ...]],
        by_keyword: dict[str, tuple[int, ...]],
    ):
        self._entries = entries
        self._by_tag = by_tag
        self._by_keyword = by_keyword

    @classmethod
    def build(cls, entries: Iterable[Entry]) -> "Index":
        """Build the index; ids keep the order the entries are given in."""
        by_id: dict[int, Entry] = {}
        by_tag: dict[str, list[int]] = {}
        by_keyword: dict[str, list[int]] = {}

        for entry in entries:
            by_id[entry.id] = entry
            for tag in entry.sorted_tags():
                by_tag.setdefault(tag, []).append(entry.id)
            # dict.fromkeys keeps one id per keyword per entry
            for word in dict.fromkeys(tokenize(f"{entry.title}\n{entry.body}")):
                by_keyword.setdefault(word, []).append(entry.id)

        return cls(
            by_id,
            {tag: tuple(ids) for tag, ids in by_tag.items()},
            {word: tuple(ids) for word, ids in by_keyword.items()},
        )

    def tag_ids(self, tag: str) -> tuple[int, ...]:
        return self._by_tag.get(normalize_tag(tag), ())

    def lookup(self, tag: str) -> list[Entry]:
        """Entries carrying ``tag`` in load order; empty if the tag is unknown."""
        return [self._entries[entry_id] for entry_id in self.tag_ids(tag)]

    def lookup_keyword(self, word: str) -> list[Entry]:
        """Entries whose title or body contains ``word`` as a whole word."""
        ids = self._by_keyword.get(word.strip().casefold(), ())
        return [self._entries[entry_id] for entry_id in ids]

    def tags(self) -> dict[str, int]:
        """Tag -> number of entries, sorted by tag."""
        return {tag: len(self._by_tag[tag]) for tag in sorted(self._by_tag)}
