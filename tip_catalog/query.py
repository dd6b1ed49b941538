"""
Query service for the tip catalog.

This module coordinates the read side:
1. Load source documents into an EntryStore
2. Build the Index
3. Warn about near-duplicate titles (optional)
4. Answer id, tag and keyword queries

Every query is a pure read. A missing id or tag is an empty result,
never an error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .config import DedupConfig
from .core.dedup import find_similar_titles
from .core.errors import NotFound
from .core.index import Index
from .core.store import EntryStore
from .core.types import Entry, SimilarPair
from .logging_utils import log_event

logger = logging.getLogger(__name__)


class QueryService:
    """Answers lookups over a loaded store using its index."""

    def __init__(self, store: EntryStore, index: Index | None = None):
        self._store = store
        self._index = index if index is not None else Index.build(store)

    @property
    def store(self) -> EntryStore:
        return self._store

    def by_id(self, entry_id: int) -> Entry | None:
        """Return the entry with ``entry_id``, or None if it does not exist."""
        try:
            return self._store.get(entry_id)
        except NotFound:
            return None

    def by_tag(self, tag: str) -> list[Entry]:
        """Entries whose tag set contains ``tag``, in load order."""
        return self._index.lookup(tag)

    def search(self, keyword: str, whole_word: bool = False) -> list[Entry]:
        """Case-insensitive match of ``keyword`` against title and body.

        Args:
            keyword: Text to look for; the empty string matches every entry
            whole_word: Match ``keyword`` as a whole word via the keyword index
                        instead of as a substring

        Returns:
            Matching entries in load order
        """
        if keyword == "":
            return self._store.entries()
        needle = keyword.casefold()
        if whole_word:
            return self._index.lookup_keyword(needle)
        return [
            entry
            for entry in self._store
            if needle in entry.title.casefold() or needle in entry.body.casefold()
        ]

    def all(self) -> list[Entry]:
        return self._store.entries()

    def tags(self) -> dict[str, int]:
        return self._index.tags()

    def duplicates(self, threshold: int = 92) -> list[SimilarPair]:
        return find_similar_titles(self._store, threshold)


def open_catalog(
    sources: str | Path | Iterable[str | Path],
    dedup: DedupConfig | None = None,
) -> QueryService:
    """Load the corpus and return a ready QueryService.

    Raises:
        ParseError: If a source document is malformed
        FileNotFoundError: If a named source does not exist
    """
    store = EntryStore.load(sources)
    service = QueryService(store)
    log_event(
        logger,
        f"Catalog ready: {len(store)} entries, {len(service.tags())} tags",
        entries=len(store),
        tags=len(service.tags()),
    )

    if dedup is not None and dedup.enabled:
        for pair in service.duplicates(dedup.title_similarity_threshold):
            logger.warning(
                f"Possible duplicate: #{pair.first.id} '{pair.first.title}' and "
                f"#{pair.second.id} '{pair.second.title}' ({pair.score:.0f}% similar)"
            )

    return service
