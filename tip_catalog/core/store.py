"""Entry store: the immutable id -> Entry mapping loaded from source documents.

The store is filled once by ``EntryStore.load`` and never mutated
afterwards, so readers need no coordination.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from ..input import read_document, resolve_sources
from ..logging_utils import log_event
from .errors import NotFound, ParseError
from .types import Entry

logger = logging.getLogger(__name__)


class EntryStore:
    """Holds tip entries keyed by id, iterating in load order."""

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: dict[int, Entry] = {}
        for entry in entries:
            self._add(entry)
        self._view = MappingProxyType(self._entries)

    @classmethod
    def load(cls, sources: str | Path | Iterable[str | Path]) -> "EntryStore":
        """Load every source document into a new store.

        Args:
            sources: A file, a directory, or a list of either

        Returns:
            The populated store

        Raises:
            ParseError: If any document is malformed or an id repeats
            FileNotFoundError: If a named source does not exist
        """
        store = cls()
        for path in resolve_sources(sources):
            entries = read_document(path)
            for entry in entries:
                store._add(entry)
            log_event(
                logger,
                f"Loaded {len(entries)} entries from {path}",
                source=str(path),
                entries=len(entries),
            )
        return store

    def _add(self, entry: Entry) -> None:
        existing = self._entries.get(entry.id)
        if existing is not None:
            where = f" (first seen in {existing.source})" if existing.source else ""
            raise ParseError(f"duplicate id {entry.id}{where}", entry.source or None)
        self._entries[entry.id] = entry

    @property
    def mapping(self) -> Mapping[int, Entry]:
        """Read-only view of id -> Entry in load order."""
        return self._view

    def get(self, entry_id: int) -> Entry:
        """Return the entry with ``entry_id``.

        Raises:
            NotFound: If no such entry was loaded
        """
        try:
            return self._entries[entry_id]
        except KeyError:
            raise NotFound(entry_id) from None

    def entries(self) -> list[Entry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries


def load(sources: str | Path | Iterable[str | Path]) -> Mapping[int, Entry]:
    """Load source documents and return the id -> Entry mapping."""
    return EntryStore.load(sources).mapping
