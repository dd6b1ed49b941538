"""Exceptions raised while loading and querying the catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors."""


class ParseError(CatalogError, ValueError):
    """A source document does not have the expected shape.

    Fatal at load time: the catalog is never built from a partially
    parsed corpus.
    """

    def __init__(self, message: str, source: str | None = None, line: int | None = None):
        self.message = message
        self.source = source
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.source and self.line:
            return f"{self.source}:{self.line}: {self.message}"
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class NotFound(CatalogError, LookupError):
    """The requested entry id is not in the catalog."""

    def __init__(self, entry_id: int):
        self.entry_id = entry_id
        super().__init__(f"no such entry: {entry_id}")
