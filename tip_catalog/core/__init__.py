"""
Core domain models and lookup structures.

This package contains the entry type, the store, the index and the
errors shared by every other part of the catalog.
"""

from .types import Entry, SimilarPair, normalize_tag, normalize_tags
from .errors import CatalogError, NotFound, ParseError
from .store import EntryStore, load
from .index import Index, tokenize
from .dedup import find_similar_titles

__all__ = [
    "Entry",
    "SimilarPair",
    "normalize_tag",
    "normalize_tags",
    "CatalogError",
    "NotFound",
    "ParseError",
    "EntryStore",
    "load",
    "Index",
    "tokenize",
    "find_similar_titles",
]
