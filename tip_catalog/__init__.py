"""
Tip Catalog - index and search a hand-written collection of tips.

Tips are kept in Markdown (or YAML) documents. The catalog loads them
once, builds tag and keyword indexes and answers lookups by id, tag
and text.

Main entry point is the CLI via the `tip-catalog` command.

Example:
    $ tip-catalog search closure -s tips.md
"""

__all__ = [
    "__version__",
    "Entry",
    "EntryStore",
    "Index",
    "QueryService",
    "ParseError",
    "NotFound",
    "open_catalog",
]
__version__ = "0.1.0"

from .core import Entry, EntryStore, Index, NotFound, ParseError
from .query import QueryService, open_catalog
