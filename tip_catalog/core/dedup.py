"""
Near-duplicate detection using fuzzy title comparison.

Tip collections are often copied between documents with small edits
(numbering, punctuation), so the same tip can end up under two ids.
"""

from __future__ import annotations

from typing import Iterable

from rapidfuzz import fuzz

from .types import Entry, SimilarPair


def find_similar_titles(entries: Iterable[Entry], threshold: int = 92) -> list[SimilarPair]:
    """Find entry pairs whose titles are nearly identical.

    Uses rapidfuzz's ratio on case-folded titles, which calculates the
    Levenshtein distance as a similarity percentage.

    Args:
        entries: Entries in load order
        threshold: Minimum similarity (0-100) to report a pair

    Returns:
        Pairs in load order of the later entry, then the earlier one
    """
    seen: list[tuple[Entry, str]] = []
    pairs: list[SimilarPair] = []

    for entry in entries:
        title = entry.title.casefold()
        for earlier, earlier_title in seen:
            score = fuzz.ratio(title, earlier_title)
            if score >= threshold:
                pairs.append(SimilarPair(first=earlier, second=entry, score=score))
        seen.append((entry, title))

    return pairs
