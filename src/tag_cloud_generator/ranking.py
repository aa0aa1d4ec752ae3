from __future__ import annotations

from typing import List, Mapping

from .models import RankedEntry, SelectedSubset


class InvalidCountError(ValueError):
    """Raised when a negative number of words is requested."""


def validate_count(requested_count: int) -> int:
    if requested_count < 0:
        raise InvalidCountError(
            f"Requested word count must be non-negative, got {requested_count}."
        )
    return requested_count


def rank_by_frequency(table: Mapping[str, int]) -> List[RankedEntry]:
    """
    Order every entry by count descending.

    Words with equal counts are ordered alphabetically so the cutoff at the
    N-th position is the same on every run.
    """
    ordered = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    return [RankedEntry(word=word, count=count) for word, count in ordered]


def alphabetical_key(entry: RankedEntry) -> tuple[str, str]:
    return entry.word.lower(), entry.word


def select_top_words(table: Mapping[str, int], n: int) -> SelectedSubset:
    """Pick the ``n`` most frequent words and return them in alphabetical order."""
    n = min(validate_count(n), len(table))
    if n == 0:
        return SelectedSubset()

    selected = rank_by_frequency(table)[:n]
    max_count = selected[0].count
    min_count = selected[-1].count
    return SelectedSubset(
        entries=tuple(sorted(selected, key=alphabetical_key)),
        min_count=min_count,
        max_count=max_count,
    )
