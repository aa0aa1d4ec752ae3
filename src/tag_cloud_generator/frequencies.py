from __future__ import annotations

from collections import Counter

from .models import FrequencyTable
from .separators import SeparatorSet
from .tokenization import iter_runs


def build_frequency_table(text: str, separators: SeparatorSet) -> FrequencyTable:
    """Count case-insensitive occurrences of every word run in ``text``."""
    counts: Counter[str] = Counter()
    for token in iter_runs(text, separators):
        if token.is_separator:
            continue
        counts[token.text.lower()] += 1
    return dict(counts)
