from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

FrequencyTable = Dict[str, int]


@dataclass(frozen=True, slots=True)
class Token:
    """A maximal run of source text, tagged as word or separator."""

    text: str
    is_separator: bool


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """A word and its occurrence count selected for the cloud."""

    word: str
    count: int


@dataclass(frozen=True, slots=True)
class SelectedSubset:
    """Alphabetically ordered top words plus the count range they span."""

    entries: Tuple[RankedEntry, ...] = ()
    min_count: int = 0
    max_count: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RankedEntry]:
        return iter(self.entries)


@dataclass(slots=True)
class TagCloud:
    """Rendered tag cloud plus the inputs echoed into its header."""

    html: str
    requested_count: int
    title: str
    subset: SelectedSubset
