from __future__ import annotations

from typing import Iterator

from .models import Token
from .separators import SeparatorSet


def next_run(text: str, start: int, separators: SeparatorSet) -> Token:
    """Return the maximal word or separator run beginning at ``start``."""
    if not 0 <= start < len(text):
        raise ValueError(f"start index {start} outside text of length {len(text)}")
    kind = separators.is_separator(text[start])
    end = start + 1
    while end < len(text) and separators.is_separator(text[end]) == kind:
        end += 1
    return Token(text=text[start:end], is_separator=kind)


def iter_runs(text: str, separators: SeparatorSet) -> Iterator[Token]:
    """Lazily yield every run of ``text`` in order."""
    position = 0
    while position < len(text):
        token = next_run(text, position, separators)
        yield token
        position += len(token.text)
