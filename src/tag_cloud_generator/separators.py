from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SEPARATORS = " \t\n\r,.:;!?/-~()[]*'_{}`\""


@dataclass(frozen=True, slots=True)
class SeparatorSet:
    """Immutable set of characters that delimit words."""

    chars: frozenset[str]

    @classmethod
    def from_string(cls, alphabet: str) -> "SeparatorSet":
        return cls(frozenset(alphabet))

    def is_separator(self, char: str) -> bool:
        return char in self.chars

    def __contains__(self, char: object) -> bool:
        return char in self.chars

    def __len__(self) -> int:
        return len(self.chars)


_DEFAULT = SeparatorSet.from_string(DEFAULT_SEPARATORS)


def default_separators() -> SeparatorSet:
    """Return the shared separator set built from DEFAULT_SEPARATORS."""
    return _DEFAULT
