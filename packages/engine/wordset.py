"""
WordSet: the immutable vocabulary for ONE puzzle length.

Rules (applied while building, same hygiene as the dataset validator):
  - tokens are stripped and uppercased
  - anything that isn't a clean A-Z token of exactly `length` letters is dropped
  - duplicates collapse

A WordSet never changes after construction. Switching puzzle length means
building a new WordSet and throwing away every cache built on the old one.
"""

from __future__ import annotations

import random
from typing import FrozenSet, Iterable, Iterator, Tuple


def normalize(word: str) -> str:
    """Canonical form used everywhere in the engine: stripped, uppercase."""
    return word.strip().upper()


def _is_clean(word: str, length: int) -> bool:
    return len(word) == length and word.isascii() and word.isalpha()


class WordSet:
    """Equal-length uppercase words; membership, iteration and random sampling."""

    __slots__ = ("_length", "_members", "_ordered")

    def __init__(self, words: Iterable[str], length: int):
        if length <= 0:
            raise ValueError(f"word length must be positive; got {length}")
        self._length = int(length)

        cleaned = {normalize(w) for w in words}
        self._members: FrozenSet[str] = frozenset(
            w for w in cleaned if _is_clean(w, self._length)
        )
        # Sorted snapshot: gives seeded RNG draws a stable index space.
        self._ordered: Tuple[str, ...] = tuple(sorted(self._members))

    @classmethod
    def empty(cls, length: int) -> "WordSet":
        return cls((), length)

    @property
    def length(self) -> int:
        return self._length

    @property
    def words(self) -> FrozenSet[str]:
        return self._members

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._members

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __bool__(self) -> bool:
        return bool(self._ordered)

    def __repr__(self) -> str:
        return f"WordSet(length={self._length}, size={len(self)})"

    def random_word(self, rng: random.Random) -> str:
        """Uniform draw. Caller must check the set is non-empty."""
        return self._ordered[rng.randrange(len(self._ordered))]
