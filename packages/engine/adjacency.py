"""
Adjacency rule for the word-ladder graph.

Two words are neighbors iff:
  - they have the same length, and
  - they differ in exactly ONE letter position (Hamming distance == 1).

This predicate is the sole definition of graph structure. The graph itself is
never stored; search code rediscovers edges by testing words against it.

Helpers:
  - hamming:       number of mismatched positions (equal-length words only)
  - wildcard_keys: position-wildcard bucket keys ("C_T", "_AT", "CA_") used by
                   the optional adjacency index in search.py
"""

from __future__ import annotations

from typing import Iterator

# Placeholder letter for wildcard bucket keys; never a valid word character.
WILDCARD = "_"


def are_adjacent(a: str, b: str) -> bool:
    """
    Return True if `a` and `b` are one single-letter substitution apart.

    Examples:
      are_adjacent("CAT", "COT") -> True
      are_adjacent("CAT", "CAT") -> False   (zero mismatches)
      are_adjacent("CAT", "DOG") -> False
      are_adjacent("CAT", "CATS") -> False  (length mismatch)
    """
    if len(a) != len(b):
        return False

    diffs = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            diffs += 1
            if diffs > 1:
                return False  # early exit, no need to scan the rest
    return diffs == 1


def hamming(a: str, b: str) -> int:
    """
    Count positions where `a` and `b` differ.

    Only defined for equal-length words; unequal lengths are a caller bug.
    """
    if len(a) != len(b):
        raise ValueError(f"hamming() needs equal-length words; got {a!r} and {b!r}")
    return sum(1 for ca, cb in zip(a, b) if ca != cb)


def wildcard_keys(word: str) -> Iterator[str]:
    """
    Yield one bucket key per position, with that position masked.

      wildcard_keys("CAT") -> "_AT", "C_T", "CA_"

    Two distinct words share a key iff they are adjacent.
    """
    for i in range(len(word)):
        yield word[:i] + WILDCARD + word[i + 1:]
