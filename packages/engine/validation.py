"""
Lightweight move validation.

This module answers two questions for the session layer:
  - "Is this a real word of the current length?"          (validate_word)
  - "Can the player go from the current word to this one?" (validate_move)

A word is valid iff:
  - it is a string
  - it is alphabetic A-Z only (case-insensitive on input)
  - it has the WordSet's exact length
  - it exists in the WordSet

A move is valid iff the proposed word is valid AND it is exactly one letter
away from the current word. Re-entering the current word is not a move.
"""

from __future__ import annotations

from .adjacency import are_adjacent
from .wordset import WordSet, normalize


def validate_word(word: object, word_set: WordSet) -> bool:
    """Return True if `word` belongs to `word_set` (after normalization)."""
    if not isinstance(word, str):
        return False

    w = normalize(word)

    # Shape/characters check
    if len(w) != word_set.length or not w.isalpha():
        return False

    return w in word_set


def validate_move(current: str, proposed: object, word_set: WordSet) -> bool:
    """Return True if `proposed` is a legal single-letter step from `current`."""
    if not validate_word(proposed, word_set):
        return False
    return are_adjacent(normalize(current), normalize(proposed))  # type: ignore[arg-type]
