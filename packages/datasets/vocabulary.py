"""
Vocabulary source: word list file -> set of uppercase words.

Accepted formats (one entry per line):
  - plain text:  "CAT"
  - CSV:         "CAT,12345,noun"   (only the first field is used)

Failure policy: the engine must keep working with an empty vocabulary (every
query then returns its sentinel), so load_vocabulary never raises for a bad
path or undecodable file; it returns an empty set instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional, Set

from .io import first_fields, read_lines


def load_vocabulary(path: Path | str, length: Optional[int] = None) -> Set[str]:
    """
    Load a word list, uppercase it, optionally keep only `length`-letter words.

    Returns an empty set if the file is missing or unreadable.
    """
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError):
        return set()

    words = {w.upper() for w in first_fields(lines)}
    if length is not None:
        words = {w for w in words if len(w) == length}
    return words


def split_by_length(words: Iterable[str], lengths: Iterable[int]) -> Dict[int, Set[str]]:
    """Bucket one vocabulary into per-length sets (only the lengths asked for)."""
    wanted = set(lengths)
    out: Dict[int, Set[str]] = {n: set() for n in wanted}
    for w in words:
        if len(w) in wanted:
            out[len(w)].add(w)
    return out
