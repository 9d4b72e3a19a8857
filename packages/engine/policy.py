"""
Per-length puzzle policy table.

A policy bounds the chain a generated puzzle may have, counted in WORDS
(start and target included):
  - min_length keeps puzzles from being trivial (start one step from target)
  - max_length rejects pairs that are technically connected but make a
    poor puzzle; None means unbounded

Longer words give a sparser graph where long chains tend to be obscure, so
only the 5-letter tier carries an upper bound by default. These are tuning
knobs: override them from JSON with load_policies().

JSON shape:
    {"3": {"min_length": 5, "max_length": null},
     "5": {"min_length": 5, "max_length": 8}}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class LengthPolicy:
    min_length: int = 5
    max_length: Optional[int] = None

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError(f"min_length must be >= 1; got {self.min_length}")
        if self.max_length is not None and self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) is below min_length ({self.min_length})")

    def accepts(self, chain_len: int) -> bool:
        if chain_len < self.min_length:
            return False
        return self.max_length is None or chain_len <= self.max_length


DEFAULT_POLICIES: Dict[int, LengthPolicy] = {
    3: LengthPolicy(min_length=5),
    4: LengthPolicy(min_length=5),
    5: LengthPolicy(min_length=5, max_length=8),
}


def policy_for(length: int, policies: Dict[int, LengthPolicy] | None = None) -> LengthPolicy:
    """Policy for a word length; lengths missing from the table get the defaults."""
    table = DEFAULT_POLICIES if policies is None else policies
    return table.get(length, LengthPolicy())


def load_policies(path: str | Path) -> Dict[int, LengthPolicy]:
    """
    Read a policy table from JSON and merge it over DEFAULT_POLICIES.
    Raises FileNotFoundError / ValueError on a bad file (this is config).
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    raw = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"policy file must hold a JSON object keyed by length: {p}")

    table = dict(DEFAULT_POLICIES)
    for key, spec in raw.items():
        max_length = spec.get("max_length")
        table[int(key)] = LengthPolicy(
            min_length=int(spec.get("min_length", 5)),
            max_length=int(max_length) if max_length is not None else None,
        )
    return table
