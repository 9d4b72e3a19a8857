"""
Puzzle-of-the-day source.

Files hold precomputed chains per calendar day, one file per word length:

    [
      {"date": "2025-06-01", "chains": [["COLD", "CORD", "WORD", "WARD", "WARM"], ...]},
      {"date": "2025-06-02", "chains": [...]}
    ]

A legacy file that is just a list of chains (no dates) is accepted and
treated as a single undated day.

Lookup for a given date:
  1) exact date match
  2) otherwise the closest EARLIER date
  3) otherwise the first entry in the file
  4) no data for that length -> []
"""

from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

DATE_FMT = "%Y-%m-%d"


@dataclass
class DayChains:
    date: str                                   # "YYYY-MM-DD", "" for legacy files
    chains: List[List[str]] = field(default_factory=list)


def _parse(raw) -> List[DayChains]:
    if not isinstance(raw, list):
        raise ValueError("daily chain file must hold a JSON list")
    if raw and all(isinstance(item, list) for item in raw):
        # legacy: [[word, ...], ...]
        return [DayChains(date="", chains=[[str(w).upper() for w in c] for c in raw])]

    days: List[DayChains] = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError(f"unexpected daily chain entry: {item!r}")
        chains = [[str(w).upper() for w in c] for c in item.get("chains", [])]
        days.append(DayChains(date=str(item.get("date", "")), chains=chains))
    return days


def load_daily_chains(path: Path | str) -> List[DayChains]:
    """
    Parse one daily-chain JSON file.
    Raises FileNotFoundError / ValueError (json.JSONDecodeError) on a bad file.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    return _parse(json.loads(p.read_text(encoding="utf-8")))


class DailyChainSource:
    """Daily chains for several word lengths, with closest-prior-date lookup."""

    def __init__(self, by_length: Dict[int, List[DayChains]] | None = None):
        self.by_length: Dict[int, List[DayChains]] = dict(by_length or {})

    @classmethod
    def from_files(cls, files: Dict[int, Path | str]) -> "DailyChainSource":
        """
        Build from {length: path}. A missing or malformed file leaves that
        length without data (lookups return []) rather than failing the rest.
        """
        src = cls()
        for length, path in files.items():
            try:
                src.by_length[length] = load_daily_chains(path)
            except (OSError, ValueError):
                continue
        return src

    def get_daily_chains(self, date: dt.date | str, length: int) -> List[List[str]]:
        days = self.by_length.get(length)
        if not days:
            return []

        key = date if isinstance(date, str) else date.strftime(DATE_FMT)

        for d in days:
            if d.date == key:
                return d.chains

        # ISO dates compare correctly as strings
        earlier = sorted((d for d in days if d.date and d.date < key), key=lambda d: d.date)
        if earlier:
            return earlier[-1].chains

        return days[0].chains

    def lengths(self) -> List[int]:
        return sorted(self.by_length)
