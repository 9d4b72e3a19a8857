"""
Two-tier distance memo for hint queries.

Tier 1 - active target map:
  Full BFS from the word currently used for hints. Many hint queries hit the
  same target while a puzzle is being played, so the whole map is computed
  once and kept until a DIFFERENT target is requested. Switching targets
  evicts the old map outright (it is not merged into tier 2).

Tier 2 - pairwise memo:
  start -> end -> distance, filled one entry at a time by ad hoc queries that
  miss tier 1. Only grows until clear().

Failures (unknown word, no path) come back as NOT_FOUND and are never stored:
a later vocabulary could make the pair reachable.

Not thread-safe. One writer per word length; see packages.session.state.
"""

from __future__ import annotations

from typing import Dict, Optional

from .search import DistanceMap, ShortestPathEngine

NOT_FOUND = -1


class DistanceCache:
    def __init__(self, engine: ShortestPathEngine):
        self.engine = engine
        self._active_target: Optional[str] = None
        self._target_map: DistanceMap = {}
        self._pairwise: Dict[str, Dict[str, int]] = {}

    @property
    def active_target(self) -> Optional[str]:
        return self._active_target

    def precompute(self, target: str) -> None:
        """
        Make `target` the active hint target (no-op if it already is).

        An unknown target still replaces the old map, with an empty one, so
        distance_to() answers NOT_FOUND instead of steps to the old target.
        """
        if target == self._active_target:
            return
        self._target_map = self.engine.distances_from(target)
        self._active_target = target

    def distance_to(self, word: str) -> int:
        """Steps from `word` to the active target, or NOT_FOUND."""
        return self._target_map.get(word, NOT_FOUND)

    def distance(self, start: str, end: str) -> int:
        """Minimum single-letter edits from `start` to `end`, or NOT_FOUND."""
        if self._active_target is not None and end == self._active_target:
            return self.distance_to(start)

        memo = self._pairwise.get(start)
        if memo is not None and end in memo:
            return memo[end]

        path = self.engine.shortest_path(start, end)
        if not path:
            return NOT_FOUND
        d = len(path) - 1
        self._pairwise.setdefault(start, {})[end] = d
        return d

    def clear(self) -> None:
        """Drop both tiers (called whenever the WordSet is swapped)."""
        self._active_target = None
        self._target_map = {}
        self._pairwise.clear()

    def rebind(self, engine: ShortestPathEngine) -> None:
        """Point the cache at a new engine/WordSet; nothing old survives."""
        self.engine = engine
        self.clear()

    def __len__(self) -> int:
        """Number of memoized pairs (tier 2 only)."""
        return sum(len(m) for m in self._pairwise.values())
