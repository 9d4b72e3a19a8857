"""
Random puzzle generation by bounded rejection sampling.

One call to generate():
  1) draw start (or use forced_start) and end uniformly from the WordSet
  2) skip the draw if start == end
  3) BFS for the shortest chain
  4) accept the first chain whose WORD count is within [min_length, max_length]

After `max_attempts` draws without acceptance the call returns the failure
sentinel. That is a normal outcome under tight bounds: the caller retries
(packages.session.search adds the backoff), it is not an error.

should_cancel is polled before every draw so a background search can stop
between BFS runs; a cancelled call returns the failure sentinel.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .policy import LengthPolicy
from .search import ShortestPathEngine

DEFAULT_MAX_ATTEMPTS = 100


@dataclass
class GeneratedPuzzle:
    chain: List[str] = field(default_factory=list)
    start: str = ""
    end: str = ""
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return bool(self.chain)

    @property
    def steps(self) -> int:
        """Minimum number of single-letter changes (0 for the failure sentinel)."""
        return max(len(self.chain) - 1, 0)


def failure(attempts: int = 0) -> GeneratedPuzzle:
    return GeneratedPuzzle(chain=[], start="", end="", attempts=attempts)


class PuzzleGenerator:
    def __init__(
            self,
            engine: ShortestPathEngine,
            *,
            max_attempts: int = DEFAULT_MAX_ATTEMPTS,
            rng: random.Random | None = None,
            seed: int | None = None,
    ):
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive; got {max_attempts}")
        self.engine = engine
        self.max_attempts = int(max_attempts)
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(
            self,
            min_length: int,
            max_length: Optional[int] = None,
            forced_start: Optional[str] = None,
            should_cancel: Optional[Callable[[], bool]] = None,
    ) -> GeneratedPuzzle:
        """
        Sample (start, end) pairs until one has a shortest chain of acceptable size.

        Args:
            min_length:    fewest words allowed in the chain (endpoints included)
            max_length:    most words allowed; None = unbounded
            forced_start:  fix the start word (used to continue from a solved target)
            should_cancel: polled before each draw; True aborts with the failure sentinel

        Returns:
            GeneratedPuzzle; `.ok` is False on exhaustion, cancellation,
            an empty WordSet or a forced start outside the WordSet.
        """
        policy = LengthPolicy(min_length=min_length, max_length=max_length)
        words = self.engine.word_set

        if not words:
            return failure()
        if forced_start is not None and forced_start not in words:
            return failure()

        for attempt in range(1, self.max_attempts + 1):
            if should_cancel is not None and should_cancel():
                return failure(attempt - 1)

            start = forced_start if forced_start is not None else words.random_word(self.rng)
            end = words.random_word(self.rng)
            if start == end:
                continue

            chain = self.engine.shortest_path(start, end)
            if chain and policy.accepts(len(chain)):
                return GeneratedPuzzle(chain=chain, start=start, end=end, attempts=attempt)

        return failure(self.max_attempts)

    def generate_with_policy(
            self,
            policy: LengthPolicy,
            forced_start: Optional[str] = None,
            should_cancel: Optional[Callable[[], bool]] = None,
    ) -> GeneratedPuzzle:
        return self.generate(policy.min_length, policy.max_length,
                             forced_start=forced_start, should_cancel=should_cancel)
