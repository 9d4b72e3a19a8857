"""
WordChainLogic: everything the session layer needs for ONE word length.

Bundles a WordSet with its ShortestPathEngine, DistanceCache and
PuzzleGenerator, and exposes the small surface a game screen calls:

  is_valid_word(word)            membership (case-insensitive)
  shortest_path(start, end)      one minimal chain, [] if none
  precompute_distances(target)   make `target` the active hint target
  distance_to(word)              steps to the active target, or NOT_FOUND
  distance(start, end)           steps between any pair, or NOT_FOUND
  generate(...)                  random puzzle (GeneratedPuzzle)
  clear_cache()                  drop all memoized distances

set_length() swaps the WordSet wholesale and clears every cache: adjacency
is length-scoped, so nothing computed for the old length can be reused.

Typical use:
    vocab = load_vocabulary("data/final_words.csv")
    logic = WordChainLogic.from_vocabulary(vocab, 4, seed=7)
    puzzle = logic.generate_for_length()
"""

from __future__ import annotations

import random
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .cache import NOT_FOUND, DistanceCache
from .generator import DEFAULT_MAX_ATTEMPTS, GeneratedPuzzle, PuzzleGenerator
from .policy import LengthPolicy, policy_for
from .search import ShortestPathEngine
from .validation import validate_move, validate_word
from .wordset import WordSet, normalize


class WordChainLogic:
    def __init__(
            self,
            word_set: WordSet,
            *,
            policies: Dict[int, LengthPolicy] | None = None,
            max_attempts: int = DEFAULT_MAX_ATTEMPTS,
            seed: int | None = None,
            use_index: bool = False,
    ):
        self.policies = policies
        self.max_attempts = max_attempts
        self.use_index = use_index
        self.rng = random.Random(seed)
        self._install(word_set)
        self.cache = DistanceCache(self.engine)

    @classmethod
    def from_vocabulary(cls, vocabulary: Iterable[str], length: int, **kwargs) -> "WordChainLogic":
        """Filter a mixed-length vocabulary down to `length` and wrap it."""
        return cls(WordSet(vocabulary, length), **kwargs)

    def _install(self, word_set: WordSet) -> None:
        self.word_set = word_set
        self.engine = ShortestPathEngine(word_set, use_index=self.use_index)
        # Generator shares the facade RNG so a seed covers the whole session.
        self.generator = PuzzleGenerator(self.engine, max_attempts=self.max_attempts, rng=self.rng)

    # ---- length switching ----
    @property
    def word_length(self) -> int:
        return self.word_set.length

    def set_length(self, length: int, vocabulary: Iterable[str]) -> None:
        """Swap in the WordSet for `length`; every cached distance is dropped."""
        self._install(WordSet(vocabulary, length))
        self.cache.rebind(self.engine)

    def policy(self) -> LengthPolicy:
        return policy_for(self.word_length, self.policies)

    # ---- queries ----
    def is_valid_word(self, word: str) -> bool:
        return validate_word(word, self.word_set)

    def is_valid_move(self, current: str, proposed: str) -> bool:
        return validate_move(current, proposed, self.word_set)

    def shortest_path(self, start: str, end: str) -> List[str]:
        return self.engine.shortest_path(normalize(start), normalize(end))

    def precompute_distances(self, target: str) -> None:
        self.cache.precompute(normalize(target))

    def distance_to(self, word: str) -> int:
        return self.cache.distance_to(normalize(word))

    def distance(self, start: str, end: str) -> int:
        return self.cache.distance(normalize(start), normalize(end))

    def clear_cache(self) -> None:
        self.cache.clear()

    def chain_between(self, anchors: Sequence[str]) -> List[List[str]]:
        """
        Shortest chain between each consecutive pair of anchor words.

        One entry per pair, in order; a pair with no chain (or an unknown
        word) gets [] so callers can report exactly which leg failed.
        """
        words = [normalize(w) for w in anchors]
        return [self.engine.shortest_path(a, b) for a, b in zip(words, words[1:])]

    # ---- generation ----
    def generate(
            self,
            min_length: int,
            max_length: Optional[int] = None,
            forced_start: Optional[str] = None,
            should_cancel: Optional[Callable[[], bool]] = None,
    ) -> GeneratedPuzzle:
        start = normalize(forced_start) if forced_start is not None else None
        return self.generator.generate(min_length, max_length,
                                       forced_start=start, should_cancel=should_cancel)

    def generate_for_length(
            self,
            should_cancel: Optional[Callable[[], bool]] = None,
    ) -> GeneratedPuzzle:
        """Random puzzle bounded by this length's policy."""
        return self.generator.generate_with_policy(self.policy(), should_cancel=should_cancel)

    def continue_from(
            self,
            word: str,
            should_cancel: Optional[Callable[[], bool]] = None,
    ) -> GeneratedPuzzle:
        """New puzzle that starts where the last one ended."""
        return self.generator.generate_with_policy(
            self.policy(), forced_start=normalize(word), should_cancel=should_cancel)


__all__ = ["WordChainLogic", "NOT_FOUND"]
