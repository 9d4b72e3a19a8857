"""
Game session: one in-progress puzzle per word length.

Each length keeps its own WordChainLogic (WordSet + caches) and its own
ChainState, so switching from 4 to 5 letters and back resumes the 4-letter
puzzle exactly where it was. Vocabulary for a length is pulled lazily from a
`vocabulary_for(length)` callable the first time that length is used.

Concurrency: one lock per length. Every call that touches a length's logic
(generation, hints, validation, replacing the chain) holds that lock,
which gives the single-writer-per-length model the distance cache relies on. Background
searches (PuzzleSearch) take the same lock around each generation round.

Persistence: export_states()/import_states() move plain dicts in and out.
Distance caches are never exported; they are rebuilt on demand.
"""

from __future__ import annotations

import datetime as dt
import threading
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from packages.datasets.daily import DailyChainSource
from packages.datasets.validator import validate_chain
from packages.engine import NOT_FOUND, GeneratedPuzzle, LengthPolicy, WordChainLogic
from packages.engine.wordset import normalize

from .search import DEFAULT_BACKOFF_S, PuzzleSearch

AVAILABLE_LENGTHS = (3, 4, 5)
DEFAULT_LENGTH = 4


@dataclass
class ChainState:
    chain: List[str] = field(default_factory=list)
    user_word: str = ""
    is_completed: bool = False
    changes_made: int = 0
    hint_active: bool = False
    hint_distance: Optional[int] = None


class GameSession:
    def __init__(
            self,
            vocabulary_for: Callable[[int], Iterable[str]],
            *,
            lengths: Iterable[int] = AVAILABLE_LENGTHS,
            initial_length: int = DEFAULT_LENGTH,
            policies: Dict[int, LengthPolicy] | None = None,
            daily: Optional[DailyChainSource] = None,
            seed: int | None = None,
            backoff: float = DEFAULT_BACKOFF_S,
    ):
        self.available_lengths = tuple(sorted(lengths))
        if initial_length not in self.available_lengths:
            raise ValueError(f"initial_length {initial_length} not in {self.available_lengths}")
        self._vocabulary_for = vocabulary_for
        self.policies = policies
        self.daily = daily
        self.seed = seed
        self.backoff = backoff

        self.current_length = initial_length
        self.states: Dict[int, ChainState] = {}
        self._logic: Dict[int, WordChainLogic] = {}
        self._locks: Dict[int, threading.Lock] = {n: threading.Lock() for n in self.available_lengths}
        self._searches: Dict[int, PuzzleSearch] = {}

    # ---- per-length plumbing ----
    def _check_length(self, length: int) -> int:
        if length not in self.available_lengths:
            raise ValueError(f"unsupported word length {length}; choose from {self.available_lengths}")
        return length

    def logic(self, length: Optional[int] = None) -> WordChainLogic:
        """Logic for `length` (default: current), built on first use."""
        n = self._check_length(self.current_length if length is None else length)
        if n not in self._logic:
            seed = None if self.seed is None else self.seed + n
            self._logic[n] = WordChainLogic.from_vocabulary(
                self._vocabulary_for(n), n, policies=self.policies, seed=seed)
        return self._logic[n]

    def state(self, length: Optional[int] = None) -> ChainState:
        n = self._check_length(self.current_length if length is None else length)
        return self.states.setdefault(n, ChainState())

    def set_word_length(self, length: int) -> None:
        """Switch the active length. The other lengths keep their puzzles."""
        self.current_length = self._check_length(length)
        self.logic(length)
        self.clear_hint(length)

    # ---- puzzles ----
    def set_chain(self, chain: List[str], length: Optional[int] = None) -> None:
        """Replace the chain for a length. Never call with that length's lock held."""
        n = self._check_length(self.current_length if length is None else length)
        with self._locks[n]:
            st = self.state(n)
            st.chain = list(chain)
            st.user_word = chain[0] if chain else ""
            st.is_completed = False
            st.changes_made = 0
            self.clear_hint(n)

    def new_puzzle(self) -> bool:
        """
        One synchronous generation round for the current length.
        Returns False on exhaustion; the current puzzle is then left untouched.
        """
        n = self.current_length
        with self._locks[n]:
            puzzle = self.logic(n).generate_for_length()
        if not puzzle.ok:
            return False
        self.set_chain(puzzle.chain, n)
        return True

    def search_puzzle(self, max_rounds: Optional[int] = None) -> PuzzleSearch:
        """
        Start a background search for the current length, retrying with backoff.
        Any search already running for that length is cancelled first.
        """
        n = self.current_length
        self.cancel_search(n)
        logic = self.logic(n)
        lock = self._locks[n]

        def step(should_cancel: Callable[[], bool]) -> GeneratedPuzzle:
            with lock:
                return logic.generate_for_length(should_cancel=should_cancel)

        def on_found(puzzle: GeneratedPuzzle) -> None:
            self.set_chain(puzzle.chain, n)

        search = PuzzleSearch(
            step,
            on_found=on_found,
            accept=lambda p: all(len(w) == n for w in p.chain),
            backoff=self.backoff,
            max_rounds=max_rounds,
        )
        self._searches[n] = search
        return search.start()

    def cancel_search(self, length: Optional[int] = None) -> None:
        n = self.current_length if length is None else length
        search = self._searches.pop(n, None)
        if search is not None:
            search.cancel()

    def is_searching(self, length: Optional[int] = None) -> bool:
        n = self.current_length if length is None else length
        search = self._searches.get(n)
        return search is not None and search.running

    def close(self) -> None:
        """Cancel every background search (call on shutdown)."""
        for n in list(self._searches):
            self.cancel_search(n)

    def reset_puzzle(self) -> bool:
        """Back to the start word; with no puzzle yet, generate one instead."""
        st = self.state()
        if not st.chain:
            return self.new_puzzle()
        self.set_chain(st.chain)
        return True

    def continue_chain(self) -> bool:
        """Next puzzle starts at the current target. False if none was found."""
        st = self.state()
        if not st.chain:
            return False
        n = self.current_length
        with self._locks[n]:
            puzzle = self.logic(n).continue_from(st.chain[-1])
        if not puzzle.ok:
            return False
        self.set_chain(puzzle.chain, n)
        return True

    # ---- play ----
    def update_user_word(self, word: str) -> bool:
        """
        Apply the player's next word. Rejected (returns False, state unchanged)
        unless it is a real word one letter away from the current one.
        """
        n = self.current_length
        st = self.state(n)
        w = normalize(word)
        with self._locks[n]:
            logic = self.logic(n)
            if not st.chain or st.is_completed or not logic.is_valid_move(st.user_word, w):
                return False
            st.user_word = w
            st.changes_made += 1
            if w == st.chain[-1]:
                st.is_completed = True
            if st.hint_active:
                d = logic.distance_to(w)
                st.hint_distance = None if d == NOT_FOUND else d
        return True

    def calculate_hint(self) -> Optional[int]:
        """
        Steps left from the current word to the target, or None if unknown.
        The first call for a target runs one full BFS; later calls are lookups.
        """
        n = self.current_length
        st = self.state(n)
        if not st.chain:
            return None
        with self._locks[n]:
            logic = self.logic(n)
            logic.precompute_distances(st.chain[-1])
            d = logic.distance_to(st.user_word)
        st.hint_active = True
        st.hint_distance = None if d == NOT_FOUND else d
        return st.hint_distance

    def clear_hint(self, length: Optional[int] = None) -> None:
        st = self.state(length)
        st.hint_active = False
        st.hint_distance = None

    @property
    def minimum_changes(self) -> int:
        chain = self.state().chain
        return len(chain) - 1 if len(chain) >= 2 else 0

    # ---- daily puzzles ----
    def daily_chains(self, date: dt.date | str, length: Optional[int] = None) -> List[List[str]]:
        """
        Puzzle-of-the-day chains for `length`, keeping only chains made of
        words of that length (a mis-filed chain is skipped, not fatal).
        """
        n = self._check_length(self.current_length if length is None else length)
        if self.daily is None:
            return []
        chains = self.daily.get_daily_chains(date, n)
        return [c for c in chains if not any(len(w) != n for w in c)]

    def verify_daily(self, date: dt.date | str, length: Optional[int] = None) -> Dict[int, List[str]]:
        """Per-chain issues (index -> messages) for the day's chains; {} = all clean."""
        n = self._check_length(self.current_length if length is None else length)
        if self.daily is None:
            return {}
        words = self.logic(n).word_set.words
        out: Dict[int, List[str]] = {}
        for i, chain in enumerate(self.daily.get_daily_chains(date, n)):
            issues = validate_chain(chain, n, words)
            if issues:
                out[i] = issues
        return out

    # ---- persistence ----
    def export_states(self) -> Dict[int, Dict]:
        return {
            n: {k: v for k, v in asdict(st).items() if k not in ("hint_active", "hint_distance")}
            for n, st in self.states.items()
        }

    def import_states(self, data: Dict) -> None:
        for key, raw in data.items():
            n = self._check_length(int(key))
            self.states[n] = ChainState(
                chain=[normalize(w) for w in raw.get("chain", [])],
                user_word=normalize(raw.get("user_word", "")),
                is_completed=bool(raw.get("is_completed", False)),
                changes_made=int(raw.get("changes_made", 0)),
            )
