"""
Background puzzle search with retry, backoff and cancellation.

The generator is a pure step function: one call = one bounded batch of
attempts, returning either a puzzle or the failure sentinel. This module owns
the loop around it:

    IDLE -> SEARCHING -> FOUND -> IDLE
                      -> EXHAUSTED -> BACKOFF_WAIT -> SEARCHING ...
    any state -> CANCELLED (after cancel())

Guarantees:
  - cancel() is checked between attempts (via the step's should_cancel hook)
    and interrupts the backoff wait immediately
  - once cancel() has returned, on_found is never called; a cancelled search
    publishes nothing
  - with max_rounds set, the search gives up after that many exhausted rounds
    and goes back to IDLE with result None
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable, List, Optional

from packages.engine.generator import GeneratedPuzzle

StepFn = Callable[[Callable[[], bool]], GeneratedPuzzle]
DEFAULT_BACKOFF_S = 0.5


class SearchState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    BACKOFF_WAIT = "backoff_wait"
    CANCELLED = "cancelled"


class PuzzleSearch:
    def __init__(
            self,
            step: StepFn,
            *,
            on_found: Optional[Callable[[GeneratedPuzzle], None]] = None,
            accept: Optional[Callable[[GeneratedPuzzle], bool]] = None,
            backoff: float = DEFAULT_BACKOFF_S,
            max_rounds: Optional[int] = None,
    ):
        """
        Args:
            step:       one generation round; receives a should_cancel callable
            on_found:   called once with the accepted puzzle (from the worker thread)
            accept:     extra check on a found puzzle; a rejected one counts as exhausted
            backoff:    seconds to wait after an exhausted round
            max_rounds: stop after this many rounds (None = until found or cancelled)
        """
        if backoff < 0:
            raise ValueError(f"backoff must be >= 0; got {backoff}")
        self._step = step
        self._on_found = on_found
        self._accept = accept
        self.backoff = float(backoff)
        self.max_rounds = max_rounds

        self._cancel = threading.Event()
        self._publish_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

        self.state = SearchState.IDLE
        self.transitions: List[SearchState] = [SearchState.IDLE]
        self.result: Optional[GeneratedPuzzle] = None
        self.rounds = 0

    # ---- state bookkeeping ----
    def _enter(self, state: SearchState) -> None:
        self.state = state
        self.transitions.append(state)

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ---- control ----
    def start(self) -> "PuzzleSearch":
        """Run the loop on a daemon worker thread; returns self for chaining."""
        if self._thread is not None:
            raise RuntimeError("PuzzleSearch can only be started once")
        self._thread = threading.Thread(target=self.run, name="puzzle-search", daemon=True)
        self._thread.start()
        return self

    def cancel(self) -> None:
        # Taking the publish lock means a publish in flight finishes first,
        # and none can start afterwards.
        with self._publish_lock:
            self._cancel.set()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker; True if it has finished."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    # ---- the loop ----
    def run(self) -> Optional[GeneratedPuzzle]:
        """Blocking loop; start() runs this on a thread."""
        while True:
            if self.cancelled:
                self._enter(SearchState.CANCELLED)
                return None

            self._enter(SearchState.SEARCHING)
            self.rounds += 1
            puzzle = self._step(self._cancel.is_set)

            if self.cancelled:
                self._enter(SearchState.CANCELLED)
                return None

            if puzzle.ok and (self._accept is None or self._accept(puzzle)):
                if self._publish(puzzle):
                    self._enter(SearchState.IDLE)
                    return puzzle
                self._enter(SearchState.CANCELLED)
                return None

            self._enter(SearchState.EXHAUSTED)
            if self.max_rounds is not None and self.rounds >= self.max_rounds:
                self._enter(SearchState.IDLE)
                return None

            self._enter(SearchState.BACKOFF_WAIT)
            if self._cancel.wait(self.backoff):
                self._enter(SearchState.CANCELLED)
                return None

    def _publish(self, puzzle: GeneratedPuzzle) -> bool:
        with self._publish_lock:
            if self._cancel.is_set():
                return False
            self._enter(SearchState.FOUND)
            self.result = puzzle
            if self._on_found is not None:
                self._on_found(puzzle)
            return True
