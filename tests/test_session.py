import threading
import time

import pytest
from packages.datasets import DailyChainSource, DayChains
from packages.engine import GeneratedPuzzle, LengthPolicy
from packages.session import GameSession, PuzzleSearch, SearchState

WORDS = ["CAT", "COT", "COG", "DOG", "CAP", "COP", "COLD", "CORD", "WORD"]
FOUND = GeneratedPuzzle(chain=["CAT", "COT", "COG", "DOG"], start="CAT", end="DOG", attempts=1)
MISS = GeneratedPuzzle()


def _vocab(n):
    return [w for w in WORDS if len(w) == n]


def _session(**kw):
    kw.setdefault("policies", {3: LengthPolicy(4, 4), 4: LengthPolicy(3, 3)})
    kw.setdefault("seed", 9)
    kw.setdefault("backoff", 0.0)
    return GameSession(_vocab, initial_length=3, **kw)


# --- PuzzleSearch state machine ---
def test_search_retries_after_exhaustion():
    outcomes = iter([MISS, MISS, FOUND])
    published = []
    search = PuzzleSearch(lambda should_cancel: next(outcomes),
                          on_found=published.append, backoff=0.0)
    assert search.run() == FOUND
    assert published == [FOUND]
    assert search.rounds == 3
    assert search.transitions == [
        SearchState.IDLE,
        SearchState.SEARCHING, SearchState.EXHAUSTED, SearchState.BACKOFF_WAIT,
        SearchState.SEARCHING, SearchState.EXHAUSTED, SearchState.BACKOFF_WAIT,
        SearchState.SEARCHING, SearchState.FOUND, SearchState.IDLE,
    ]


def test_search_gives_up_after_max_rounds():
    search = PuzzleSearch(lambda should_cancel: MISS, backoff=0.0, max_rounds=3)
    assert search.run() is None
    assert search.rounds == 3
    assert search.state == SearchState.IDLE
    assert search.result is None


def test_rejected_puzzle_counts_as_exhausted():
    search = PuzzleSearch(lambda should_cancel: FOUND, accept=lambda p: False,
                          backoff=0.0, max_rounds=2)
    assert search.run() is None
    assert SearchState.FOUND not in search.transitions


def test_cancel_during_round_publishes_nothing():
    started, release = threading.Event(), threading.Event()
    published = []

    def step(should_cancel):
        started.set()
        release.wait(2)
        return FOUND

    search = PuzzleSearch(step, on_found=published.append).start()
    assert started.wait(2)
    search.cancel()
    release.set()
    assert search.join(2)
    assert published == []
    assert search.result is None
    assert search.state == SearchState.CANCELLED


def test_cancel_interrupts_backoff():
    search = PuzzleSearch(lambda should_cancel: MISS, backoff=30.0).start()
    deadline = time.time() + 2
    while search.state != SearchState.BACKOFF_WAIT and time.time() < deadline:
        time.sleep(0.01)
    search.cancel()
    assert search.join(2)
    assert search.state == SearchState.CANCELLED


def test_step_sees_cancellation_flag():
    seen = []

    def step(should_cancel):
        search.cancel()
        seen.append(should_cancel())
        return FOUND

    search = PuzzleSearch(step)
    assert search.run() is None
    assert seen == [True]


def test_search_start_twice_raises():
    search = PuzzleSearch(lambda should_cancel: FOUND).start()
    search.join(2)
    with pytest.raises(RuntimeError):
        search.start()


# --- GameSession ---
def test_new_puzzle_and_play_through():
    s = _session()
    assert s.new_puzzle()
    st = s.state()
    assert len(st.chain) == 4 and st.user_word == st.chain[0]
    assert s.minimum_changes == 3

    s.set_chain(["CAT", "COT", "COG", "DOG"])
    assert s.update_user_word("dog") is False       # not one letter away
    assert s.update_user_word("cot") is True
    assert s.calculate_hint() == 2
    assert s.update_user_word("COG") is True
    assert s.state().hint_distance == 1
    assert s.update_user_word("DOG") is True
    assert s.state().is_completed and s.state().changes_made == 3
    assert s.update_user_word("COG") is False       # finished puzzles are frozen


def test_reset_and_continue():
    s = _session()
    s.set_chain(["CAT", "COT", "COG", "DOG"])
    s.update_user_word("COT")
    assert s.reset_puzzle()
    assert s.state().user_word == "CAT" and s.state().changes_made == 0

    assert s.continue_chain()
    assert s.state().chain[0] == "DOG" and len(s.state().chain) == 4


def test_lengths_keep_separate_state():
    s = _session()
    s.set_chain(["CAT", "COT", "COG", "DOG"])
    s.set_word_length(4)
    assert s.state().chain == []
    assert s.new_puzzle()
    assert all(len(w) == 4 for w in s.state().chain)
    s.set_word_length(3)
    assert s.state().chain == ["CAT", "COT", "COG", "DOG"]
    with pytest.raises(ValueError):
        s.set_word_length(6)


def test_hint_after_unknown_target_is_none():
    s = _session()
    s.set_chain(["CAT", "COT", "COG", "DOG"])
    assert s.calculate_hint() == 3
    s.set_chain(["CAT", "CAB"])
    assert s.calculate_hint() is None
    assert s.state().hint_distance is None


def test_set_chain_waits_for_length_lock():
    s = _session()
    s.set_chain(["CAT", "COT"])
    lock = s._locks[3]
    lock.acquire()
    try:
        t = threading.Thread(target=s.set_chain, args=(["COG", "DOG"], 3))
        t.start()
        t.join(0.2)
        assert t.is_alive()
        assert s.state(3).chain == ["CAT", "COT"]
    finally:
        lock.release()
    t.join(2)
    assert not t.is_alive()
    assert s.state(3).chain == ["COG", "DOG"]
    assert s.state(3).user_word == "COG"


def test_exhaustion_leaves_puzzle_untouched():
    s = _session(policies={3: LengthPolicy(9)})
    s.set_chain(["CAT", "COT"])
    assert s.new_puzzle() is False
    assert s.state().chain == ["CAT", "COT"]


def test_background_search_sets_chain():
    s = _session()
    search = s.search_puzzle()
    assert search.join(5)
    assert search.result is not None
    assert s.state(3).chain == search.result.chain
    s.close()


def test_export_import_roundtrip_drops_hints():
    s = _session()
    s.set_chain(["CAT", "COT", "COG", "DOG"])
    s.update_user_word("COT")
    s.calculate_hint()
    data = s.export_states()
    assert data[3] == {"chain": ["CAT", "COT", "COG", "DOG"], "user_word": "COT",
                       "is_completed": False, "changes_made": 1}

    t = _session()
    t.import_states({"3": data[3]})
    assert t.state().user_word == "COT"
    assert t.state().hint_active is False


def test_daily_chains_filter_wrong_length():
    daily = DailyChainSource({3: [DayChains("2025-06-01", [["CAT", "COT"], ["COLD", "CORD"],
                                                           ["CAT", "DOG"]])]})
    s = _session(daily=daily)
    assert s.daily_chains("2025-06-01") == [["CAT", "COT"], ["CAT", "DOG"]]
    issues = s.verify_daily("2025-06-01")
    assert set(issues) == {1, 2}
