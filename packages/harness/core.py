"""
Batch puzzle generation primitives.

- run_case:  generate ONE puzzle and time it.
- run_batch: generate many puzzles back-to-back from the same logic.
- summarize: aggregate stats over a batch (success rate, chain-size spread).

These functions are UI-agnostic so they can be reused by the CLI, a notebook
or a service that pre-builds daily puzzle files.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional

import numpy as np

from packages.engine import WordChainLogic


def run_case(
        logic: WordChainLogic,
        *,
        min_length: int,
        max_length: Optional[int] = None,
        forced_start: Optional[str] = None,
) -> Dict:
    """
    Run one generation call.

    Returns:
        dict with keys:
            success (bool), start, end, chain (list), steps (int),
            attempts (int), time_ms (float), length (word length)
    """
    t0 = time.perf_counter_ns()
    puzzle = logic.generate(min_length, max_length, forced_start=forced_start)
    dt_ms = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "success": puzzle.ok,
        "length": logic.word_length,
        "start": puzzle.start,
        "end": puzzle.end,
        "chain": list(puzzle.chain),
        "steps": puzzle.steps,
        "attempts": puzzle.attempts,
        "time_ms": dt_ms,
    }


def run_batch(
        logic: WordChainLogic,
        count: int,
        *,
        min_length: int,
        max_length: Optional[int] = None,
        forced_start: Optional[str] = None,
        on_result: Optional[Callable[[int, Dict], None]] = None,
) -> List[Dict]:
    """
    Generate `count` puzzles. Failed cases are kept (success=False) so the
    batch shows how often the policy exhausts its retry budget.

    on_result(idx, result) is called after each case (progress reporting).
    """
    if count < 0:
        raise ValueError(f"count must be >= 0; got {count}")

    out: List[Dict] = []
    for idx in range(1, count + 1):
        r = run_case(logic, min_length=min_length, max_length=max_length,
                     forced_start=forced_start)
        out.append(r)
        if on_result is not None:
            on_result(idx, r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch.

    Keys: cases, found, success_rate, steps_mean, steps_p50, steps_p90,
          steps_max, attempts_mean, time_ms_mean, steps_hist ({steps: count})
    Step stats cover successful cases only (None when there are none).
    """
    n = len(results)
    ok = [r for r in results if r["success"]]
    summary: Dict = {
        "cases": n,
        "found": len(ok),
        "success_rate": (len(ok) / n) if n else 0.0,
        "steps_mean": None,
        "steps_p50": None,
        "steps_p90": None,
        "steps_max": None,
        "attempts_mean": float(np.mean([r["attempts"] for r in results])) if n else 0.0,
        "time_ms_mean": float(np.mean([r["time_ms"] for r in results])) if n else 0.0,
        "steps_hist": {},
    }
    if not ok:
        return summary

    steps = np.array([r["steps"] for r in ok], dtype=int)
    counts = np.bincount(steps)
    summary.update({
        "steps_mean": float(steps.mean()),
        "steps_p50": float(np.percentile(steps, 50)),
        "steps_p90": float(np.percentile(steps, 90)),
        "steps_max": int(steps.max()),
        "steps_hist": {int(k): int(c) for k, c in enumerate(counts) if c},
    })
    return summary
