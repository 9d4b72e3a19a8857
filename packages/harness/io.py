"""
I/O utilities for generation runs.

Responsibilities:
- write_csv:      flatten per-puzzle results into a tidy CSV (one row per puzzle).
- write_chains:   dump accepted chains as a daily-chain JSON day entry.
- write_manifest: dump a JSON manifest with config, hashes and summary stats.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

CHAIN_SEP = " > "


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of generation results to CSV.

    Schema (columns):
      length, success, start, end, steps, attempts, time_ms, chain

    `chain` is one cell, words joined with " > " (empty for failed cases).
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["length", "success", "start", "end", "steps", "attempts", "time_ms", "chain"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            w.writerow({
                "length": r["length"],
                "success": r["success"],
                "start": r["start"],
                "end": r["end"],
                "steps": r["steps"],
                "attempts": r["attempts"],
                "time_ms": round(float(r["time_ms"]), 3),
                "chain": CHAIN_SEP.join(r.get("chain", [])),
            })
    return str(p)


def write_chains(results: List[Dict], path: str, date: str = "") -> str:
    """
    Write successful chains in the daily-chain file format (one day entry),
    so a batch can seed a puzzle-of-the-day file.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    day = {"date": date, "chains": [r["chain"] for r in results if r["success"]]}
    with p.open("w", encoding="utf-8") as f:
        json.dump([day], f, indent=2)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (length, min/max, count, seed, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is missing or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
