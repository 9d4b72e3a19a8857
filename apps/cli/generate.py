# apps/cli/generate.py
"""
CLI entry point for batch puzzle generation.

This script:
  1) Validates the word list for the requested length (counts + SHA).
  2) Builds the engine for that length and the policy (min/max chain words).
  3) Generates a batch of puzzles with a live progress indicator and writes:
       - CSV:  one row per puzzle (start, end, steps, attempts, chain)
       - JSON: the accepted chains in daily-chain file format
       - JSON: manifest with config, wordlist report, summary stats, git commit
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import load_vocabulary, pretty_summary, validate_wordlist
from packages.engine import WordChainLogic, load_policies, policy_for
from packages.harness import run_case, summarize
from packages.harness.io import (git_commit_or_unknown, timestamp_id, write_chains, write_csv,
                                 write_manifest)


def main():
    """
    Parse CLI args, validate the word list, run the batch with progress, write outputs.
    """
    ap = argparse.ArgumentParser(description="wordchains: generate random word-ladder puzzles")
    ap.add_argument("--length", type=int, default=4, help="word length (e.g., 3, 4 or 5)")
    ap.add_argument("--words", default="data/final_words.csv",
                    help="word list (one word per line, or CSV with the word first)")
    ap.add_argument("--count", type=int, default=20, help="number of puzzles to generate")
    ap.add_argument("--min", dest="min_length", type=int,
                    help="fewest words per chain (default: policy table)")
    ap.add_argument("--max", dest="max_length", type=int,
                    help="most words per chain (default: policy table)")
    ap.add_argument("--policy", help="JSON policy table overriding the built-in defaults")
    ap.add_argument("--start", help="force every puzzle to begin at this word")
    ap.add_argument("--attempts", type=int, default=100, help="retry budget per puzzle")
    ap.add_argument("--index", action="store_true",
                    help="use the wildcard adjacency index (faster on big lists)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--date", default="", help="date stamp for the chains file (YYYY-MM-DD)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.length, args.words)
    print(pretty_summary(rep))
    if rep["count"] == 0:
        raise SystemExit(f"No usable {args.length}-letter words in {args.words}")

    # 2) Engine + policy
    policies = load_policies(args.policy) if args.policy else None
    policy = policy_for(args.length, policies)
    min_length = args.min_length if args.min_length is not None else policy.min_length
    max_length = args.max_length if args.max_length is not None else policy.max_length

    logic = WordChainLogic.from_vocabulary(
        load_vocabulary(args.words, args.length), args.length,
        policies=policies, max_attempts=args.attempts, seed=args.seed, use_index=args.index,
    )
    if args.start and not logic.is_valid_word(args.start):
        raise SystemExit(f"--start {args.start!r} is not a {args.length}-letter word in the list")

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = args.count
    cases = range(1, total + 1)
    iterator = tqdm(cases, ncols=80, desc="Generating", unit="puzzle") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0

    # 4) Run batch with live progress
    for idx in iterator:
        r = run_case(logic, min_length=min_length, max_length=max_length,
                     forced_start=args.start)
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + chains + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"gen_{args.length}_{run_id}.csv"
    chains_path = outdir / f"gen_{args.length}_{run_id}_chains.json"
    manifest_path = outdir / f"gen_{args.length}_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_chains(results, str(chains_path), date=args.date)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {**vars(args), "min_length": min_length, "max_length": max_length},
        "wordlist": rep,
        "summary": summary,
    }, str(manifest_path))

    print(f"Found {summary['found']}/{summary['cases']} puzzles "
          f"(mean steps={summary['steps_mean']}, p90={summary['steps_p90']})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {chains_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
