# apps/cli/daily.py
"""
Show (and check) the puzzle-of-the-day chains for a date.

    python -m apps.cli.daily --date 2025-06-01 \
        --file 3=data/potd_3.json --file 4=data/potd_4.json --file 5=data/potd_5.json

Without an exact match for the date, the closest earlier day is used. With
--words every chain is also checked against the vocabulary: right length,
single-letter steps, known words, and how far it is from the shortest chain.
"""

from __future__ import annotations

import argparse
import datetime as dt
from typing import Dict

from packages.datasets import DailyChainSource, load_vocabulary, validate_chain
from packages.engine import WordChainLogic


def _parse_files(specs) -> Dict[int, str]:
    files: Dict[int, str] = {}
    for spec in specs:
        length, sep, path = spec.partition("=")
        if not sep or not length.isdigit():
            raise SystemExit(f"--file expects LENGTH=PATH; got {spec!r}")
        files[int(length)] = path
    return files


def main():
    ap = argparse.ArgumentParser(description="wordchains: puzzle-of-the-day lookup")
    ap.add_argument("--file", action="append", default=[], required=True,
                    help="LENGTH=PATH of a daily-chain JSON file (repeatable)")
    ap.add_argument("--date", default=dt.date.today().isoformat(), help="YYYY-MM-DD")
    ap.add_argument("--length", type=int, help="only this word length")
    ap.add_argument("--words", help="word list to validate the chains against")
    args = ap.parse_args()

    source = DailyChainSource.from_files(_parse_files(args.file))
    lengths = [args.length] if args.length else source.lengths()
    vocab = load_vocabulary(args.words) if args.words else None

    for length in lengths:
        chains = source.get_daily_chains(args.date, length)
        print(f"== {length}-letter chains for {args.date}: {len(chains)}")
        logic = WordChainLogic.from_vocabulary(vocab, length) if vocab is not None else None

        for i, chain in enumerate(chains, 1):
            line = f"  {i}. {' > '.join(chain)}"
            if logic is not None:
                issues = validate_chain(chain, length, logic.word_set.words)
                if issues:
                    line += "  [" + "; ".join(issues) + "]"
                elif chain:
                    best = logic.distance(chain[0], chain[-1])
                    line += f"  (shortest={best}, given={len(chain) - 1})"
            print(line)


if __name__ == "__main__":
    main()
