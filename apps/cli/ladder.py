# apps/cli/ladder.py
"""
Print shortest chains between consecutive anchor words.

    python -m apps.cli.ladder --words data/final_words.csv NUN ABS TOW ARK

Each anchor pair is solved independently; the word length is taken from the
first anchor. With --distances the hint table (distance of every word on the
chain to the final anchor) is printed too.
"""

from __future__ import annotations

import argparse

from packages.datasets import load_vocabulary
from packages.engine import NOT_FOUND, WordChainLogic


def main():
    ap = argparse.ArgumentParser(description="wordchains: shortest ladders between anchor words")
    ap.add_argument("anchors", nargs="+", help="two or more words of the same length")
    ap.add_argument("--words", default="data/final_words.csv", help="word list path")
    ap.add_argument("--index", action="store_true", help="use the wildcard adjacency index")
    ap.add_argument("--distances", action="store_true",
                    help="also print each chain word's distance to the last anchor")
    args = ap.parse_args()

    anchors = [a.strip().upper() for a in args.anchors]
    if len(anchors) < 2:
        raise SystemExit("Need at least 2 words")
    length = len(anchors[0])
    if any(len(a) != length for a in anchors):
        raise SystemExit(f"All anchors must have {length} letters: {anchors}")

    logic = WordChainLogic.from_vocabulary(load_vocabulary(args.words, length), length,
                                           use_index=args.index)
    print(f"{len(logic.word_set)} {length}-letter words loaded from {args.words}")

    for (a, b), chain in zip(zip(anchors, anchors[1:]), logic.chain_between(anchors)):
        if not (logic.is_valid_word(a) and logic.is_valid_word(b)):
            print(f"Invalid word(s): {a} or {b} not in word list")
        elif not chain:
            print(f"No chain found from {a} to {b}")
        else:
            print(f"{a} -> {b} ({len(chain) - 1} steps): {' > '.join(chain)}")

    if args.distances:
        target = anchors[-1]
        logic.precompute_distances(target)
        print(f"\nDistance to {target}:")
        for w in anchors:
            d = logic.distance_to(w)
            print(f"  {w}: {'unreachable' if d == NOT_FOUND else d}")


if __name__ == "__main__":
    main()
