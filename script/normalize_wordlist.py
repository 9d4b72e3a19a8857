"""
Clean a raw word list in place (or into --out).

Features:
- Takes the first comma-separated field of each line (CSV exports work).
- Uppercases, drops blanks and anything that isn't A-Z only.
- Optional --lengths filter (e.g. keep only 3-5 letter words).
- Drops duplicates; keeps first-seen order unless --sort is given.

Usage:
    python -m script.normalize_wordlist --in data/final_words.csv --lengths 3 4 5 --sort
"""

import argparse
from pathlib import Path

from packages.datasets.io import first_fields, read_lines


def normalize_lines(lines: list[str], lengths=None) -> list[str]:
    wanted = set(lengths) if lengths else None
    seen, out = set(), []
    for field in first_fields(lines):
        w = field.upper()
        if not (w.isascii() and w.isalpha()):
            continue
        if wanted is not None and len(w) not in wanted:
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Normalize a word list file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt/.csv file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--lengths", type=int, nargs="*", help="keep only these word lengths")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = normalize_lines(lines, args.lengths)
    if args.sort:
        out.sort()

    outp.write_text("\n".join(out) + "\n", encoding="utf-8")
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")

if __name__ == "__main__":
    main()
