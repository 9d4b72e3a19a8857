"""
Download a word list and write a clean one-word-per-line file.

What it does:
- Downloads a URL (plain-text word list or an HTML page listing words).
- For HTML, parses the visible text; for text, uses it as-is.
- Keeps A-Z tokens of the requested lengths (default 3, 4, 5), uppercased.
- De-duplicates, sorts, and writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --lengths 3 4 5 --out data/final_words.csv
"""

import argparse
import re
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

TOKEN_RE = re.compile(r"\b[A-Za-z]+\b")


def extract_words(text: str, lengths) -> list[str]:
    wanted = set(lengths)
    words = {m.group(0).upper() for m in TOKEN_RE.finditer(text)}
    return sorted(w for w in words if len(w) in wanted)


def fetch_words(url: str, lengths) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = r.text
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    return extract_words(text, lengths)


def main():
    ap = argparse.ArgumentParser(description="Download and clean a word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--lengths", type=int, nargs="+", default=[3, 4, 5])
    ap.add_argument("--out", default="data/final_words.csv")
    args = ap.parse_args()

    words = fetch_words(args.url, args.lengths)
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} words -> {out}")

if __name__ == "__main__":
    main()
