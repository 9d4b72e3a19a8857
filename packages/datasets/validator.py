"""
Dataset validator for word-chain data.

What this module does:
- Validate a word list file for one word length (first CSV field per line).
- Enforce formatting rules (A-Z letters only, exact length, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Validate daily chains: right length, one letter per step, known words.
- Return machine-readable dicts (for manifests) and a pretty one-line summary.

Lines of other lengths are NOT errors: a shared vocabulary file holds every
length, so they are only counted (`other_length`).

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(4, "data/final_words.csv")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from packages.engine.adjacency import are_adjacent


# -----------------------------
# Structured report
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics for one word list at one length."""
    length: int
    path: str
    exists: bool
    sha256: str = ""         # SHA-256 of raw file bytes (empty if missing)
    count: int = 0           # valid words of `length`, duplicates included
    unique_count: int = 0    # valid words after dedupe
    other_length: int = 0    # clean words of some other length
    invalid_lines: int = 0   # non-alphabetic or blank entries
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(length: int, path: str) -> Dict:
    """
    Validate a word list for `length`-letter words.

    Returns a JSON-serializable dict (WordlistReport schema). `passed` is
    strict: file exists, at least one word of `length`, no invalid lines.
    Duplicates are reported as an issue but do not fail the check, since the
    loader collapses them anyway.
    """
    p = Path(path)
    rep = WordlistReport(length=length, path=str(p), exists=p.exists())
    if not rep.exists:
        rep.issues.append(f"word list not found: {path}")
        return asdict(rep)

    rep.sha256 = _sha256_file(p)
    words: List[str] = []
    with p.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            w = raw.split(",", 1)[0].strip()
            if not w or not (w.isascii() and w.isalpha()):
                rep.invalid_lines += 1
                continue
            if len(w) != length:
                rep.other_length += 1
                continue
            words.append(w.upper())

    rep.count = len(words)
    rep.unique_count = len(set(words))

    if rep.count == 0:
        rep.issues.append(f"no valid {length}-letter words")
    if rep.invalid_lines:
        rep.issues.append(f"{rep.invalid_lines} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append(f"{rep.count - rep.unique_count} duplicate word(s)")

    rep.passed = rep.count > 0 and rep.invalid_lines == 0
    return asdict(rep)


def validate_chain(chain: Sequence[str], length: int,
                   word_set: Optional[Iterable[str]] = None) -> List[str]:
    """
    Check one chain; return a list of human-readable problems ([] = valid).

    Minimality is NOT checked: a hand-made daily chain may be longer than the
    shortest path and still be a fair puzzle.
    """
    issues: List[str] = []
    if not chain:
        return ["empty chain"]

    known = set(word_set) if word_set is not None else None
    for i, w in enumerate(chain):
        if len(w) != length:
            issues.append(f"word {i} ({w}) has length {len(w)}, expected {length}")
        if known is not None and w not in known:
            issues.append(f"word {i} ({w}) not in vocabulary")

    for i, (a, b) in enumerate(zip(chain, chain[1:])):
        if not are_adjacent(a, b):
            issues.append(f"step {i} ({a} -> {b}) is not a single-letter change")
    return issues


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console output.

    Example:
        L=4 | words=4030 (uniq=4030, sha=abc123def456) | other_len=9120 | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"L={report['length']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| other_len={report['other_length']} | invalid={report['invalid_lines']} | {status}"
    )
