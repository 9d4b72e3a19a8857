import datetime as dt
import json
from pathlib import Path

from packages.datasets import (DailyChainSource, load_daily_chains, load_vocabulary,
                               pretty_summary, split_by_length, validate_chain,
                               validate_wordlist)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


# --- vocabulary ---
def test_load_vocabulary_csv_first_field(tmp_path: Path):
    p = tmp_path / "final_words.csv"
    _write(p, ["cat,120", "COT, 88", "", "cold,3", "dog"])
    assert load_vocabulary(p) == {"CAT", "COT", "COLD", "DOG"}
    assert load_vocabulary(p, length=3) == {"CAT", "COT", "DOG"}


def test_load_vocabulary_missing_file_is_empty(tmp_path: Path):
    assert load_vocabulary(tmp_path / "nope.csv") == set()


def test_split_by_length():
    out = split_by_length({"CAT", "COLD", "CRANE", "AT"}, [3, 4, 5])
    assert out == {3: {"CAT"}, 4: {"COLD"}, 5: {"CRANE"}}


# --- word list validator ---
def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.csv"
    _write(p, ["cat,1", "cot,2", "cold,3"])
    rep = validate_wordlist(3, str(p))
    assert rep["passed"] is True
    assert rep["count"] == 2 and rep["other_length"] == 1
    s = pretty_summary(rep)
    assert "L=3" in s and "OK" in s


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("cat\n???\n\ncat\n", encoding="utf-8")
    rep = validate_wordlist(3, str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(3, str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False


# --- chain validator ---
def test_validate_chain():
    assert validate_chain(["CAT", "COT", "COG"], 3) == []
    assert validate_chain([], 3) == ["empty chain"]
    issues = validate_chain(["CAT", "COG", "COLD"], 3, {"CAT", "COG"})
    assert any("not a single-letter change" in m for m in issues)
    assert any("has length 4" in m for m in issues)
    assert any("not in vocabulary" in m for m in issues)


# --- daily chains ---
DAYS = [
    {"date": "2025-06-01", "chains": [["cold", "cord", "word", "ward", "warm"]]},
    {"date": "2025-06-03", "chains": [["CAT", "COT", "COG", "DOG"]]},
]


def _daily(tmp_path: Path, data, name="potd.json") -> Path:
    p = tmp_path / name
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_daily_exact_and_prior_dates(tmp_path: Path):
    src = DailyChainSource({4: load_daily_chains(_daily(tmp_path, DAYS))})
    assert src.get_daily_chains("2025-06-01", 4) == [["COLD", "CORD", "WORD", "WARD", "WARM"]]
    # no entry for 06-02: closest earlier day
    assert src.get_daily_chains(dt.date(2025, 6, 2), 4)[0][0] == "COLD"
    assert src.get_daily_chains("2025-07-01", 4)[0][0] == "CAT"
    # before the first day: first entry
    assert src.get_daily_chains("2024-01-01", 4)[0][0] == "COLD"
    assert src.get_daily_chains("2025-06-01", 5) == []


def test_daily_legacy_format(tmp_path: Path):
    days = load_daily_chains(_daily(tmp_path, [["cat", "cot"], ["dog", "cog"]]))
    assert len(days) == 1 and days[0].date == ""
    assert days[0].chains[1] == ["DOG", "COG"]


def test_daily_from_files_skips_bad_files(tmp_path: Path):
    good = _daily(tmp_path, DAYS)
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    src = DailyChainSource.from_files({4: good, 5: bad, 3: tmp_path / "missing.json"})
    assert src.lengths() == [4]
    assert src.get_daily_chains("2025-06-03", 3) == []
