import csv
import json

from packages.engine import WordChainLogic
from packages.harness import run_batch, summarize, write_chains, write_csv, write_manifest
from packages.harness.io import timestamp_id

WORDS = ["CAT", "COT", "COG", "DOG", "CAP", "COP"]


def test_run_batch_smoke():
    logic = WordChainLogic.from_vocabulary(WORDS, 3, seed=42)
    seen = []
    results = run_batch(logic, 5, min_length=3, max_length=4,
                        on_result=lambda i, r: seen.append(i))
    assert seen == [1, 2, 3, 4, 5]
    assert len(results) == 5
    for r in results:
        assert "success" in r and "chain" in r
        if r["success"]:
            assert 2 <= r["steps"] <= 3 and r["length"] == 3


def test_summarize_counts():
    results = [
        {"success": True, "steps": 3, "attempts": 2, "time_ms": 1.0},
        {"success": True, "steps": 5, "attempts": 4, "time_ms": 3.0},
        {"success": False, "steps": 0, "attempts": 100, "time_ms": 5.0},
    ]
    s = summarize(results)
    assert s["cases"] == 3 and s["found"] == 2
    assert abs(s["success_rate"] - 2 / 3) < 1e-9
    assert s["steps_mean"] == 4.0 and s["steps_max"] == 5
    assert s["steps_hist"] == {3: 1, 5: 1}
    assert summarize([])["cases"] == 0
    assert summarize(results[2:])["steps_mean"] is None


def test_writers(tmp_path):
    logic = WordChainLogic.from_vocabulary(WORDS, 3, seed=1)
    results = run_batch(logic, 3, min_length=2)

    csv_path = write_csv(results, str(tmp_path / "out" / "gen.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["length"] == "3"

    chains_path = write_chains(results, str(tmp_path / "chains.json"), date="2025-06-01")
    day = json.loads(open(chains_path, encoding="utf-8").read())[0]
    assert day["date"] == "2025-06-01"
    assert len(day["chains"]) == sum(r["success"] for r in results)

    man = write_manifest({"run_id": timestamp_id(), "summary": summarize(results)},
                         str(tmp_path / "m.json"))
    assert json.loads(open(man, encoding="utf-8").read())["summary"]["cases"] == 3
