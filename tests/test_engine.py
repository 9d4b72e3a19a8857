import pytest
from packages.engine import (WordSet, ShortestPathEngine, are_adjacent, hamming,
                             validate_word, validate_move)

# CAT-COT-COG-DOG is the only 3-step route; CAP/COP form a side loop.
WORDS = ["CAT", "COT", "COG", "DOG", "CAP", "COP"]


def _engine(words=WORDS, length=3, use_index=False):
    return ShortestPathEngine(WordSet(words, length), use_index=use_index)


# --- adjacency golden tests ---
@pytest.mark.parametrize("a,b,expected", [
    ("CAT", "COT", True),
    ("CAT", "CAP", True),
    ("CAT", "CAT", False),
    ("CAT", "DOG", False),
    ("CAT", "COG", False),
    ("CAT", "CATS", False),
    ("COLD", "CORD", True),
    ("", "", False),
])
def test_are_adjacent_golden(a, b, expected):
    assert are_adjacent(a, b) is expected


def test_are_adjacent_symmetric():
    for a in WORDS:
        for b in WORDS:
            assert are_adjacent(a, b) == are_adjacent(b, a)


def test_hamming_counts_and_guards_length():
    assert hamming("CAT", "DOG") == 3
    assert hamming("CAT", "CAT") == 0
    with pytest.raises(ValueError):
        hamming("CAT", "CATS")


# --- WordSet hygiene ---
def test_wordset_normalizes_and_filters():
    ws = WordSet([" cat", "COT", "cot", "dogs", "c4t", "", "ZIP"], 3)
    assert set(ws) == {"CAT", "COT", "ZIP"}
    assert len(ws) == 3 and ws.length == 3
    assert "CAT" in ws and "cat" not in ws and 42 not in ws


def test_wordset_rejects_bad_length():
    with pytest.raises(ValueError):
        WordSet(["CAT"], 0)


# --- shortest path ---
def test_shortest_path_cat_dog():
    chain = _engine().shortest_path("CAT", "DOG")
    assert chain == ["CAT", "COT", "COG", "DOG"]


def test_shortest_path_unknown_word_is_empty():
    assert _engine().shortest_path("CAT", "ZZZ") == []
    assert _engine().shortest_path("ZZZ", "CAT") == []


def test_shortest_path_same_word():
    assert _engine().shortest_path("COG", "COG") == ["COG"]


def test_shortest_path_disconnected_is_empty():
    eng = _engine(WORDS + ["ZIP"])
    assert eng.shortest_path("CAT", "ZIP") == []
    assert "ZIP" not in eng.distances_from("CAT")


def test_empty_wordset_returns_sentinels():
    eng = _engine([])
    assert eng.shortest_path("CAT", "DOG") == []
    assert eng.distances_from("CAT") == {}


def test_distances_from_cat():
    assert _engine().distances_from("CAT") == {
        "CAT": 0, "COT": 1, "CAP": 1, "COG": 2, "COP": 2, "DOG": 3,
    }


@pytest.mark.parametrize("use_index", [False, True])
def test_paths_are_valid_and_optimal(use_index):
    eng = _engine(use_index=use_index)
    for a in WORDS:
        dist = eng.distances_from(a)
        for b in WORDS:
            chain = eng.shortest_path(a, b)
            assert chain[0] == a and chain[-1] == b
            assert all(are_adjacent(x, y) for x, y in zip(chain, chain[1:]))
            assert len(chain) - 1 == dist[b]


def test_index_and_scan_agree_on_neighbors():
    scan, idx = _engine(), _engine(use_index=True)
    for w in WORDS:
        assert sorted(scan.neighbors(w)) == idx.neighbors(w)


# --- validation ---
def test_validate_word():
    ws = WordSet(WORDS, 3)
    assert validate_word("cat", ws) is True
    assert validate_word("CATS", ws) is False
    assert validate_word("ZZZ", ws) is False
    assert validate_word(None, ws) is False


def test_validate_move():
    ws = WordSet(WORDS, 3)
    assert validate_move("CAT", "cot", ws) is True
    assert validate_move("CAT", "CAT", ws) is False   # not a move
    assert validate_move("CAT", "COG", ws) is False   # two letters
    assert validate_move("CAT", "CAB", ws) is False   # not a word
