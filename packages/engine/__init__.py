from .adjacency import are_adjacent, hamming
from .wordset import WordSet
from .search import ShortestPathEngine
from .cache import DistanceCache, NOT_FOUND
from .policy import LengthPolicy, DEFAULT_POLICIES, load_policies, policy_for
from .generator import PuzzleGenerator, GeneratedPuzzle
from .validation import validate_word, validate_move
from .logic import WordChainLogic

__all__ = [
    "are_adjacent", "hamming", "WordSet", "ShortestPathEngine", "DistanceCache", "NOT_FOUND",
    "LengthPolicy", "DEFAULT_POLICIES", "load_policies", "policy_for",
    "PuzzleGenerator", "GeneratedPuzzle", "validate_word", "validate_move", "WordChainLogic",
]
