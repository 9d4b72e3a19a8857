from .search import PuzzleSearch, SearchState
from .state import GameSession, ChainState, AVAILABLE_LENGTHS

__all__ = ["PuzzleSearch", "SearchState", "GameSession", "ChainState", "AVAILABLE_LENGTHS"]
