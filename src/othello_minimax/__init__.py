"""Alpha-beta minimax player for Othello on N×N boards.

Example:
    >>> from othello_minimax import GameState, MinimaxAI, SearchConfig
    >>> ai = MinimaxAI(SearchConfig(max_depth=2))
    >>> state = GameState()
    >>> ai.decide_move(state) in state.legal_moves()
    True
"""

from .arena import Arena, GameResult
from .evaluation import evaluate, position_weights
from .players import MinimaxAI, OthelloAI, RandomAI
from .search import (
    DEFAULT_MAX_DEPTH,
    MAX_SCORE,
    MIN_SCORE,
    AlphaBetaSearch,
    SearchConfig,
    SearchStats,
)
from .state import (
    EMPTY,
    PASS,
    PLAYER_ONE,
    PLAYER_TWO,
    GameState,
    Position,
    other_player,
)

__all__ = [
    "Arena",
    "GameResult",
    "evaluate",
    "position_weights",
    "MinimaxAI",
    "OthelloAI",
    "RandomAI",
    "DEFAULT_MAX_DEPTH",
    "MAX_SCORE",
    "MIN_SCORE",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchStats",
    "EMPTY",
    "PASS",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "GameState",
    "Position",
    "other_player",
]
