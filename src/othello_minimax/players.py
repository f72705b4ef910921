"""Move-choosing players."""

from abc import ABC, abstractmethod

import numpy as np

from .search import AlphaBetaSearch, SearchConfig, SearchStats
from .state import PASS, GameState, Position


class OthelloAI(ABC):
    """Something that picks a move for the side to move."""

    name: str = "ai"

    @abstractmethod
    def decide_move(self, state: GameState) -> Position | None:
        """Return a legal move, or PASS when the side to move has none."""
        pass


class MinimaxAI(OthelloAI):
    """Alpha-beta minimax player using the positional evaluator."""

    name = "minimax"

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.search = AlphaBetaSearch(config)

    @property
    def config(self) -> SearchConfig:
        return self.search.config

    @property
    def last_stats(self) -> SearchStats:
        return self.search.stats

    def decide_move(self, state: GameState) -> Position | None:
        return self.search.decide_move(state)


class RandomAI(OthelloAI):
    """Plays a uniformly random legal move."""

    name = "random"

    def __init__(self, seed: int | None = None) -> None:
        self.rng = np.random.default_rng(seed)

    def decide_move(self, state: GameState) -> Position:
        moves = state.legal_moves()
        if not moves:
            return PASS
        return moves[int(self.rng.integers(len(moves)))]
