"""
Depth-limited minimax search with alpha-beta pruning.

The search never builds an explicit tree: every node is a fresh copy of its
parent state with one move (or a pass) applied, and alpha/beta are threaded
through the recursion as plain arguments.
"""

import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator

from .evaluation import evaluate
from .state import PASS, PLAYER_ONE, PLAYER_TWO, GameState, Position

MIN_SCORE = -sys.maxsize - 1
MAX_SCORE = sys.maxsize

# Reference tuning
DEFAULT_MAX_DEPTH = 4


@dataclass
class SearchConfig:
    """Configuration for AlphaBetaSearch.

    Args:
        max_depth: Plies below a root move after which states are scored
            directly by the evaluator
        zero_floor: Start the move selector's and max nodes' running best at 0
            instead of MIN_SCORE. Any branch whose every leaf scores below zero
            is then never preferred over the initial value.
        pass_in_tree: Give a blocked node (game not over, side to move has no
            legal move) a single child with the turn passed. When False such a
            node has no children: a max node returns its initial running best
            and a min node returns MAX_SCORE.
        max_player: Side the evaluator scores for. None means the side to
            move at the root of decide_move; PLAYER_TWO always plays for white
            regardless of whose move is being chosen.
        evaluate: Leaf evaluator, called as evaluate(state, max_player)
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    zero_floor: bool = True
    pass_in_tree: bool = True
    max_player: int | None = None
    evaluate: Callable[[GameState, int], int] = evaluate

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_player not in (None, PLAYER_ONE, PLAYER_TWO):
            raise ValueError(f"Invalid max_player: {self.max_player}")


@dataclass
class SearchStats:
    """Counters collected during one decide_move call."""

    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0
    move_scores: dict[Position, int] = field(default_factory=dict)
    best_score: int | None = None
    elapsed_sec: float = 0.0


class AlphaBetaSearch:
    """
    Minimax with alpha-beta pruning over copied game states.

    Whether a node maximises or minimises is decided by comparing the node's
    side to move with the maximising side, so passes keep the polarity
    consistent.
    """

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config if config is not None else SearchConfig()
        self.stats = SearchStats()
        self._max_player = (
            self.config.max_player
            if self.config.max_player is not None
            else PLAYER_TWO
        )

    @property
    def max_player(self) -> int:
        return self._max_player

    @property
    def _floor(self) -> int:
        return 0 if self.config.zero_floor else MIN_SCORE

    def decide_move(self, state: GameState) -> Position | None:
        """Pick a move for the side to move in ``state``.

        Returns:
            The chosen legal move, PASS when there is none, or None when every
            root move scores below the zero floor
        """
        self.stats = SearchStats()
        self._bind_max_player(state)

        legal_moves = state.legal_moves()
        if not legal_moves:
            return PASS

        start = time.perf_counter()
        best_score = self._floor
        best_move: Position | None = None
        for position in legal_moves:
            child = state.copy()
            child.insert_token(position)
            # Each root move is searched with the full window. With the default
            # max_player this is a min node.
            score = self._value(child, MIN_SCORE, MAX_SCORE, 0)
            self.stats.move_scores[position] = score
            if score >= best_score:
                best_score = score
                best_move = position

        self.stats.best_score = best_score if best_move is not None else None
        self.stats.elapsed_sec = time.perf_counter() - start
        return best_move

    def search_value(self, state: GameState, depth: int = 0) -> int:
        """Minimax value of ``state`` with a full window."""
        self._bind_max_player(state)
        return self._value(state, MIN_SCORE, MAX_SCORE, depth)

    def _bind_max_player(self, state: GameState) -> None:
        self._max_player = (
            self.config.max_player
            if self.config.max_player is not None
            else state.player_in_turn
        )

    def max_value(self, state: GameState, alpha: int, beta: int, depth: int) -> int:
        """Best score the maximising side can force from ``state``."""
        self.stats.nodes += 1
        if depth >= self.config.max_depth or state.is_finished():
            return self._leaf(state)

        depth += 1
        best = self._floor
        for child in self._children(state):
            value = self._value(child, alpha, beta, depth)
            if value > best:
                best = value
            if best >= beta:
                self.stats.cutoffs += 1
                return best
            alpha = max(alpha, best)

        return best

    def min_value(self, state: GameState, alpha: int, beta: int, depth: int) -> int:
        """Lowest score the minimising side can force from ``state``."""
        self.stats.nodes += 1
        if depth >= self.config.max_depth or state.is_finished():
            return self._leaf(state)

        depth += 1
        best = MAX_SCORE
        for child in self._children(state):
            value = self._value(child, alpha, beta, depth)
            if value < best:
                best = value
            if best <= alpha:
                self.stats.cutoffs += 1
                return best
            beta = min(beta, best)

        return best

    def _value(self, state: GameState, alpha: int, beta: int, depth: int) -> int:
        if state.player_in_turn == self._max_player:
            return self.max_value(state, alpha, beta, depth)
        return self.min_value(state, alpha, beta, depth)

    def _children(self, state: GameState) -> Iterator[GameState]:
        """Successor states in move-enumeration order.

        A blocked side yields a lone pass child, or nothing at all when
        pass_in_tree is off.
        """
        legal_moves = state.legal_moves()
        if not legal_moves and self.config.pass_in_tree:
            child = state.copy()
            child.pass_turn()
            yield child
            return

        for position in legal_moves:
            child = state.copy()
            child.insert_token(position)
            yield child

    def _leaf(self, state: GameState) -> int:
        self.stats.leaves += 1
        return self.config.evaluate(state, self._max_player)
