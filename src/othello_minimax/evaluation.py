"""Positional evaluation of Othello states."""

from functools import lru_cache

import numpy as np

from .state import PLAYER_TWO, GameState

CORNER_WEIGHT = 5
# Cells diagonally and orthogonally next to a corner hand the corner away
NEAR_CORNER_WEIGHT = 1
EDGE_WEIGHT = 4
# Flat weight for non-corner cells on a 4x4 board
SMALL_BOARD_WEIGHT = 2


@lru_cache(maxsize=None)
def position_weights(size: int) -> np.ndarray:
    """Weight of each cell on a ``size`` x ``size`` board.

    Corners score 5. On boards larger than 4x4, the three cells touching each
    corner score 1, the remaining edge cells score 4 and interior cells 0. On a
    4x4 board every non-corner cell scores 2.

    The returned array is cached and read-only.
    """
    last = size - 1
    if size == 4:
        weights = np.full((size, size), SMALL_BOARD_WEIGHT, dtype=np.int64)
    else:
        weights = np.zeros((size, size), dtype=np.int64)
        weights[0, 2:last - 1] = EDGE_WEIGHT
        weights[last, 2:last - 1] = EDGE_WEIGHT
        weights[2:last - 1, 0] = EDGE_WEIGHT
        weights[2:last - 1, last] = EDGE_WEIGHT
        for row in (0, last):
            for col in (0, last):
                r = 1 if row == 0 else last - 1
                c = 1 if col == 0 else last - 1
                weights[row, c] = NEAR_CORNER_WEIGHT
                weights[r, col] = NEAR_CORNER_WEIGHT
                weights[r, c] = NEAR_CORNER_WEIGHT

    for row in (0, last):
        for col in (0, last):
            weights[row, col] = CORNER_WEIGHT

    weights.flags.writeable = False
    return weights


def evaluate(state: GameState, player: int = PLAYER_TWO) -> int:
    """Sum of the positional weights of every cell owned by ``player``.

    Opponent tokens and the side to move do not affect the score.
    """
    board = state.board
    weights = position_weights(board.shape[0])
    return int(weights[board == player].sum())
