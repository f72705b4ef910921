"""Othello game state: board grid, side to move, legality and token insertion."""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

EMPTY = 0
PLAYER_ONE = 1  # black, moves first
PLAYER_TWO = 2  # white

_SYMBOLS = {EMPTY: "-", PLAYER_ONE: "X", PLAYER_TWO: "O"}
_CELLS = {symbol: value for value, symbol in _SYMBOLS.items()}

DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Position(NamedTuple):
    """A cell on the board, addressed by (row, col)."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row} {self.col}"


# Returned by players that have no legal move
PASS = Position(-1, -1)


def other_player(player: int) -> int:
    """Return the opponent of ``player``."""
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


class GameState:
    """An N×N Othello position plus the side to move.

    Constructing a state from an existing board always copies the grid, so a
    state never aliases another state's cells. The search relies on this to
    keep sibling branches isolated.
    """

    def __init__(
        self,
        board: np.ndarray | list[list[int]] | None = None,
        player_in_turn: int = PLAYER_ONE,
        size: int = 8,
    ) -> None:
        if player_in_turn not in (PLAYER_ONE, PLAYER_TWO):
            raise ValueError(f"Invalid player in turn: {player_in_turn}")

        if board is None:
            self._check_size(size)
            grid = np.zeros((size, size), dtype=np.int8)
            mid = size // 2
            grid[mid - 1, mid - 1] = PLAYER_TWO
            grid[mid, mid] = PLAYER_TWO
            grid[mid - 1, mid] = PLAYER_ONE
            grid[mid, mid - 1] = PLAYER_ONE
        else:
            grid = np.array(board, dtype=np.int8)
            if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
                raise ValueError(f"Board must be square, got shape {grid.shape}")
            self._check_size(grid.shape[0])
            if not np.isin(grid, (EMPTY, PLAYER_ONE, PLAYER_TWO)).all():
                raise ValueError("Board cells must be 0 (empty), 1 or 2")

        self._board = grid
        self._player_in_turn = player_in_turn

    @staticmethod
    def _check_size(size: int) -> None:
        if size < 4 or size % 2 != 0:
            raise ValueError(f"Board size must be an even number >= 4, got {size}")

    @classmethod
    def from_board_str(cls, text: str, player_in_turn: int = PLAYER_ONE) -> GameState:
        """Parse a row-major string of ``X`` / ``O`` / ``-`` characters."""
        cells = "".join(text.split())
        size = math.isqrt(len(cells))
        if size * size != len(cells):
            raise ValueError(f"Board string length {len(cells)} is not a square")
        try:
            values = [_CELLS[symbol] for symbol in cells]
        except KeyError as exc:
            raise ValueError(f"Unknown board symbol {exc.args[0]!r}") from None
        grid = np.array(values, dtype=np.int8).reshape(size, size)
        return cls(grid, player_in_turn)

    def to_board_str(self) -> str:
        return "".join(_SYMBOLS[int(cell)] for cell in self._board.flat)

    def copy(self) -> GameState:
        return GameState(self._board, self._player_in_turn)

    @property
    def board(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    @property
    def size(self) -> int:
        return self._board.shape[0]

    @property
    def player_in_turn(self) -> int:
        return self._player_in_turn

    @property
    def opponent(self) -> int:
        return other_player(self._player_in_turn)

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _flips(self, player: int, row: int, col: int) -> list[tuple[int, int]]:
        """Opponent cells flipped if ``player`` placed a token at (row, col)."""
        if not self._in_bounds(row, col) or self._board[row, col] != EMPTY:
            return []

        opponent = other_player(player)
        flips: list[tuple[int, int]] = []
        for dr, dc in DIRECTIONS:
            line: list[tuple[int, int]] = []
            r, c = row + dr, col + dc
            while self._in_bounds(r, c) and self._board[r, c] == opponent:
                line.append((r, c))
                r += dr
                c += dc
            if line and self._in_bounds(r, c) and self._board[r, c] == player:
                flips.extend(line)
        return flips

    def legal_moves(self, player: int | None = None) -> list[Position]:
        """Legal moves for ``player`` (default: side to move) in row-major order."""
        if player is None:
            player = self._player_in_turn
        return [
            Position(row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self._flips(player, row, col)
        ]

    def _has_move(self, player: int) -> bool:
        return any(
            self._flips(player, row, col)
            for row in range(self.size)
            for col in range(self.size)
        )

    def is_finished(self) -> bool:
        """True when neither side can move."""
        return not self._has_move(PLAYER_ONE) and not self._has_move(PLAYER_TWO)

    def insert_token(self, position: Position | tuple[int, int]) -> None:
        """Play ``position`` for the side to move, flip bracketed tokens and
        hand the turn to the opponent.

        Raises:
            ValueError: If the move is not legal in this state
        """
        row, col = position
        flips = self._flips(self._player_in_turn, row, col)
        if not flips:
            raise ValueError(
                f"Illegal move ({row}, {col}) for player {self._player_in_turn}"
            )

        self._board[row, col] = self._player_in_turn
        for r, c in flips:
            self._board[r, c] = self._player_in_turn
        self._player_in_turn = self.opponent

    def pass_turn(self) -> None:
        """Hand the turn to the opponent without placing a token."""
        if self._has_move(self._player_in_turn):
            raise ValueError(
                f"Player {self._player_in_turn} has a legal move and cannot pass"
            )
        self._player_in_turn = self.opponent

    def token_counts(self) -> tuple[int, int]:
        return (
            int(np.count_nonzero(self._board == PLAYER_ONE)),
            int(np.count_nonzero(self._board == PLAYER_TWO)),
        )

    def winner(self) -> int:
        """Player with more tokens, or 0 for a draw."""
        ones, twos = self.token_counts()
        if ones > twos:
            return PLAYER_ONE
        if twos > ones:
            return PLAYER_TWO
        return EMPTY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._player_in_turn == other._player_in_turn and np.array_equal(
            self._board, other._board
        )

    def __repr__(self) -> str:
        return (
            f"GameState.from_board_str({self.to_board_str()!r}, "
            f"player_in_turn={self._player_in_turn})"
        )

    def __str__(self) -> str:
        rows = [
            " ".join(_SYMBOLS[int(cell)] for cell in row) for row in self._board
        ]
        return "\n".join(rows)
