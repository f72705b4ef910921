"""Tests for the Othello game state."""

import numpy as np
import pytest

from othello_minimax.state import (
    EMPTY,
    PASS,
    PLAYER_ONE,
    PLAYER_TWO,
    GameState,
    Position,
    other_player,
)

# Player two on two opposite corners, player one on the other two
CORNERS_4X4 = "O--X" "----" "----" "X--O"
# Player two is blocked, player one can still play (0, 2)
BLOCKED_WHITE_4X4 = "XO--" "----" "----" "----"


def test_start_position():
    """Test the standard four centre tokens on an 8x8 board."""
    state = GameState()

    assert state.size == 8
    assert state.player_in_turn == PLAYER_ONE
    assert state.board[3, 3] == PLAYER_TWO
    assert state.board[4, 4] == PLAYER_TWO
    assert state.board[3, 4] == PLAYER_ONE
    assert state.board[4, 3] == PLAYER_ONE
    assert state.token_counts() == (2, 2)


def test_start_legal_moves_row_major():
    """Test that black's four opening moves come out in row-major order."""
    state = GameState()

    assert state.legal_moves() == [
        Position(2, 3),
        Position(3, 2),
        Position(4, 5),
        Position(5, 4),
    ]


def test_legal_moves_for_other_player():
    state = GameState()

    assert state.legal_moves(PLAYER_TWO) == [
        Position(2, 4),
        Position(3, 5),
        Position(4, 2),
        Position(5, 3),
    ]


def test_insert_token_flips_and_advances_turn():
    state = GameState()

    state.insert_token(Position(2, 3))

    assert state.board[2, 3] == PLAYER_ONE
    assert state.board[3, 3] == PLAYER_ONE
    assert state.player_in_turn == PLAYER_TWO
    assert state.token_counts() == (4, 1)


def test_insert_token_flips_several_directions():
    state = GameState.from_board_str("X-X-" "OOO-" "XO--" "----", PLAYER_ONE)

    state.insert_token(Position(2, 2))

    assert state.board[1, 1] == PLAYER_ONE  # diagonal towards (0, 0)
    assert state.board[2, 1] == PLAYER_ONE  # left towards (2, 0)
    assert state.board[1, 2] == PLAYER_ONE  # up towards (0, 2)
    assert state.board[1, 0] == PLAYER_TWO


def test_insert_token_illegal_raises():
    state = GameState()

    with pytest.raises(ValueError, match="Illegal move"):
        state.insert_token(Position(0, 0))

    with pytest.raises(ValueError, match="Illegal move"):
        state.insert_token(Position(3, 3))  # occupied


def test_copy_is_independent():
    state = GameState()
    copied = state.copy()

    copied.insert_token(Position(2, 3))

    assert state == GameState()
    assert copied != state


def test_constructor_copies_board():
    """Test that building a state from another state's board never aliases it."""
    state = GameState()
    child = GameState(state.board, state.player_in_turn)

    child.insert_token(Position(5, 4))

    assert state.board[5, 4] == EMPTY
    assert state.token_counts() == (2, 2)


def test_board_is_read_only():
    state = GameState()

    with pytest.raises(ValueError):
        state.board[0, 0] = PLAYER_ONE


def test_board_str_round_trip():
    state = GameState(size=4)

    assert state.to_board_str() == "----" "-OX-" "-XO-" "----"
    assert GameState.from_board_str(state.to_board_str()) == state


def test_from_board_str_ignores_whitespace():
    state = GameState.from_board_str("O--X\n----\n----\nX--O\n", PLAYER_TWO)

    assert state.size == 4
    assert state.player_in_turn == PLAYER_TWO
    assert state.board[0, 0] == PLAYER_TWO


@pytest.mark.parametrize(
    "text, message",
    [
        ("-" * 15, "not a square"),
        ("Z" + "-" * 15, "Unknown board symbol"),
        ("-" * 9, "even number"),
    ],
)
def test_from_board_str_invalid(text, message):
    with pytest.raises(ValueError, match=message):
        GameState.from_board_str(text)


@pytest.mark.parametrize("size", [2, 3, 5, 7])
def test_invalid_sizes(size):
    with pytest.raises(ValueError, match="even number >= 4"):
        GameState(size=size)


def test_invalid_boards():
    with pytest.raises(ValueError, match="square"):
        GameState(np.zeros((4, 6), dtype=np.int8))

    with pytest.raises(ValueError, match="cells"):
        GameState(np.full((4, 4), 3))

    with pytest.raises(ValueError, match="player in turn"):
        GameState(player_in_turn=0)


def test_finished_position():
    state = GameState.from_board_str(CORNERS_4X4, PLAYER_ONE)

    assert state.legal_moves() == []
    assert state.legal_moves(PLAYER_TWO) == []
    assert state.is_finished()
    assert state.winner() == EMPTY


def test_pass_turn():
    state = GameState.from_board_str(BLOCKED_WHITE_4X4, PLAYER_TWO)

    assert state.legal_moves() == []
    assert not state.is_finished()

    state.pass_turn()

    assert state.player_in_turn == PLAYER_ONE
    assert state.legal_moves() == [Position(0, 2)]


def test_pass_turn_with_moves_raises():
    with pytest.raises(ValueError, match="cannot pass"):
        GameState().pass_turn()


def test_winner():
    state = GameState.from_board_str("XXXX" "XXXO" "OOOO" "----", PLAYER_ONE)

    assert state.token_counts() == (7, 5)
    assert state.winner() == PLAYER_ONE


def test_helpers():
    assert other_player(PLAYER_ONE) == PLAYER_TWO
    assert other_player(PLAYER_TWO) == PLAYER_ONE
    assert PASS == Position(-1, -1)
    assert str(Position(2, 3)) == "2 3"
    assert str(GameState(size=4)).splitlines()[1] == "- O X -"
