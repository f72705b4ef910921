"""Tests for the player implementations."""

from othello_minimax.players import MinimaxAI, OthelloAI, RandomAI
from othello_minimax.search import SearchConfig
from othello_minimax.state import PASS, PLAYER_TWO, GameState


def test_random_ai_plays_legal_moves():
    state = GameState()
    player = RandomAI(seed=0)

    for _ in range(20):
        assert player.decide_move(state) in state.legal_moves()


def test_random_ai_is_seeded():
    state = GameState()

    player1 = RandomAI(seed=42)
    player2 = RandomAI(seed=42)

    for _ in range(5):
        assert player1.decide_move(state) == player2.decide_move(state)


def test_random_ai_passes_without_moves():
    state = GameState.from_board_str("XO--" "----" "----" "----", PLAYER_TWO)

    assert RandomAI(seed=0).decide_move(state) == PASS


def test_minimax_ai():
    player = MinimaxAI(SearchConfig(max_depth=2))
    state = GameState()

    move = player.decide_move(state)

    assert isinstance(player, OthelloAI)
    assert player.config.max_depth == 2
    assert move in state.legal_moves()
    assert player.last_stats.nodes > 0
    assert move in player.last_stats.move_scores


def test_minimax_ai_default_config():
    assert MinimaxAI().config == SearchConfig()
