"""Tests for the arena game runner and CLI."""

import pytest

from othello_minimax.arena import Arena
from othello_minimax.arena_main import build_search_config, main, parse_args
from othello_minimax.logging import ConsoleConfig, LoggerKind, LoggingConfig, create_logger
from othello_minimax.players import MinimaxAI, OthelloAI, RandomAI
from othello_minimax.search import SearchConfig
from othello_minimax.state import EMPTY, PASS, PLAYER_ONE, PLAYER_TWO, GameState, Position


class NonePlayer(OthelloAI):
    name = "none"

    def decide_move(self, state):
        return None


class CornerPlayer(OthelloAI):
    name = "corner"

    def decide_move(self, state):
        return Position(0, 0)


def test_random_vs_random():
    arena = Arena(RandomAI(seed=1), RandomAI(seed=2), size=6)

    results = arena.play_n(4)

    assert len(results) == len(arena.results) == 4
    wins1, wins2, draws = arena.get_stats()
    assert wins1 + wins2 + draws == 4
    pieces1, pieces2 = arena.get_pieces()
    assert pieces1 == sum(r.player1_tokens for r in results)
    assert pieces2 == sum(r.player2_tokens for r in results)
    for result in results:
        assert result.black_tokens + result.white_tokens <= 36
        assert len(result.moves) <= 32


def test_colours_alternate():
    arena = Arena(RandomAI(seed=0), RandomAI(seed=1), size=4)

    results = arena.play_n(3)

    assert [r.player1_color for r in results] == [PLAYER_ONE, PLAYER_TWO, PLAYER_ONE]


def test_minimax_vs_random():
    arena = Arena(MinimaxAI(SearchConfig(max_depth=1)), RandomAI(seed=5), size=4)

    result = arena.play_n(2)[0]

    assert result.winner in (EMPTY, PLAYER_ONE, PLAYER_TWO)
    assert result.player1_won == (result.winner == PLAYER_ONE)
    assert result.player1_tokens == result.black_tokens


def test_declining_players_end_the_game():
    arena = Arena(NonePlayer(), NonePlayer(), size=4)

    (result,) = arena.play_n(1)

    assert result.moves == []
    assert result.passes == 2
    assert result.winner == EMPTY
    assert arena.get_stats() == (0, 0, 1)


def test_play_returns_final_state_moves_and_passes():
    arena = Arena(RandomAI(seed=3), RandomAI(seed=4), size=4)

    state, moves, passes = arena.play(arena.player1, arena.player2)

    assert state.is_finished()
    assert len(moves) == sum(state.token_counts()) - 4
    assert PASS not in moves
    assert passes >= 0

    start, no_moves, two_passes = arena.play(NonePlayer(), NonePlayer())
    assert start == GameState(size=4)
    assert no_moves == []
    assert two_passes == 2


def test_illegal_move_raises():
    arena = Arena(CornerPlayer(), RandomAI(seed=0))

    with pytest.raises(ValueError, match="illegal move"):
        arena.play_n(1)


def test_arena_logs_games(capsys):
    logger = create_logger(
        LoggingConfig(
            backends={LoggerKind.CONSOLE: ConsoleConfig(show_params_table=False)}
        )
    )
    arena = Arena(
        MinimaxAI(SearchConfig(max_depth=1)),
        RandomAI(seed=3),
        size=4,
        logger=logger,
        log_moves=True,
    )

    arena.play_n(2)

    captured = capsys.readouterr()
    assert "Game 0" in captured.out
    assert "Game 1" in captured.out
    assert "game/player1_tokens" in captured.out
    assert "search/nodes" in captured.out


def test_cli(capsys):
    main(
        [
            "--player1",
            "minimax",
            "--player2",
            "random",
            "--games",
            "2",
            "--size",
            "4",
            "--depth",
            "1",
            "--seed",
            "0",
        ]
    )

    captured = capsys.readouterr()
    assert "Configuration" in captured.out
    assert "search_max_depth" in captured.out
    assert "arena/games" in captured.out
    assert "arena/player1_wins" in captured.out


def test_cli_quiet_random_players(capsys):
    main(["--player1", "random", "--games", "1", "--size", "4", "--quiet"])

    captured = capsys.readouterr()
    assert "Game 0" not in captured.out
    assert "search_max_depth" not in captured.out
    assert "arena/draws" in captured.out


def test_cli_search_flags():
    config = build_search_config(
        parse_args(["--depth", "2", "--max-player", "1", "--no-zero-floor", "--no-pass-in-tree"])
    )

    assert config.max_depth == 2
    assert config.max_player == PLAYER_ONE
    assert config.zero_floor is False
    assert config.pass_in_tree is False

    defaults = build_search_config(parse_args([]))
    assert defaults.max_player is None
    assert defaults.pass_in_tree is True
