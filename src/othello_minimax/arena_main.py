"""
Run a duel between two players and log the results to the console.

Example:
    othello-arena --player1 minimax --player2 random --games 10 --depth 4
"""

from __future__ import annotations

import argparse

from othello_minimax.arena import Arena
from othello_minimax.logging import (
    ConsoleConfig,
    LoggerKind,
    LoggingConfig,
    create_logger,
    log_arena_summary,
    log_search_params,
)
from othello_minimax.players import MinimaxAI, OthelloAI, RandomAI
from othello_minimax.search import DEFAULT_MAX_DEPTH, SearchConfig
from othello_minimax.state import PLAYER_ONE, PLAYER_TWO

PLAYER_KINDS = ("minimax", "random")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Othello arena duel.")
    parser.add_argument(
        "--player1", choices=PLAYER_KINDS, default="minimax", help="Player 1 kind."
    )
    parser.add_argument(
        "--player2", choices=PLAYER_KINDS, default="random", help="Player 2 kind."
    )
    parser.add_argument(
        "--games",
        type=int,
        default=10,
        help="Number of games (even number recommended, colours alternate).",
    )
    parser.add_argument("--size", type=int, default=8, help="Board size.")
    parser.add_argument(
        "--depth", type=int, default=DEFAULT_MAX_DEPTH, help="Minimax search depth."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for random players."
    )
    parser.add_argument(
        "--max-player",
        choices=["root", "1", "2"],
        default="root",
        help="Side the evaluator scores for ('root' = side to move).",
    )
    parser.add_argument(
        "--no-zero-floor",
        action="store_true",
        help="Start max nodes at the minimum score instead of 0.",
    )
    parser.add_argument(
        "--no-pass-in-tree",
        action="store_true",
        help="Blocked nodes inside the search get no pass child.",
    )
    parser.add_argument(
        "--log-moves", action="store_true", help="Log search stats for every move."
    )
    parser.add_argument(
        "--timestamp", action="store_true", help="Prefix log lines with the time."
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the summary.")
    return parser.parse_args(argv)


def build_search_config(args: argparse.Namespace) -> SearchConfig:
    max_player = {"root": None, "1": PLAYER_ONE, "2": PLAYER_TWO}[args.max_player]
    return SearchConfig(
        max_depth=args.depth,
        zero_floor=not args.no_zero_floor,
        pass_in_tree=not args.no_pass_in_tree,
        max_player=max_player,
    )


def build_player(kind: str, config: SearchConfig, seed: int | None) -> OthelloAI:
    if kind == "minimax":
        return MinimaxAI(config)
    return RandomAI(seed)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = build_search_config(args)

    # Give two random players distinct streams
    seed2 = None if args.seed is None else args.seed + 1
    player1 = build_player(args.player1, config, args.seed)
    player2 = build_player(args.player2, config, seed2)

    logging_cfg = LoggingConfig(
        backends={
            LoggerKind.CONSOLE: ConsoleConfig(
                verbose=True,
                show_params_table=True,
                show_timestamp=args.timestamp,
            ),
        }
    )

    with create_logger(logging_cfg) as logger:
        logger.log_param("player1", args.player1)
        logger.log_param("player2", args.player2)
        logger.log_param("games", args.games)
        logger.log_param("board_size", args.size)
        logger.log_param("seed", args.seed)
        if "minimax" in (args.player1, args.player2):
            log_search_params(logger, config)

        arena = Arena(
            player1,
            player2,
            size=args.size,
            logger=None if args.quiet else logger,
            log_moves=args.log_moves,
        )
        arena.play_n(args.games)
        log_arena_summary(logger, arena)


if __name__ == "__main__":
    main()
