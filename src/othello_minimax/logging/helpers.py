"""Helper functions for logging search and arena metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..state import PLAYER_ONE
from .base import BaseLogger

if TYPE_CHECKING:
    from ..arena import Arena, GameResult
    from ..search import SearchConfig, SearchStats


def log_search_params(
    logger: BaseLogger, config: SearchConfig, prefix: str = "search"
) -> None:
    """Log the search configuration as parameters."""
    logger.log_param(f"{prefix}_max_depth", config.max_depth)
    logger.log_param(f"{prefix}_zero_floor", config.zero_floor)
    logger.log_param(f"{prefix}_pass_in_tree", config.pass_in_tree)
    logger.log_param(
        f"{prefix}_max_player",
        "side to move" if config.max_player is None else config.max_player,
    )
    logger.log_param(
        f"{prefix}_evaluate", getattr(config.evaluate, "__name__", repr(config.evaluate))
    )


def log_search_stats(
    logger: BaseLogger,
    stats: SearchStats,
    step: int,
    prefix: str = "search",
) -> None:
    """Log the counters of one decide_move call.

    Args:
        logger: Logger instance
        stats: Stats of the search that just finished
        step: Move counter
        prefix: Metric name prefix
    """
    logger.log_metric(f"{prefix}/nodes", stats.nodes, step=step, color="magenta")
    logger.log_metric(f"{prefix}/leaves", stats.leaves, step=step, color="magenta")
    logger.log_metric(f"{prefix}/cutoffs", stats.cutoffs, step=step, color="magenta")
    logger.log_metric(
        f"{prefix}/elapsed_sec", stats.elapsed_sec, step=step, color="magenta"
    )
    if stats.best_score is not None:
        logger.log_metric(
            f"{prefix}/best_score", stats.best_score, step=step, color="magenta"
        )


def log_game_result(logger: BaseLogger, result: GameResult, step: int) -> None:
    """Log the final token counts and outcome of one game."""
    logger.log_metric("game/player1_tokens", result.player1_tokens, step=step, color="cyan")
    logger.log_metric("game/player2_tokens", result.player2_tokens, step=step, color="cyan")
    logger.log_metric("game/moves", len(result.moves), step=step, color="cyan")
    logger.log_metric("game/passes", result.passes, step=step, color="cyan")

    if result.player1_won:
        outcome = "player 1 wins"
    elif result.player2_won:
        outcome = "player 2 wins"
    else:
        outcome = "draw"
    color = "black" if result.player1_color == PLAYER_ONE else "white"
    logger.log_event(
        f"[bold]Game {step}:[/bold] {outcome} "
        f"([cyan]{result.player1_tokens}-{result.player2_tokens}[/cyan], "
        f"player 1 as {color})"
    )


def log_arena_summary(logger: BaseLogger, arena: Arena) -> None:
    """Log cumulative wins, draws and token totals of an arena."""
    wins1, wins2, draws = arena.get_stats()
    pieces1, pieces2 = arena.get_pieces()
    games = len(arena.results)

    logger.log_metric("arena/games", games, color="green")
    logger.log_metric("arena/player1_wins", wins1, color="green")
    logger.log_metric("arena/player2_wins", wins2, color="green")
    logger.log_metric("arena/draws", draws, color="green")
    if games:
        logger.log_metric("arena/player1_win_rate", wins1 / games, color="green")
    logger.log_metric("arena/player1_pieces", pieces1, color="green")
    logger.log_metric("arena/player2_pieces", pieces2, color="green")
