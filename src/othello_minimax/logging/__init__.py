"""Logging system for othello-minimax.

This package provides a small logging abstraction for search and arena
metrics. Backends register themselves by kind; the console backend renders
with Rich.

Example:
    >>> from othello_minimax.logging import (
    ...     create_logger,
    ...     LoggingConfig,
    ...     ConsoleConfig,
    ...     LoggerKind,
    ... )
    >>>
    >>> config = LoggingConfig(
    ...     backends={
    ...         LoggerKind.CONSOLE: ConsoleConfig(verbose=True),
    ...     }
    ... )
    >>> logger = create_logger(config)
    >>> logger.log_param("max_depth", 4)
    >>> logger.log_metric("search/nodes", 1523, step=0)
    >>> logger.finish()
"""

from .base import BaseLogger, create_logger
from .config import BaseLoggerConfig, ConsoleConfig, LoggerKind, LoggingConfig
from .helpers import (
    log_arena_summary,
    log_game_result,
    log_search_params,
    log_search_stats,
)

# Import to trigger @register_logger decorators
from . import console  # noqa: F401

__all__ = [
    "BaseLogger",
    "create_logger",
    "BaseLoggerConfig",
    "LoggingConfig",
    "ConsoleConfig",
    "LoggerKind",
    "log_arena_summary",
    "log_game_result",
    "log_search_params",
    "log_search_stats",
]
