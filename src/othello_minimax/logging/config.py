"""Configuration classes for the logging system."""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum


class LoggerKind(str, Enum):
    """Enum for logger backend types."""

    CONSOLE = "console"


class BaseLoggerConfig(ABC):
    """Base class for all logger configurations."""

    pass


@dataclass
class ConsoleConfig(BaseLoggerConfig):
    """Configuration for console logger.

    Args:
        verbose: Whether to print anything at all
        show_params_table: Whether to collect parameters into a table shown
            before the first metric
        show_timestamp: Whether to prefix metrics and events with HH:MM:SS
        width: Console width passed to rich (None lets rich detect it)
    """

    verbose: bool = True
    show_params_table: bool = True
    show_timestamp: bool = False
    width: int | None = None


@dataclass
class LoggingConfig:
    """Overall logging configuration.

    Args:
        backends: Dictionary mapping logger kinds to their configurations
    """

    backends: dict[LoggerKind, BaseLoggerConfig] = field(
        default_factory=lambda: {LoggerKind.CONSOLE: ConsoleConfig()}
    )
