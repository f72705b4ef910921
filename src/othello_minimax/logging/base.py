"""Base classes and registry for the logging system."""

from abc import ABC, abstractmethod
from typing import Any

from .config import BaseLoggerConfig, LoggerKind, LoggingConfig

# Global registry mapping LoggerKind to Logger classes
LOGGER_REGISTRY: dict[LoggerKind, type["BaseLogger"]] = {}


def register_logger(kind: LoggerKind):
    """Decorator to register a logger class with a specific kind.

    Args:
        kind: The LoggerKind this logger handles

    Returns:
        Decorator function that registers the class

    Example:
        @register_logger(LoggerKind.CONSOLE)
        class ConsoleLogger(BaseLogger):
            ...
    """

    def decorator(cls: type["BaseLogger"]) -> type["BaseLogger"]:
        LOGGER_REGISTRY[kind] = cls
        return cls

    return decorator


class BaseLogger(ABC):
    """Abstract base class for all loggers.

    Supports context manager protocol for automatic cleanup:
        with create_logger(config) as logger:
            logger.log_metric("search/nodes", 1234, step=0)
    """

    @abstractmethod
    def __init__(self, cfg: BaseLoggerConfig) -> None:
        """Initialize the logger with configuration.

        Args:
            cfg: Logger configuration (subclass-specific type)
        """
        pass

    @abstractmethod
    def log_metric(
        self, name: str, value: float, step: int | None = None, color: str | None = None
    ) -> None:
        """Log a metric value.

        Args:
            name: Metric name (e.g. "search/nodes")
            value: Metric value; integers for counts and scores
            step: Optional step number (move or game index)
            color: Optional display hint; backends without colour ignore it
        """
        pass

    @abstractmethod
    def log_param(self, key: str, value: Any) -> None:
        """Log a parameter/configuration value.

        Parameters are expected before any metric.

        Args:
            key: Parameter name
            value: Parameter value
        """
        pass

    @abstractmethod
    def log_event(self, message: str) -> None:
        """Log a one-line free-text event.

        Args:
            message: Event text, e.g. the outcome of a finished game
        """
        pass

    @abstractmethod
    def finish(self) -> None:
        """Finish logging and clean up resources."""
        pass

    def __enter__(self) -> "BaseLogger":
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore[no-untyped-def]
        """Exit context manager and clean up."""
        self.finish()


def create_logger(cfg: LoggingConfig) -> BaseLogger:
    """Create a logger from configuration.

    Args:
        cfg: Logging configuration specifying the backend and its config

    Returns:
        The configured backend logger

    Raises:
        RuntimeError: If no backend is specified or the backend is not registered
    """
    if not cfg.backends:
        raise RuntimeError("At least one logger backend must be specified.")

    # LoggerKind has a single member, so there is exactly one backend here
    ((kind, backend_cfg),) = cfg.backends.items()
    logger_cls = LOGGER_REGISTRY.get(kind)
    if logger_cls is None:
        raise RuntimeError(f"Logger '{kind.value}' is not registered.")

    # Each logger's __init__ is responsible for narrowing the config type
    return logger_cls(backend_cfg)
