"""Console logger implementation using Rich."""

from datetime import datetime
from typing import Any

from rich.console import Console
from rich.table import Table

from .base import BaseLogger, register_logger
from .config import BaseLoggerConfig, ConsoleConfig, LoggerKind


@register_logger(LoggerKind.CONSOLE)
class ConsoleLogger(BaseLogger):
    """Logger that prints search and arena output to stdout using Rich.

    Features:
    - Colorful metric and parameter logging
    - Parameter table shown right before the first metric (or on finish if
      no metric was ever logged)
    - Optional timestamps
    """

    def __init__(self, cfg: BaseLoggerConfig) -> None:
        """Initialize console logger.

        Args:
            cfg: Configuration (must be ConsoleConfig)

        Raises:
            TypeError: If cfg is not a ConsoleConfig instance
        """
        self.cfg: ConsoleConfig = self._as_console_cfg(cfg)
        self.console = Console(width=self.cfg.width)
        self.params: dict[str, Any] = {}
        self.params_logged = False
        self.last_step: int | None = None

    @staticmethod
    def _as_console_cfg(cfg: BaseLoggerConfig) -> ConsoleConfig:
        """Narrow the config type to ConsoleConfig.

        Args:
            cfg: Base logger configuration

        Returns:
            ConsoleConfig instance

        Raises:
            TypeError: If cfg is not a ConsoleConfig instance
        """
        if not isinstance(cfg, ConsoleConfig):
            raise TypeError(
                f"ConsoleLogger requires ConsoleConfig, but got {type(cfg).__name__}"
            )
        return cfg

    def _timestamp(self) -> str:
        if not self.cfg.show_timestamp:
            return ""
        return f"[dim]{datetime.now().strftime('%H:%M:%S')}[/dim] "

    @staticmethod
    def _format_value(value: float) -> str:
        """Right-align to 14 columns; integers keep no decimals."""
        if isinstance(value, int):
            return f"{value:>14d}"
        return f"{value:14.6f}"

    def log_metric(
        self, name: str, value: float, step: int | None = None, color: str | None = None
    ) -> None:
        """Log a metric with rich formatting.

        Args:
            name: Metric name
            value: Metric value
            step: Optional step number (game or move index)
            color: Optional color for the bullet and name (default: "blue")
        """
        if not self.cfg.verbose:
            return

        if not self.params_logged and self.params and self.cfg.show_params_table:
            self._show_params_table()
            self.params_logged = True

        # Separator when the step changes
        if step is not None and self.last_step is not None and step != self.last_step:
            self.console.print("[dim]" + "─" * 60 + "[/dim]")

        if step is not None:
            self.last_step = step

        bullet_color = color or "blue"
        name_color = f"bold {bullet_color}"
        line = (
            f"{self._timestamp()}[{bullet_color}]●[/{bullet_color}] "
            f"[{name_color}]{name:<32}[/{name_color}] "
            f"[bold green]{self._format_value(value)}[/bold green]"
        )
        if step is not None:
            line += f" [dim](step=[yellow]{step:>5}[/yellow])[/dim]"
        self.console.print(line)

    def log_param(self, key: str, value: Any) -> None:
        """Log a parameter to console.

        Args:
            key: Parameter name
            value: Parameter value

        Raises:
            RuntimeError: If the parameter table was already shown
        """
        if not self.cfg.verbose:
            return

        if self.params_logged:
            raise RuntimeError(
                f"Cannot log parameter '{key}' after metrics have been logged. "
                "All parameters must be logged before logging any metrics."
            )

        self.params[key] = value

        if not self.cfg.show_params_table:
            self.console.print(
                f"[magenta]▸[/magenta] [bold]{key}[/bold]=[cyan]{value}[/cyan]"
            )

    def log_event(self, message: str) -> None:
        """Log a one-line event to console.

        Args:
            message: Event text; may contain Rich markup
        """
        if not self.cfg.verbose:
            return

        self.console.print(f"{self._timestamp()}[green]✓[/green] {message}")

    def _show_params_table(self) -> None:
        """Display all logged parameters in a rich table."""
        if not self.params:
            return

        table = Table(title="[bold]Configuration Parameters[/bold]", show_header=True)
        table.add_column("Parameter", style="bold blue", no_wrap=True)
        table.add_column("Value", style="green")

        for key, value in self.params.items():
            table.add_row(key, str(value))

        self.console.print(table)
        self.console.print()

    def finish(self) -> None:
        """Show the parameter table if no metric ever triggered it."""
        if (
            self.cfg.verbose
            and self.cfg.show_params_table
            and self.params
            and not self.params_logged
        ):
            self._show_params_table()
            self.params_logged = True
