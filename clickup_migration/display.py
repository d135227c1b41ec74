"""
Centralized display utilities for console output and progress tracking.
Provides the shared migration logger and a rich progress display.
"""

import logging
import os
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar, cast

from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

T = TypeVar("T")

NOTICE = 21
SUCCESS = 25


# Protocol for the logger with the extra success and notice methods
class ExtendedLogger(Protocol):
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def success(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def notice(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


LOGGING_THEME = Theme(
    {
        "logging.level.debug": "dim",
        "logging.level.info": "blue",
        "logging.level.notice": "cyan",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
        "logging.level.critical": "bold red on white",
        "logging.level.success": "bold green",
    }
)

console = Console(theme=LOGGING_THEME)

rich_handler = RichHandler(
    console=console,
    rich_tracebacks=True,
    tracebacks_show_locals=False,
    markup=True,
    show_time=True,
    show_level=True,
    enable_link_path=True,
    log_time_format="[%X]",
)


def _success(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
    if self.isEnabledFor(SUCCESS):
        self._log(SUCCESS, message, args, stacklevel=2, **kwargs)


def _notice(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
    if self.isEnabledFor(NOTICE):
        self._log(NOTICE, message, args, stacklevel=2, **kwargs)


def _install_custom_levels() -> None:
    """Register the NOTICE and SUCCESS levels and their logger methods."""
    logging.addLevelName(NOTICE, "NOTICE")
    logging.addLevelName(SUCCESS, "SUCCESS")
    setattr(logging.Logger, "success", _success)
    setattr(logging.Logger, "notice", _notice)


_install_custom_levels()

# Shared logger for every module; handlers are attached by configure_logging()
logger = cast(ExtendedLogger, logging.getLogger("migration"))


def resolve_level(level: str) -> int:
    """Translate a level name, including NOTICE and SUCCESS, to its number."""
    match level.upper():
        case "NOTICE":
            return NOTICE
        case "SUCCESS":
            return SUCCESS
        case name:
            return getattr(logging, name, logging.INFO)


def configure_logging(level: str = "INFO", log_file: str | None = None) -> ExtendedLogger:
    """
    Configure logging with rich formatting.

    Args:
        level: Logging level (DEBUG, INFO, NOTICE, SUCCESS, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file

    Returns:
        The shared migration logger
    """
    numeric_level = resolve_level(level)

    handlers: list[logging.Handler] = [rich_handler]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_format = logging.Formatter(
            "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(file_format)
        file_handler.setLevel(numeric_level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )

    logger.debug("Rich logging configured at level %s", level.upper())
    if log_file:
        logger.debug("Log file: %s", log_file)

    return logger


class ProgressTracker(Generic[T]):
    """
    Rich progress bar with a rolling log of the most recent items below it.
    """

    def __init__(
        self,
        description: str,
        total: int,
        log_title: str = "Recent Tasks",
        max_log_items: int = 5,
    ) -> None:
        self.description = description
        self.total = total
        self.log_title = log_title
        self.progress = Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TextColumn("({task.completed}/{task.total})"),
            console=console,
        )
        self.task_id = self.progress.add_task(description, total=total)
        self.recent_items: deque[str] = deque(maxlen=max_log_items)
        self.processed_count = 0
        self.live: Live | None = None

    def __enter__(self) -> "ProgressTracker[T]":
        self.live = Live(
            self.progress,
            console=console,
            refresh_per_second=4,
            vertical_overflow="ellipsis",
        )
        self.live.__enter__()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.live:
            self.live.__exit__(exc_type, exc_val, exc_tb)
            self.live = None

    def add_log_item(self, item: str) -> None:
        """Add an item to the rolling log."""
        self.recent_items.append(item)
        self._update_display()

    def increment(self, advance: int = 1) -> None:
        self.processed_count += advance
        self.progress.update(self.task_id, completed=self.processed_count)
        self._update_display()

    def _update_display(self) -> None:
        if not self.live:
            return

        if not self.recent_items:
            self.live.update(self.progress)
            return

        log_table = Table.grid(padding=(0, 1))
        log_table.add_column()
        log_table.add_row(Text(f"{self.log_title}:", style="bold yellow"))
        for item in self.recent_items:
            log_table.add_row(Text(f"  - {item}"))

        combined = Table.grid(padding=1)
        combined.add_column()
        combined.add_row(self.progress)
        combined.add_row(log_table)
        self.live.update(Panel.fit(combined, title=self.description, border_style="blue"))

    def track(self, iterable: Iterable[T]) -> Iterator[T]:
        """Yield items from the iterable, advancing the bar after each one."""
        for item in iterable:
            yield item
            self.increment()
