"""Logging utilities backed by rich console output.

Every module obtains its logger through ``get_logger`` so that command
tracing from the git wrapper and parser warnings share one console:

    from git_facade.common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Running git log --no-merges")
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from git_facade.common.env import env

# Shared console so log records and CLI messages interleave correctly
console = Console()
err_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=err_console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a logger writing through a rich handler.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level name. If None, uses LOG_LEVEL or INFO.
        show_time: Show timestamp in log output
        show_path: Show source location in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Keep propagation on so pytest's caplog sees the records
    logger.propagate = True

    return logger


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    prefix: str = "git_facade",
) -> None:
    """Apply a logging level to the application loggers, from the CLI entry point.

    Module loggers are created at import time with their own rich handler,
    so this adjusts their level instead of installing a second console
    handler on the root logger.

    Args:
        level: Level for every logger under ``prefix``; None keeps LOG_LEVEL/INFO
        log_file: Optional file path that also receives every record
        prefix: Dotted logger name prefix owned by the application
    """
    level = (level or env.log_level()).upper()

    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(level)

    if log_file:
        root_logger = logging.getLogger()
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a plain progress line."""
    console.print(message, markup=False, emoji=False, highlight=False, soft_wrap=True)


def success(message: str) -> None:
    """Print a message prefixed with a green checkmark."""
    console.print(f"[green]✓[/green] {escape(message)}", highlight=False, soft_wrap=True)


def warning(message: str) -> None:
    """Print a message prefixed with a yellow warning sign."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}", highlight=False, soft_wrap=True)


def error(message: str) -> None:
    """Print a message prefixed with a red cross, to stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}", highlight=False, soft_wrap=True)
    sys.stderr.flush()
