"""Logging utilities with rich console output.

Store and resolver modules get a logger through get_logger(); the CLI entry
point calls setup_logging() once so uvicorn's own loggers share the same
rich handler.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Added book 9")
    logger.warning("Delete ignored: book 42 does not exist")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instances for consistent output
console = Console()
error_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


# Handlers attached by get_logger, keyed by logger name. setup_logging()
# removes them so records are printed once, by the root handler.
_module_handlers: dict[str, RichHandler] = {}
_root_configured = False


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Before setup_logging() has run, the logger gets its own rich handler.
    Afterwards it only sets the level and leaves output to the root logger.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses LOG_LEVEL from the environment (default INFO).
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Updated author 2")
        Updated author 2
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(level.upper() if level else env.log_level())

    if not _root_configured:
        handler = _rich_handler(show_time=show_time, show_path=show_path)
        logger.addHandler(handler)
        _module_handlers[name] = handler

    # Propagate so pytest caplog can capture records
    logger.propagate = True

    return logger


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger for the server process.

    Call once from the CLI entry point, before uvicorn starts. Loggers
    already created by get_logger() are moved to ``level`` and lose their
    own handler.

    Args:
        level: Root logging level. If None, uses LOG_LEVEL from the environment.
    """
    global _root_configured

    level = (level or env.log_level()).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler(show_time=True))

    for name, handler in _module_handlers.items():
        logger = logging.getLogger(name)
        logger.removeHandler(handler)
        logger.setLevel(level)
    _module_handlers.clear()

    _root_configured = True


def success(message: str) -> None:
    """Print a success message with a green checkmark.

    Example:
        >>> success("Serving GraphQL on http://127.0.0.1:8000/graphql")
        ✓ Serving GraphQL on http://127.0.0.1:8000/graphql
    """
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error message with a red X to stderr."""
    error_console.print(f"[red]✗[/red] {message}")
