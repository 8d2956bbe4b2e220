"""Logging configuration utilities."""

import logging
from typing import List, Optional

from rich.logging import RichHandler

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    quiet_loggers: Optional[List[str]] = None,
    use_rich: bool = False,
) -> None:
    """Configure logging for drainwatch tools.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_string: Custom format string for log messages.
        quiet_loggers: List of logger names to set to WARNING level.
        use_rich: Route log output through rich so it doesn't garble
            terminal reports.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if use_rich:
        # RichHandler renders time and level itself
        logging.basicConfig(
            level=log_level,
            format=format_string or "%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )
    else:
        logging.basicConfig(level=log_level, format=format_string or DEFAULT_FORMAT)

    default_quiet = ["aiohttp", "asyncio"]
    for logger_name in (quiet_loggers or []) + default_quiet:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)
