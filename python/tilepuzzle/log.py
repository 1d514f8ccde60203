"""Logging setup for the solver and its frontends."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

DEFAULT_LEVEL = "warning"


def setup_logging(level: str = DEFAULT_LEVEL, console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the ``tilepuzzle`` logger and return it.

    Safe to call repeatedly; earlier handlers are replaced.
    """
    if level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}."
        )
    logger = logging.getLogger("tilepuzzle")
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(LOG_LEVELS[level])
    logger.propagate = False
    return logger
