"""Logging setup shared by the whole package.

Modules obtain loggers through :func:`get_logger`; the CLI calls
:func:`setup_logging` once to attach a rich handler writing to stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "json_to_class"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The logger instance.
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int = logging.WARNING, console: Console | None = None) -> None:
    """Configure the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        level: Logging level for the package logger.
        console: Console the handler writes to; defaults to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
