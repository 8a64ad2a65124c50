"""Logging configuration for sdk_codegen.

Library modules obtain namespaced loggers through get_logger(); the
application (or a test) decides where records go with setup_logging().
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "sdk_codegen"

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Usually the calling module's __name__.

    Returns:
        Logger instance.
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: int | str = logging.INFO,
    rich_output: bool = True,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        level: Logging level for the package logger.
        rich_output: Use a RichHandler instead of a plain stream handler.
        console: Console for the RichHandler (defaults to stderr).

    Returns:
        The configured package logger.
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.setLevel(level)
    _handler = handler
    return logger


logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
