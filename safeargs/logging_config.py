"""Logging setup shared by all safeargs modules.

Modules obtain their logger with ``get_logger(__name__)``; the CLI calls
``configure_logging`` once to attach a rich handler to the package logger.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "safeargs"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the ``safeargs`` hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a RichHandler to the package logger and set its level.

    Args:
        level: Level name (``"DEBUG"``, ``"info"``...) or numeric level.

    Returns:
        The configured package logger.
    """
    global _configured

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        _configured = True

    return logger
