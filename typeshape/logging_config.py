"""Logging setup for typeshape.

Modules obtain loggers through :func:`get_logger`; the CLI configures
output once through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "typeshape"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the typeshape hierarchy.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger named ``typeshape.<name>`` (or ``typeshape`` itself).
    """
    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the typeshape logger with stderr output and an optional file.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        log_file: Optional path receiving every record.

    Returns:
        The configured package logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # Drop handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(
        logging.Formatter("[typeshape] %(levelname)s %(message)s")
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
