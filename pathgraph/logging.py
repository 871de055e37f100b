"""Logging for pathgraph.

Every module logs through a child of the ``pathgraph`` logger. That logger
owns a single handler writing to stderr, since stdout carries harness and CLI
output that has to stay exact. The CLI picks the level from its ``-v`` and
``--quiet`` flags via `level_for_flags`.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathgraph"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handler owned by the package logger, None until first configured
_handler: Optional[logging.Handler] = None


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level. ``verbose`` wins."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Set the level of all pathgraph loggers.

    The first call installs a stderr handler. Later calls only change the
    level, unless ``handler`` is given, in which case it replaces the current
    one.

    Args:
        level: Logging level for the package logger.
        handler: Replacement handler (optional).
        format_string: Format for the handler (optional).

    Returns:
        The package logger.
    """
    global _handler

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if handler is not None or _handler is None:
        if _handler is not None:
            package_logger.removeHandler(_handler)
        _handler = handler or logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
        package_logger.addHandler(_handler)
    elif format_string is not None:
        _handler.setFormatter(logging.Formatter(format_string))

    package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually the caller's ``__name__``)."""
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop the package handler and level. Used by tests."""
    global _handler

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)
