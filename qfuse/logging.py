"""Logging helpers for qfuse.

All loggers live under the ``qfuse`` namespace, share one formatter and do
not propagate to the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger under the ``qfuse`` namespace.

    Args:
        name: Logger name, usually ``__name__``. If None, the package logger
            ``qfuse`` is returned.

    Returns:
        Cached logger with a single stderr handler.

    Example:
        >>> from qfuse.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("composing block")
    """
    if name is None:
        name = "qfuse"

    if name == "qfuse" or name.startswith("qfuse."):
        logger_name = name
    else:
        logger_name = f"qfuse.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every qfuse logger, including ones created later.

    Args:
        level: A ``logging`` level or its name ('DEBUG', 'INFO', ...).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of all cached qfuse loggers.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. Defaults to
            ``[%(levelname)s] %(name)s: %(message)s``.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
