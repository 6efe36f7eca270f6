"""Logging utilities for qbloch.

Every library logger lives under the ``qbloch`` namespace, writes to a
single stream handler and does not propagate to the root logger. The
starting level is read from ``QBLOCH_LOG_LEVEL`` (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

_PACKAGE = "qbloch"
_LEVEL_ENV_VAR = "QBLOCH_LOG_LEVEL"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.WARNING)
    return level


def _env_level(name: str) -> int:
    return _resolve_level(os.getenv(name) or "WARNING")


# Settings applied to loggers created from now on
_level: int = _env_level(_LEVEL_ENV_VAR)
_format: str = _FORMAT
_stream: Optional[IO[str]] = None

_loggers: dict[str, logging.Logger] = {}


def _qualified_name(name: Optional[str]) -> str:
    if name is None or name == _PACKAGE or name.startswith(_PACKAGE + "."):
        return name or _PACKAGE
    return f"{_PACKAGE}.{name}"


def _attach_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(_stream or sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_format))
    logger.addHandler(handler)
    logger.setLevel(_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack handlers. Pass
    ``__name__`` from the calling module; names outside the ``qbloch``
    namespace are prefixed with ``qbloch.``.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package logger ``qbloch``.

    Example:
        >>> from qbloch.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("converted coordinate to state")
    """
    logger_name = _qualified_name(name)
    if logger_name not in _loggers:
        logger = logging.getLogger(logger_name)
        _attach_handler(logger)
        logger.propagate = False
        _loggers[logger_name] = logger
    return _loggers[logger_name]


def set_log_level(level: int | str) -> None:
    """Set the level of every qbloch logger, existing and future.

    Args:
        level: ``logging.DEBUG``, ``logging.INFO``, ... or the level name.
            Unknown names fall back to WARNING.
    """
    global _level
    _level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Route qbloch logging to a stream.

    The settings apply to cached loggers and to any logger created later.
    Calling with no arguments restores the defaults.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format. Defaults to ``[LEVEL] name: message``.
        stream: Output stream. Defaults to ``sys.stderr``.
    """
    global _level, _format, _stream
    _level = _resolve_level(level)
    _format = format_string or _FORMAT
    _stream = stream
    for logger in _loggers.values():
        _attach_handler(logger)
