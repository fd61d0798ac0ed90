"""Logger configuration and convenience helpers."""

from __future__ import annotations

import logging
import sys

_DEFAULT_LOGGER_NAME = "mastergames"
_DEFAULT_LOG_LEVEL = logging.INFO
_DEFAULT_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
_DEFAULT_HANDLER = logging.StreamHandler(sys.stdout)
_DEFAULT_HANDLER.setFormatter(_DEFAULT_FORMATTER)


def _configure_logger(logger: logging.Logger, level: int) -> None:
    """
    Configure a logger with the package handler.

    Child loggers (``mastergames.*``) inherit the handler through propagation, so
    only the package root logger receives a handler of its own.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to configure.
    level : int
        The logging level to set if the logger's level is not already set.

    Examples
    --------
    >>> import logging
    >>> from mastergames.utils.logger import _configure_logger
    >>> logger = logging.getLogger("mastergames")
    >>> _configure_logger(logger, logging.INFO)
    """
    root = logging.getLogger(_DEFAULT_LOGGER_NAME)
    if root.level == logging.NOTSET:
        root.setLevel(level)
    if _DEFAULT_HANDLER not in root.handlers:
        root.addHandler(_DEFAULT_HANDLER)
    root.propagate = False
    if logger is not root and logger.name.split(".")[0] != _DEFAULT_LOGGER_NAME:
        if logger.level == logging.NOTSET:
            logger.setLevel(level)
        if not logger.handlers:
            logger.addHandler(_DEFAULT_HANDLER)
        logger.propagate = False


def get_logger(name: str | None = None, level: int = _DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a configured logger for the given name."""
    logger = logging.getLogger(name or _DEFAULT_LOGGER_NAME)
    _configure_logger(logger, level)
    return logger


def set_level(level: int, logger_names: list[str] | None = None) -> None:
    """Set the log level for one or more logger names."""
    names = logger_names or [_DEFAULT_LOGGER_NAME]
    for name in names:
        logging.getLogger(name).setLevel(level)
