"""Logging setup shared by the primitives and their callers."""

from __future__ import annotations

import logging
from logging import Logger
from typing import Iterable, Optional

DEFAULT_LOGGER_NAME = "oo primitives"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(
    level: int = logging.INFO,
    *,
    name: str = DEFAULT_LOGGER_NAME,
    propagate: bool = False,
    extra_loggers: Optional[Iterable[str]] = None,
) -> Logger:
    """Configure and return a logger instance, optionally binding child loggers.

    Parameters
    ----------
    level: int
        Logging verbosity.
    name: str
        Logical logger namespace.
    propagate: bool
        Whether records also reach the ancestor handlers.
    extra_loggers: Iterable[str], optional
        Additional logger names (for example the source labels handed to
        ``LoggingInputStream``) that receive the same handler and level.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    def _attach(target: Logger) -> None:
        if not any(isinstance(existing, logging.StreamHandler) for existing in target.handlers):
            target.addHandler(handler)
        target.setLevel(level)
        target.propagate = propagate

    logger = logging.getLogger(name)
    _attach(logger)

    if extra_loggers:
        for logger_name in extra_loggers:
            _attach(logging.getLogger(logger_name))

    return logger


__all__ = ["DEFAULT_LOGGER_NAME", "LOG_FORMAT", "configure_logging"]
