"""Environment-driven settings for the primitives' logging."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from .utils.env import load_repo_dotenv
from .utils.logging import DEFAULT_LOGGER_NAME, configure_logging

ENV_LOG_LEVEL = "OO_PRIMITIVES_LOG_LEVEL"
ENV_LOGGER = "OO_PRIMITIVES_LOGGER"
ENV_LOG_PROPAGATE = "OO_PRIMITIVES_LOG_PROPAGATE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging verbosity and namespace applied through ``configure_logging``."""

    level: int = logging.INFO
    name: str = DEFAULT_LOGGER_NAME
    propagate: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        dotenv_path: Optional[Union[str, Path]] = None,
    ) -> "LoggingConfig":
        """Build a config from ``environ``.

        Without ``environ`` the process environment is read after loading the
        .env file at ``dotenv_path`` (or the one ``OO_PRIMITIVES_DOTENV`` names,
        or the repository root one).
        """

        if environ is None:
            load_repo_dotenv(dotenv_path)
            environ = os.environ
        level = _parse_level(environ.get(ENV_LOG_LEVEL, "INFO"))
        name = environ.get(ENV_LOGGER) or DEFAULT_LOGGER_NAME
        propagate = environ.get(ENV_LOG_PROPAGATE, "").strip().lower() in _TRUTHY
        return cls(level=level, name=name, propagate=propagate)

    def apply(self, *extra_loggers: str) -> logging.Logger:
        return configure_logging(
            self.level,
            name=self.name,
            propagate=self.propagate,
            extra_loggers=extra_loggers or None,
        )


def _parse_level(raw: str) -> int:
    value = raw.strip()
    if value.lstrip("-").isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in {ENV_LOG_LEVEL}: {raw!r}")
    return level


__all__ = ["ENV_LOGGER", "ENV_LOG_LEVEL", "ENV_LOG_PROPAGATE", "LoggingConfig"]
