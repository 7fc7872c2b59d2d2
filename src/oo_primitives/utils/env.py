"""Locate and load the .env file that feeds the primitives' settings."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

ENV_DOTENV = "OO_PRIMITIVES_DOTENV"

_REPO_ROOT = Path(__file__).resolve().parents[3]

LOGGER = logging.getLogger("oo primitives.env")


def resolve_dotenv_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the .env path named by ``OO_PRIMITIVES_DOTENV``, else the repository one."""

    environ = os.environ if environ is None else environ
    override = environ.get(ENV_DOTENV)
    if override:
        return Path(override).expanduser()
    return _REPO_ROOT / ".env"


def load_repo_dotenv(path: Optional[Union[str, Path]] = None) -> bool:
    """Load ``path`` (or the resolved default) into ``os.environ`` once.

    Values already present in the environment win over the file. Returns
    whether a file was found.
    """

    env_path = Path(path) if path is not None else resolve_dotenv_path()
    return _load_once(env_path.resolve())


@lru_cache(maxsize=None)
def _load_once(env_path: Path) -> bool:
    if not env_path.is_file():
        LOGGER.debug("No .env file at %s", env_path)
        return False
    load_dotenv(env_path, override=False)
    LOGGER.debug("Loaded settings from %s", env_path)
    return True


__all__ = ["ENV_DOTENV", "load_repo_dotenv", "resolve_dotenv_path"]
