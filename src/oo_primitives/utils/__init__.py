"""Utility helpers for logging and environment loading."""

from .env import ENV_DOTENV, load_repo_dotenv, resolve_dotenv_path
from .logging import configure_logging

__all__ = [
    "ENV_DOTENV",
    "configure_logging",
    "load_repo_dotenv",
    "resolve_dotenv_path",
]
