"""Pytest fixtures and path configuration for the oo-primitives tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def read_logger(caplog: pytest.LogCaptureFixture) -> logging.Logger:
    """Logger whose INFO records land in ``caplog``."""

    logger = logging.getLogger("oo_primitives_tests.reads")
    logger.setLevel(logging.INFO)
    caplog.set_level(logging.INFO, logger=logger.name)
    return logger
