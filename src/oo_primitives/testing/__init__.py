"""Assertion helpers for verifying custom containers."""

from .behaves_as_map import (
    MISSING_KEY,
    MISSING_PAIR,
    MISSING_VALUE,
    BehavesAsMap,
    SupportsMapContract,
    assert_behaves_as_map,
)

__all__ = [
    "BehavesAsMap",
    "MISSING_KEY",
    "MISSING_PAIR",
    "MISSING_VALUE",
    "SupportsMapContract",
    "assert_behaves_as_map",
]
