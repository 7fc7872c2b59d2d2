"""Immutable key/value pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class MapEntry(Generic[K, V]):
    key: K
    value: V

    def __iter__(self) -> Iterator[object]:
        yield self.key
        yield self.value


__all__ = ["MapEntry"]
