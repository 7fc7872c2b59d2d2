"""Immutable mappings and read-only views over mutable ones."""

from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .entry import MapEntry

K = TypeVar("K")
V = TypeVar("V")

EntrySource = Union[Mapping[K, V], Iterable[Union[MapEntry[K, V], Tuple[K, V]]]]


class MapOf(Mapping[K, V]):
    """Mapping built once from entries and never mutated afterwards.

    Sources are applied left to right, then keyword arguments; later values
    win for equal keys. The input is copied, so mutating it later does not
    change the map.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, *sources: EntrySource[K, V], **kwargs: V) -> None:
        data: Dict[K, V] = {}
        for source in sources:
            data.update(_pairs(source))
        data.update(kwargs)  # type: ignore[arg-type]
        self._data = data
        self._hash: Optional[int] = None

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def entries(self) -> Tuple[MapEntry[K, V], ...]:
        return tuple(MapEntry(key, value) for key, value in self._data.items())

    def with_entry(self, key: K, value: V) -> "MapOf[K, V]":
        """Return a new map that also holds ``key -> value``."""

        return MapOf(self._data, [(key, value)])

    def without(self, key: K) -> "MapOf[K, V]":
        """Return a new map with ``key`` removed (missing keys are ignored)."""

        return MapOf((k, v) for k, v in self._data.items() if k != key)

    def __repr__(self) -> str:
        return f"MapOf({self._data!r})"


class MapView(Mapping[K, V]):
    """Read-only window onto a live mapping; reflects its later changes."""

    __slots__ = ("_obj",)

    def __init__(self, obj: Mapping[K, V]) -> None:
        self._obj = obj

    def __getitem__(self, key: K) -> V:
        return self._obj[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._obj)

    def __len__(self) -> int:
        return len(self._obj)

    def __contains__(self, key: object) -> bool:
        return key in self._obj

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._obj!r})"


def _pairs(source: EntrySource[K, V]) -> Iterable[Tuple[K, V]]:
    if isinstance(source, Mapping):
        return source.items()
    return (_pair(item) for item in source)


def _pair(item: Any) -> Tuple[Any, Any]:
    if isinstance(item, MapEntry):
        return item.key, item.value
    try:
        key, value = item
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Map entries must be key/value pairs, got {item!r}") from exc
    return key, value


__all__ = ["MapOf", "MapView"]
