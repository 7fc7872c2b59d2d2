"""Scalar protocol and the constant scalar."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Scalar(Protocol[T_co]):
    """A deferred value."""

    def value(self) -> T_co:
        """Return the value."""


class Constant(Generic[T]):
    """Scalar that always hands back the same object."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def value(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"


__all__ = ["Constant", "Scalar"]
