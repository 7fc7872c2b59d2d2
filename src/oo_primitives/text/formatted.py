"""Lazily formatted text."""

from __future__ import annotations

from typing import Any, Protocol, Tuple


class Text(Protocol):
    """Anything that can render itself as a string."""

    def as_string(self) -> str:
        """Return the rendered text."""


class FormattedText:
    """Printf-style pattern plus arguments, formatted on demand."""

    __slots__ = ("_pattern", "_args")

    def __init__(self, pattern: str, *args: Any) -> None:
        self._pattern = pattern
        self._args: Tuple[Any, ...] = args

    def as_string(self) -> str:
        return self._pattern % self._args

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"FormattedText({self._pattern!r}, {', '.join(map(repr, self._args))})"


__all__ = ["FormattedText", "Text"]
