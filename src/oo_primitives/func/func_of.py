"""Function objects built from callables, procedures, values and scalars."""

from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, TypeVar, Union

from ..scalar import Constant, Scalar

X = TypeVar("X")
Y = TypeVar("Y")
X_contra = TypeVar("X_contra", contravariant=True)
Y_co = TypeVar("Y_co", covariant=True)


class Func(Protocol[X_contra, Y_co]):
    """Function of one argument."""

    def apply(self, input: X_contra) -> Y_co:
        """Compute the result for ``input``."""


class Proc(Protocol[X_contra]):
    """Procedure of one argument, run for its side effects."""

    def exec(self, input: X_contra) -> None:
        """Run the procedure on ``input``."""


ProcLike = Union[Proc[X], Callable[[X], Any]]


class FuncOf(Generic[X, Y]):
    """Object wrapper around a one-argument callable.

    The constructor takes the callable itself; the ``from_*`` classmethods
    cover the other shapes a function can be made of:

    >>> FuncOf(len).apply("abc")
    3
    >>> FuncOf.from_value(True).apply("ignored")
    True
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[X], Y]) -> None:
        if not callable(func):
            raise TypeError(f"FuncOf expects a callable, got {type(func).__name__}")
        self._func = func

    @classmethod
    def from_proc(cls, proc: ProcLike[X], result: Y) -> "FuncOf[X, Y]":
        """Run ``proc`` on the input, then return ``result``."""

        runner = _as_callable(proc)

        def _apply(input: X) -> Y:
            runner(input)
            return result

        return cls(_apply)

    @classmethod
    def from_value(cls, value: Y) -> "FuncOf[Any, Y]":
        """Ignore the input and return ``value``."""

        return cls.from_scalar(Constant(value))

    @classmethod
    def from_scalar(cls, scalar: Scalar[Y]) -> "FuncOf[Any, Y]":
        """Ignore the input and return ``scalar.value()``, evaluated per call."""

        return cls(lambda _input: scalar.value())

    def apply(self, input: X) -> Y:
        return self._func(input)

    def __call__(self, input: X) -> Y:
        return self.apply(input)


def _as_callable(proc: ProcLike[X]) -> Callable[[X], Any]:
    exec_method = getattr(proc, "exec", None)
    if callable(exec_method):
        return exec_method
    if callable(proc):
        return proc
    raise TypeError(f"Expected a callable or an object with exec(), got {type(proc).__name__}")


__all__ = ["Func", "FuncOf", "Proc"]
