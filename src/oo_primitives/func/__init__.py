"""Function primitives."""

from .func_of import Func, FuncOf, Proc

__all__ = ["Func", "FuncOf", "Proc"]
