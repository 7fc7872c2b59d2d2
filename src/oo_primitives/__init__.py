"""Small object-oriented primitives over streams, functions and mappings."""

from importlib import import_module
from typing import Any

__all__ = ("config", "func", "io", "map", "scalar", "testing", "text", "utils")
__version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    if name in __all__:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
