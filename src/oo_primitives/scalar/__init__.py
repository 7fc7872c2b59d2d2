"""Scalar primitives."""

from .constant import Constant, Scalar

__all__ = ["Constant", "Scalar"]
