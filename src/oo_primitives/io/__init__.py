"""Byte sources and the decorators layered over them."""

from .logging_input import MESSAGE_FORMAT, LoggingInputStream
from .sources import InputSource, StreamSource, input_of

__all__ = [
    "InputSource",
    "LoggingInputStream",
    "MESSAGE_FORMAT",
    "StreamSource",
    "input_of",
]
