"""Input decorator that logs the duration and size of every bulk read."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from ..text import FormattedText
from .sources import InputSource

MESSAGE_FORMAT = "Read %d byte(s) from %s in %dms."

_NANOS_PER_MILLI = 1_000_000


class LoggingInputStream:
    """Forward every operation to ``origin``, logging each ranged read.

    Only ``read_into`` (and ``read_byte``, which goes through it) is
    instrumented; ``skip``, ``available``, ``close``, ``mark``, ``reset`` and
    ``mark_supported`` are passed straight through. Exceptions raised by the
    origin propagate unchanged.

    The logger is borrowed, never closed. There is no thread-safety guarantee.

    Parameters
    ----------
    origin:
        The byte source to wrap. Any ``InputSource``, including another
        ``LoggingInputStream``.
    source:
        Label naming where the data comes from, used in the log message.
    logger:
        Destination for the read records. Defaults to ``logging.getLogger(source)``.
    clock:
        Nanosecond timestamp function; ``time.monotonic_ns`` unless a test
        supplies its own.
    """

    def __init__(
        self,
        origin: InputSource,
        source: str,
        logger: Optional[logging.Logger] = None,
        *,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self._origin = origin
        self._source = source
        self._logger = logger if logger is not None else logging.getLogger(source)
        self._clock = clock

    @property
    def source(self) -> str:
        return self._source

    def read_byte(self) -> int:
        # At end of stream nothing is written to ``buf`` and its initial 0 is returned.
        buf = bytearray(1)
        self.read_into(buf)
        return buf[0]

    def read_into(self, buffer: bytearray, offset: int = 0, length: Optional[int] = None) -> int:
        if length is None:
            length = len(buffer) - offset
        start = self._clock()
        count = self._origin.read_into(buffer, offset, length)
        end = self._clock()
        if count == -1:
            count = 0
        self._logger.info(
            FormattedText(
                MESSAGE_FORMAT,
                count,
                self._source,
                (end - start) // _NANOS_PER_MILLI,
            ).as_string()
        )
        return count

    def skip(self, count: int) -> int:
        return self._origin.skip(count)

    def available(self) -> int:
        return self._origin.available()

    def close(self) -> None:
        self._origin.close()

    def mark(self, limit: int) -> None:
        self._origin.mark(limit)

    def reset(self) -> None:
        self._origin.reset()

    def mark_supported(self) -> bool:
        return self._origin.mark_supported()

    def __enter__(self) -> "LoggingInputStream":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"LoggingInputStream({self._origin!r}, {self._source!r})"


__all__ = ["LoggingInputStream", "MESSAGE_FORMAT"]
