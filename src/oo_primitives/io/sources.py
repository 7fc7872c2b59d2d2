"""Byte-source capability and adapters over Python binary streams."""

from __future__ import annotations

import errno
import io
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Union, runtime_checkable

SKIP_CHUNK = 8192


@runtime_checkable
class InputSource(Protocol):
    """Operations a byte source must offer to be wrapped by the decorators.

    ``read_into`` returns ``-1`` once the source is exhausted, mirroring the
    end-of-stream signal the decorators normalise for reporting.
    """

    def read_into(self, buffer: bytearray, offset: int, length: int) -> int: ...

    def skip(self, count: int) -> int: ...

    def available(self) -> int: ...

    def close(self) -> None: ...

    def mark(self, limit: int) -> None: ...

    def reset(self) -> None: ...

    def mark_supported(self) -> bool: ...


class StreamSource:
    """``InputSource`` over a binary file object such as ``io.BytesIO``."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._mark: Optional[int] = None

    def read_into(self, buffer: bytearray, offset: int, length: int) -> int:
        _check_range(buffer, offset, length)
        if length == 0:
            return 0
        with memoryview(buffer)[offset : offset + length] as window:
            count = self._stream.readinto(window)
        if count is None:
            # Non-blocking stream with nothing ready; not the end of the data.
            raise BlockingIOError(errno.EAGAIN, "No data ready on non-blocking stream")
        if count == 0:
            return -1
        return count

    def skip(self, count: int) -> int:
        if count <= 0:
            return 0
        if self._stream.seekable():
            remaining = self.available()
            step = min(count, remaining)
            self._stream.seek(step, io.SEEK_CUR)
            return step
        skipped = 0
        while skipped < count:
            chunk = self._stream.read(min(SKIP_CHUNK, count - skipped))
            if not chunk:
                break
            skipped += len(chunk)
        return skipped

    def available(self) -> int:
        if not self._stream.seekable():
            return 0
        position = self._stream.tell()
        end = self._stream.seek(0, io.SEEK_END)
        self._stream.seek(position, io.SEEK_SET)
        return max(end - position, 0)

    def close(self) -> None:
        self._stream.close()

    def mark(self, limit: int) -> None:
        # The whole stream stays addressable, so ``limit`` never invalidates the mark.
        if self._stream.seekable():
            self._mark = self._stream.tell()

    def reset(self) -> None:
        if not self._stream.seekable():
            raise OSError("mark/reset not supported")
        if self._mark is None:
            raise OSError("Resetting to invalid mark")
        self._stream.seek(self._mark, io.SEEK_SET)

    def mark_supported(self) -> bool:
        return self._stream.seekable()

    def __enter__(self) -> "StreamSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def input_of(
    origin: Union[bytes, bytearray, str, Path, BinaryIO],
    *,
    encoding: str = "utf-8",
) -> StreamSource:
    """Build a ``StreamSource`` from bytes, text, a path or an open binary stream."""

    if isinstance(origin, (bytes, bytearray)):
        return StreamSource(io.BytesIO(bytes(origin)))
    if isinstance(origin, str):
        return StreamSource(io.BytesIO(origin.encode(encoding)))
    if isinstance(origin, Path):
        return StreamSource(origin.open("rb"))
    if isinstance(origin, io.TextIOBase):
        raise TypeError(f"Expected a binary stream, got text stream {type(origin).__name__}")
    if callable(getattr(origin, "readinto", None)):
        return StreamSource(origin)
    raise TypeError(f"Cannot build an input from {type(origin).__name__}")


def _check_range(buffer: bytearray, offset: int, length: int) -> None:
    if offset < 0 or length < 0 or offset + length > len(buffer):
        raise IndexError(
            f"Range [{offset}, {offset + length}) outside buffer of size {len(buffer)}"
        )


__all__ = ["InputSource", "StreamSource", "input_of"]
