import logging
from typing import BinaryIO

from bytestream_core.limit import limit
from bytestream_core.settings import DEFAULT_CHUNK_SIZE
from bytestream_core.stream import Stream

logger = logging.getLogger("bytestream")


class ShortStreamError(EOFError):
    """The source stream exhausted before the requested amount was delivered."""

    expected: int
    received: int

    def __init__(self, expected: int, received: int):
        super().__init__(f"stream exhausted after {received} of {expected} bytes")
        self.expected = expected
        self.received = received


def copy(dst: BinaryIO, src: Stream, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Pull from `src` until it is exhausted and write everything to `dst`.
    Returns the number of bytes written. Never returns for an infinite `src`.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk size must be positive, got {chunk_size}")

    buffer = bytearray(chunk_size)
    view = memoryview(buffer)
    written = 0
    while True:
        result = src.pull(view)
        if result.count > 0:
            dst.write(view[: result.count])
            written += result.count
        if result.exhausted:
            break

    logger.debug(f"copied {written} bytes")
    return written


def copy_n(dst: BinaryIO, src: Stream, n: int, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Copy exactly `n` bytes. What was available is written before a short
    source raises `ShortStreamError`."""
    written = copy(dst, limit(src, n), min(chunk_size, max(n, 1)))
    if written < n:
        raise ShortStreamError(n, written)
    return written


def read_full(src: Stream, n: int) -> bytes:
    """Read exactly `n` bytes from `src`."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")

    buffer = bytearray(n)
    view = memoryview(buffer)
    filled = 0
    while filled < n:
        result = src.pull(view[filled:])
        filled += result.count
        if result.exhausted and filled < n:
            raise ShortStreamError(n, filled)
    return bytes(buffer)
