import io
from typing import BinaryIO

from bytestream_core.stream import PullResult, Stream

# ---------------------------------------------------------------------------- #
#                          Python File Object -> Stream                        #
# ---------------------------------------------------------------------------- #


class ReaderStream(Stream):
    """Stream over any binary file object providing `readinto` (files, sockets'
    `makefile`, `io.BytesIO`, `sys.stdin.buffer`, ...)."""

    __reader: BinaryIO
    __exhausted: bool

    def __init__(self, reader: BinaryIO):
        self.__reader = reader
        self.__exhausted = False

    def pull(self, buffer: bytearray | memoryview) -> PullResult:
        if self.__exhausted:
            return PullResult(0, True)
        if len(buffer) == 0:
            return PullResult(0, False)

        count = self.__reader.readinto(buffer)
        if count is None:
            # non-blocking reader without data available
            return PullResult(0, False)
        if count == 0:
            self.__exhausted = True
        return PullResult(count, self.__exhausted)


# ---------------------------------------------------------------------------- #
#                          Stream -> Python File Object                        #
# ---------------------------------------------------------------------------- #


class StreamReader(io.RawIOBase):
    """Raw binary file object reading from a `Stream`. Wrap it in
    `io.BufferedReader` for `read`/`readline` convenience."""

    def __init__(self, stream: Stream):
        super().__init__()
        self.__stream = stream
        self.__exhausted = False

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int | None:
        if self.__exhausted or len(b) == 0:
            return 0
        result = self.__stream.pull(memoryview(b).cast("B"))
        self.__exhausted = result.exhausted
        # a zero read means end of file to io consumers, None means no data yet
        if result.count == 0 and not result.exhausted:
            return None
        return result.count
