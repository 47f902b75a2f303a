from abc import ABC, abstractmethod
from dataclasses import dataclass

# ---------------------------------------------------------------------------- #
#                               Stream Capability                              #
# ---------------------------------------------------------------------------- #


@dataclass(frozen=True)
class PullResult:
    """Outcome of a single pull: how many bytes were written into the buffer
    and whether the stream will ever produce more."""

    count: int
    exhausted: bool = False


class Stream(ABC):
    """A readable byte stream.

    `pull` fills as many bytes of `buffer` as are currently available, starting
    at offset 0, and reports the count. Exhaustion is a normal terminal signal,
    not an error. Any failure of the underlying source is raised as an exception.
    """

    @abstractmethod
    def pull(self, buffer: bytearray | memoryview) -> PullResult:
        raise NotImplementedError()


# ---------------------------------------------------------------------------- #
#                              Literal Byte Stream                             #
# ---------------------------------------------------------------------------- #


class BytesStream(Stream):
    """Finite stream over a fixed payload. Exhaustion is reported together with
    the final bytes and on every pull after that."""

    __data: bytes
    __offset: int

    def __init__(self, data: bytes):
        self.__data = bytes(data)
        self.__offset = 0

    @property
    def unread(self) -> int:
        return len(self.__data) - self.__offset

    def pull(self, buffer: bytearray | memoryview) -> PullResult:
        count = min(len(buffer), self.unread)
        buffer[:count] = self.__data[self.__offset : self.__offset + count]
        self.__offset += count
        return PullResult(count, self.unread == 0)
