import logging

from bytestream_core.stream import PullResult, Stream

logger = logging.getLogger("bytestream")


class _LimitedStream(Stream):
    __inner: Stream
    __remaining: int

    def __init__(self, inner: Stream, n: int):
        self.__inner = inner
        self.__remaining = n

    @property
    def inner(self) -> Stream:
        return self.__inner

    @property
    def remaining(self) -> int:
        return self.__remaining

    def pull(self, buffer: bytearray | memoryview) -> PullResult:
        if self.__remaining == 0:
            return PullResult(0, True)

        want = min(len(buffer), self.__remaining)
        result = self.__inner.pull(memoryview(buffer)[:want])
        assert 0 <= result.count <= want, f"inner stream produced {result.count} of {want} bytes"

        self.__remaining -= result.count
        if self.__remaining == 0:
            logger.debug("byte budget used up")
        elif result.exhausted:
            logger.debug(f"inner stream exhausted with {self.__remaining} bytes left in budget")

        return PullResult(result.count, self.__remaining == 0 or result.exhausted)


def limit(inner: Stream, n: int) -> Stream:
    """Wrap `inner` so that at most `n` bytes can be pulled through it in total."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte budget must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte budget must not be negative, got {n}")
    return _LimitedStream(inner, n)
