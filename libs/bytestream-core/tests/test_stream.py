import pytest

from bytestream_core.stream import BytesStream, PullResult, Stream


def test_stream_is_abstract():
    with pytest.raises(TypeError):
        Stream()


def test_bytes_stream_reports_exhaustion_with_last_bytes():
    stream = BytesStream(b"hello")
    buffer = bytearray(3)
    assert stream.pull(buffer) == PullResult(3, False)
    assert bytes(buffer) == b"hel"
    assert stream.pull(buffer) == PullResult(2, True)
    assert buffer[:2] == b"lo"
    assert stream.pull(buffer) == PullResult(0, True)


def test_bytes_stream_empty_buffer_is_not_exhaustion():
    stream = BytesStream(b"x")
    assert stream.pull(bytearray()) == PullResult(0, False)
    assert stream.unread == 1


def test_empty_bytes_stream():
    assert BytesStream(b"").pull(bytearray(4)) == PullResult(0, True)
