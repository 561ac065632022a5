import errno
import io

import pytest

from bsdcompat.streams import (
    CookieFile,
    fgetln,
    fgetwln,
    fpurge,
    fropen,
    funopen,
    fwopen,
)


def _reader(cookie, size):
    data = cookie["data"][cookie["pos"]:cookie["pos"] + size]
    cookie["pos"] += len(data)
    return data


def _writer(cookie, data):
    cookie["out"].append(data)
    return len(data)


def _seeker(cookie, offset, whence):
    if whence == io.SEEK_SET:
        cookie["pos"] = offset
    elif whence == io.SEEK_CUR:
        cookie["pos"] += offset
    else:
        cookie["pos"] = len(cookie["data"]) + offset
    return cookie["pos"]


def test_fgetln_binary_lines_then_none():
    stream = io.BytesIO(b"one\ntwo")
    assert fgetln(stream) == b"one\n"
    assert fgetln(stream) == b"two"
    assert fgetln(stream) is None


def test_fgetln_text_stream():
    stream = io.StringIO("alpha\nbeta\n")
    assert fgetln(stream) == "alpha\n"
    assert fgetln(stream) == "beta\n"
    assert fgetln(stream) is None


def test_fgetwln_reads_text_lines():
    stream = io.StringIO("héllo\nwörld")
    assert fgetwln(stream) == "héllo\n"
    assert fgetwln(stream) == "wörld"
    assert fgetwln(stream) is None


def test_fgetwln_rejects_binary_stream():
    with pytest.raises(TypeError):
        fgetwln(io.BytesIO(b"data\n"))


def test_fpurge_none_is_ebadf():
    with pytest.raises(OSError) as info:
        fpurge(None)
    assert info.value.errno == errno.EBADF


def test_fpurge_memory_stream_is_ebadf():
    with pytest.raises(OSError) as info:
        fpurge(io.BytesIO(b"abc"))
    assert info.value.errno == errno.EBADF


def test_fpurge_cookie_stream_is_ebadf():
    stream = fropen({"data": b"abc", "pos": 0}, _reader)
    with pytest.raises(OSError) as info:
        fpurge(stream)
    assert info.value.errno == errno.EBADF


def test_fpurge_discards_buffered_binary_input(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abcdef")
    with open(path, "rb") as stream:
        assert stream.read(1) == b"a"
        fpurge(stream)
        assert stream.read() == b""


def test_fpurge_discards_buffered_text_input(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("first\nsecond\n")
    with open(path, "r") as stream:
        assert stream.readline() == "first\n"
        fpurge(stream)
        assert stream.read() == ""


def test_funopen_requires_read_or_write():
    with pytest.raises(ValueError):
        funopen(object(), None, None, None, None)


def test_fropen_reads_all_data():
    cookie = {"data": b"line1\nline2\n", "pos": 0}
    stream = fropen(cookie, _reader)
    assert isinstance(stream, CookieFile)
    assert stream.read() == cookie["data"]
    assert stream.read(4) == b""


def test_fropen_read_sized_and_lines():
    cookie = {"data": b"line1\nline2\n", "pos": 0}
    stream = fropen(cookie, _reader)
    assert stream.read(3) == b"lin"
    assert stream.readline() == b"e1\n"
    assert fgetln(stream) == b"line2\n"
    assert fgetln(stream) is None


def test_fropen_is_read_only():
    stream = fropen({"data": b"", "pos": 0}, _reader)
    assert stream.readable()
    assert not stream.writable()
    assert stream.mode == "r"
    with pytest.raises(OSError) as info:
        stream.write(b"x")
    assert info.value.errno == errno.EBADF


def test_fwopen_writes_through_callback():
    cookie = {"out": []}
    stream = fwopen(cookie, _writer)
    assert stream.write(b"hello") == 5
    assert stream.write(bytearray(b" world")) == 6
    assert b"".join(cookie["out"]) == b"hello world"
    assert stream.mode == "w"


def test_fwopen_cannot_read():
    stream = fwopen({"out": []}, _writer)
    assert not stream.readable()
    with pytest.raises(OSError) as info:
        stream.read(1)
    assert info.value.errno == errno.EBADF


def test_read_write_mode():
    cookie = {"data": b"xyz", "pos": 0, "out": []}
    stream = funopen(cookie, _reader, _writer, None, None)
    assert stream.mode == "r+"
    assert stream.read(1) == b"x"
    stream.write(b"q")
    assert cookie["out"] == [b"q"]


def test_seek_without_function_is_espipe():
    stream = fropen({"data": b"abc", "pos": 0}, _reader)
    assert not stream.seekable()
    with pytest.raises(OSError) as info:
        stream.seek(0)
    assert info.value.errno == errno.ESPIPE


def test_seek_and_tell_through_callback():
    cookie = {"data": b"abcdef", "pos": 0}
    stream = funopen(cookie, _reader, None, _seeker, None)
    assert stream.seek(4) == 4
    assert stream.read(2) == b"ef"
    assert stream.tell() == 6
    assert stream.seek(-3, io.SEEK_END) == 3
    assert stream.read() == b"def"


def test_close_calls_close_function_once():
    calls = []

    def closer(cookie):
        calls.append(cookie)
        return 7

    cookie = {"data": b"", "pos": 0}
    stream = funopen(cookie, _reader, None, None, closer)
    assert stream.close() == 7
    assert stream.closed
    assert stream.close() == 0
    assert calls == [cookie]


def test_close_without_function_returns_zero():
    stream = fropen({"data": b"", "pos": 0}, _reader)
    assert stream.close() == 0
    with pytest.raises(ValueError):
        stream.read(1)


def test_context_manager_closes():
    closed = []
    with funopen({"out": []}, None, _writer, None, closed.append) as stream:
        stream.write(b"abc")
    assert stream.closed
    assert len(closed) == 1


def test_readinto_fills_buffer():
    stream = fropen({"data": b"abcd", "pos": 0}, _reader)
    buffer = bytearray(3)
    assert stream.readinto(buffer) == 3
    assert bytes(buffer) == b"abc"