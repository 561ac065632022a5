"""Line reading, buffer purging and callback-backed streams."""

from __future__ import annotations

import errno
import io
import os
from typing import Any, Callable, Optional

ReadFn = Callable[[Any, int], bytes]
WriteFn = Callable[[Any, bytes], int]
SeekFn = Callable[[Any, int, int], int]
CloseFn = Callable[[Any], Any]


def _os_error(code: int, detail: str) -> OSError:
    return OSError(code, f"{os.strerror(code)}: {detail}")


class CookieFile(io.RawIOBase):
    """A binary stream whose I/O is delegated to user callbacks.

    Each callback receives the opaque ``cookie`` as its first argument.
    ``readfn(cookie, size)`` returns up to ``size`` bytes (empty at end
    of data), ``writefn(cookie, data)`` returns the number of bytes it
    took, ``seekfn(cookie, offset, whence)`` returns the new offset and
    ``closefn(cookie)`` releases the cookie.
    """

    def __init__(
        self,
        cookie: Any,
        readfn: Optional[ReadFn],
        writefn: Optional[WriteFn],
        seekfn: Optional[SeekFn],
        closefn: Optional[CloseFn],
    ) -> None:
        super().__init__()
        self._cookie = cookie
        self._readfn = readfn
        self._writefn = writefn
        self._seekfn = seekfn
        self._closefn = closefn

    @property
    def mode(self) -> str:
        if self._readfn is not None:
            return "r+" if self._writefn is not None else "r"
        return "w"

    def readable(self) -> bool:
        return self._readfn is not None

    def writable(self) -> bool:
        return self._writefn is not None

    def seekable(self) -> bool:
        return self._seekfn is not None

    def _ensure_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def read(self, size: Optional[int] = -1) -> bytes:
        """Read up to ``size`` bytes; a negative size reads to the end."""
        self._ensure_open()
        if self._readfn is None:
            raise _os_error(errno.EBADF, "stream not opened for reading")
        if size is None or size < 0:
            chunks = []
            while True:
                chunk = self._readfn(self._cookie, io.DEFAULT_BUFFER_SIZE)
                if not chunk:
                    break
                chunks.append(bytes(chunk))
            return b"".join(chunks)
        if size == 0:
            return b""
        data = self._readfn(self._cookie, size)
        return bytes(data) if data else b""

    def readinto(self, buffer) -> int:
        data = self.read(len(buffer))
        if len(data) > len(buffer):
            raise ValueError("read callback returned more data than requested")
        buffer[: len(data)] = data
        return len(data)

    def write(self, data) -> int:
        """Hand ``data`` to the write callback; return the count it took."""
        self._ensure_open()
        if self._writefn is None:
            raise _os_error(errno.EBADF, "stream not opened for writing")
        written = self._writefn(self._cookie, bytes(data))
        if written is None:
            return len(data)
        if written < 0:
            raise _os_error(errno.EIO, "write callback failed")
        return written

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Reposition through the seek callback and return the new offset."""
        self._ensure_open()
        if self._seekfn is None:
            raise _os_error(errno.ESPIPE, "stream is not seekable")
        position = self._seekfn(self._cookie, offset, whence)
        if position < 0:
            raise _os_error(errno.EINVAL, "seek callback failed")
        return position

    def close(self) -> Any:
        """Close the stream, calling the close callback once.

        Returns what the close callback returned, or 0 without one.
        """
        if self.closed:
            return 0
        result: Any = 0
        try:
            if self._closefn is not None:
                result = self._closefn(self._cookie)
        finally:
            super().close()
        return result


def funopen(
    cookie: Any,
    readfn: Optional[ReadFn],
    writefn: Optional[WriteFn],
    seekfn: Optional[SeekFn],
    closefn: Optional[CloseFn],
) -> CookieFile:
    """Open a stream backed by callbacks; at least one of read or write."""
    if readfn is None and writefn is None:
        raise ValueError("funopen needs a read or a write function")
    return CookieFile(cookie, readfn, writefn, seekfn, closefn)


def fropen(cookie: Any, readfn: ReadFn) -> CookieFile:
    """Open a read-only callback stream."""
    return funopen(cookie, readfn, None, None, None)


def fwopen(cookie: Any, writefn: WriteFn) -> CookieFile:
    """Open a write-only callback stream."""
    return funopen(cookie, None, writefn, None, None)


def fgetln(stream):
    """Return the next line of ``stream`` with its newline, or None at end."""
    line = stream.readline()
    return line if line else None


def fgetwln(stream) -> Optional[str]:
    """Return the next line of a text stream with its newline, or None."""
    line = stream.readline()
    if isinstance(line, (bytes, bytearray)):
        raise TypeError("fgetwln needs a text stream")
    return line if line else None


def fpurge(stream) -> None:
    """Discard the unread input buffered by ``stream``.

    After purging, reading resumes at the position of the underlying
    file.  Streams without a file descriptor raise OSError(EBADF).
    Pending output of buffered writers is flushed rather than dropped,
    as Python offers no way to withdraw it.
    """
    if stream is None:
        raise _os_error(errno.EBADF, "no stream")
    try:
        fd = stream.fileno()
    except (OSError, ValueError):
        raise _os_error(errno.EBADF, "stream has no file descriptor") from None
    if fd < 0:
        raise _os_error(errno.EBADF, "stream has no file descriptor")

    buffer = getattr(stream, "buffer", None)
    raw = getattr(buffer if buffer is not None else stream, "raw", None)
    if raw is None:
        return
    if stream.readable() and stream.seekable():
        stream.seek(raw.tell())