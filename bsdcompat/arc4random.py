"""A ChaCha20 based random number generator with periodic reseeding."""

from __future__ import annotations

import os
import sys
import threading
from typing import Callable, Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

_KEYSZ = 32
_IVSZ = 8
_SEEDSZ = _KEYSZ + _IVSZ
_BLOCKSZ = 64
_RSBUFSZ = 16 * _BLOCKSZ
_RESEED_BYTES = 1600000
_U32SZ = 4

EntropySource = Callable[[int], bytes]


def _keystream(key: bytes, iv: bytes) -> bytes:
    # A 64-bit zero block counter followed by the 64-bit IV.
    nonce = bytes(8) + iv
    cipher = Cipher(algorithms.ChaCha20(key, nonce), mode=None)
    return cipher.encryptor().update(bytes(_RSBUFSZ))


class Arc4Random:
    """Random generator drawing from a ChaCha20 keystream.

    It seeds itself from ``entropy`` (a callable returning ``n`` random
    bytes, :func:`os.urandom` by default), rekeys after every keystream
    buffer for backtracking resistance and reseeds after about 1.6 MB
    of output or in a forked child.
    """

    def __init__(self, entropy: EntropySource = os.urandom) -> None:
        self._entropy = entropy
        self._lock = threading.Lock()
        self._key: Optional[bytes] = None
        self._iv = b""
        self._buf = bytearray(_RSBUFSZ)
        self._have = 0
        self._count = 0
        self._pid = os.getpid()

    def _fork_detect(self) -> None:
        pid = os.getpid()
        if pid != self._pid:
            self._pid = pid
            self._key = None
            self._have = 0
            self._count = 0
            self._buf[:] = bytes(_RSBUFSZ)

    def _init(self, seed: bytes) -> None:
        self._key = bytes(seed[:_KEYSZ])
        self._iv = bytes(seed[_KEYSZ:_SEEDSZ])

    def _rekey(self, data: Optional[bytes] = None) -> None:
        assert self._key is not None
        self._buf[:] = _keystream(self._key, self._iv)
        if data:
            for i, byte in enumerate(data[:_SEEDSZ]):
                self._buf[i] ^= byte
        self._init(self._buf[:_SEEDSZ])
        self._buf[:_SEEDSZ] = bytes(_SEEDSZ)
        self._have = _RSBUFSZ - _SEEDSZ

    def _stir(self) -> None:
        seed = bytes(self._entropy(_SEEDSZ))
        if len(seed) != _SEEDSZ:
            raise ValueError(
                f"entropy source returned {len(seed)} bytes, expected {_SEEDSZ}"
            )
        if self._key is None:
            self._init(seed)
        else:
            self._rekey(seed)
        self._have = 0
        self._buf[:] = bytes(_RSBUFSZ)
        self._count = _RESEED_BYTES

    def _stir_if_needed(self, length: int) -> None:
        self._fork_detect()
        if self._key is None or self._count <= length:
            self._stir()
        if self._count <= length:
            self._count = 0
        else:
            self._count -= length

    def _take(self, length: int) -> bytes:
        start = _RSBUFSZ - self._have
        chunk = bytes(self._buf[start:start + length])
        self._buf[start:start + length] = bytes(length)
        self._have -= length
        return chunk

    def stir(self) -> None:
        """Reseed the generator from the entropy source."""
        with self._lock:
            self._stir()

    def addrandom(self, data: bytes) -> None:
        """Mix up to 40 bytes of caller data into the key."""
        data = bytes(data)
        with self._lock:
            self._stir_if_needed(len(data))
            self._rekey(data)

    def random_u32(self) -> int:
        """Return a random integer in [0, 2**32)."""
        with self._lock:
            self._stir_if_needed(_U32SZ)
            if self._have < _U32SZ:
                self._rekey()
            return int.from_bytes(self._take(_U32SZ), sys.byteorder)

    def random_bytes(self, n: int) -> bytes:
        """Return ``n`` random bytes."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        with self._lock:
            self._stir_if_needed(n)
            out = bytearray()
            remaining = n
            while remaining > 0:
                if self._have > 0:
                    chunk = self._take(min(remaining, self._have))
                    out += chunk
                    remaining -= len(chunk)
                if self._have == 0:
                    self._rekey()
            return bytes(out)

    def uniform(self, upper_bound: int) -> int:
        """Return a uniformly distributed integer in [0, upper_bound).

        Values of ``upper_bound`` below 2 give 0.
        """
        if not 0 <= upper_bound < 1 << 32:
            raise ValueError("upper_bound must be in [0, 2**32)")
        if upper_bound < 2:
            return 0
        # 2**32 % x == (2**32 - x) % x
        minimum = ((1 << 32) - upper_bound) % upper_bound
        while True:
            r = self.random_u32()
            if r >= minimum:
                return r % upper_bound


_default = Arc4Random()


def arc4random() -> int:
    """Return a random integer in [0, 2**32) from the shared generator."""
    return _default.random_u32()


def arc4random_buf(n: int) -> bytes:
    """Return ``n`` random bytes from the shared generator."""
    return _default.random_bytes(n)


def arc4random_uniform(upper_bound: int) -> int:
    """Return a uniform integer below ``upper_bound`` from the shared generator."""
    return _default.uniform(upper_bound)


def arc4random_stir() -> None:
    """Reseed the shared generator."""
    _default.stir()


def arc4random_addrandom(data: bytes) -> None:
    """Mix caller data into the shared generator."""
    _default.addrandom(data)