"""Fixed-size bit arrays stored least significant bit first in each byte."""

from __future__ import annotations

from typing import Iterator


def bitstr_size(nbits: int) -> int:
    """Return the number of bytes needed to hold ``nbits`` bits."""
    return (nbits + 7) >> 3


class BitString:
    """A fixed number of bits, all clear at creation.

    Bit ``n`` lives in byte ``n // 8`` at position ``n % 8``.
    """

    def __init__(self, nbits: int) -> None:
        if nbits < 0:
            raise ValueError("nbits must not be negative")
        self._nbits = nbits
        self._bytes = bytearray(bitstr_size(nbits))

    def _check(self, bit: int) -> None:
        if not 0 <= bit < self._nbits:
            raise IndexError(f"bit {bit} out of range for {self._nbits} bits")

    def _check_range(self, start: int, stop: int) -> None:
        self._check(start)
        self._check(stop)
        if start > stop:
            raise ValueError("start must not exceed stop")

    def _as_int(self) -> int:
        return int.from_bytes(self._bytes, "little")

    def _store(self, value: int) -> None:
        self._bytes[:] = value.to_bytes(len(self._bytes), "little")

    def test(self, bit: int) -> bool:
        """Tell whether ``bit`` is set."""
        self._check(bit)
        return bool(self._bytes[bit >> 3] & (1 << (bit & 7)))

    def set(self, bit: int) -> None:
        """Set ``bit``."""
        self._check(bit)
        self._bytes[bit >> 3] |= 1 << (bit & 7)

    def clear(self, bit: int) -> None:
        """Clear ``bit``."""
        self._check(bit)
        self._bytes[bit >> 3] &= ~(1 << (bit & 7)) & 0xFF

    @staticmethod
    def _range_mask(start: int, stop: int) -> int:
        return ((1 << (stop - start + 1)) - 1) << start

    def nset(self, start: int, stop: int) -> None:
        """Set bits ``start`` through ``stop``, both included."""
        self._check_range(start, stop)
        self._store(self._as_int() | self._range_mask(start, stop))

    def nclear(self, start: int, stop: int) -> None:
        """Clear bits ``start`` through ``stop``, both included."""
        self._check_range(start, stop)
        self._store(self._as_int() & ~self._range_mask(start, stop))

    def _first_one(self, value: int) -> int:
        if value == 0:
            return -1
        position = (value & -value).bit_length() - 1
        return position if position < self._nbits else -1

    def ffs(self) -> int:
        """Return the index of the first set bit, or -1 if none is set."""
        return self._first_one(self._as_int())

    def ffc(self) -> int:
        """Return the index of the first clear bit, or -1 if all are set."""
        full = (1 << (8 * len(self._bytes))) - 1
        return self._first_one(~self._as_int() & full)

    def __len__(self) -> int:
        return self._nbits

    def __iter__(self) -> Iterator[bool]:
        value = self._as_int()
        for bit in range(self._nbits):
            yield bool(value >> bit & 1)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitString):
            return NotImplemented
        return self._nbits == other._nbits and self._bytes == other._bytes

    def __repr__(self) -> str:
        bits = "".join("1" if b else "0" for b in self)
        return f"BitString({self._nbits}, {bits!r})"