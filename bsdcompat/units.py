"""Parse numbers that carry an optional binary unit suffix."""

from __future__ import annotations

_UINT64_MAX = (1 << 64) - 1
_INT64_MIN_MAGNITUDE = 1 << 63
_C_SPACE = " \t\n\v\f\r"

_SHIFTS = {
    "e": 60,
    "p": 50,
    "t": 40,
    "g": 30,
    "m": 20,
    "k": 10,
}


def _parse_unsigned(text: str) -> tuple[int, int]:
    """Parse an unsigned integer with automatic base detection.

    Returns the value (reduced modulo 2**64 for a negated number) and
    the index of the first character not consumed.  The index is 0 when
    no digits were found.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _C_SPACE:
        pos += 1

    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    base = 10
    digits_start = pos
    if text.startswith(("0x", "0X"), pos) and pos + 2 < length and \
            text[pos + 2] in "0123456789abcdefABCDEF":
        base = 16
        digits_start = pos + 2
    elif pos < length and text[pos] == "0":
        base = 8

    valid = "0123456789abcdef"[:base]
    end = digits_start
    while end < length and text[end].lower() in valid and text[end] != "":
        end += 1

    if end == digits_start:
        return 0, 0

    value = int(text[digits_start:end], base)
    if value > _UINT64_MAX:
        raise OverflowError(f"number out of range: {text!r}")
    if negative:
        value = (-value) % (1 << 64)
    return value, end


def expand_number(text: str) -> int:
    """Convert a string such as ``"10k"`` or ``"0x20M"`` to an integer.

    The suffixes b, k, m, g, t, p and e (either case) multiply by
    1, 2**10, 2**20, 2**30, 2**40, 2**50 and 2**60.  Raises ValueError
    for a malformed string and OverflowError when the result does not
    fit in 64 unsigned bits.
    """
    number, end = _parse_unsigned(text)
    if end == 0:
        raise ValueError(f"no valid digits: {text!r}")

    unit = text[end].lower() if end < len(text) else "\0"
    if unit in ("b", "\0"):
        return number
    try:
        shift = _SHIFTS[unit]
    except KeyError:
        raise ValueError(f"unrecognized unit {text[end]!r} in {text!r}") from None

    if number >> (64 - shift):
        raise OverflowError(f"number out of range: {text!r}")
    return number << shift


def dehumanize_number(text: str) -> int:
    """Like :func:`expand_number`, but accepts a leading minus sign.

    The result must fit in a signed 64-bit integer, otherwise
    OverflowError is raised.
    """
    pos = 0
    while pos < len(text) and text[pos] in _C_SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] == "-":
        sign = -1
        pos += 1

    magnitude = expand_number(text[pos:])
    if magnitude > _INT64_MIN_MAGNITUDE or (
        magnitude == _INT64_MIN_MAGNITUDE and sign == 1
    ):
        raise OverflowError(f"number out of range: {text!r}")
    return magnitude * sign