"""Check that a printf-style format is compatible with a template."""

from __future__ import annotations

import enum
from typing import Optional


class FormatType(enum.Enum):
    """Argument kinds that a printf conversion consumes."""

    START = enum.auto()
    SHORT = enum.auto()
    INT = enum.auto()
    LONG = enum.auto()
    QUAD = enum.auto()
    PTRDIFFT = enum.auto()
    SIZET = enum.auto()
    SHORTPOINTER = enum.auto()
    INTPOINTER = enum.auto()
    LONGPOINTER = enum.auto()
    QUADPOINTER = enum.auto()
    PTRDIFFTPOINTER = enum.auto()
    SIZETPOINTER = enum.auto()
    DOUBLE = enum.auto()
    LONGDOUBLE = enum.auto()
    STRING = enum.auto()
    WIDTH = enum.auto()
    PRECISION = enum.auto()
    DONE = enum.auto()
    UNKNOWN = enum.auto()


_DIGITS = "0123456789"
_FLAGS = "#'0- +"


def _at(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _from_precision(text: str, pos: int) -> tuple[FormatType, int]:
    sh = lg = quad = longdouble = ptrdifft = sizet = False
    c = _at(text, pos)
    if c == "h":
        pos += 1
        sh = True
    elif c == "l":
        pos += 1
        if not _at(text, pos):
            return FormatType.UNKNOWN, pos
        if _at(text, pos) == "l":
            pos += 1
            quad = True
        else:
            lg = True
    elif c == "q":
        pos += 1
        quad = True
    elif c == "t":
        pos += 1
        ptrdifft = True
    elif c == "z":
        pos += 1
        sizet = True
    elif c == "L":
        pos += 1
        longdouble = True

    c = _at(text, pos)
    if not c:
        return FormatType.UNKNOWN, pos
    any_modifier = sh or lg or quad or longdouble or ptrdifft or sizet

    if c in "diouxX":
        if longdouble:
            return FormatType.UNKNOWN, pos
        if lg:
            return FormatType.LONG, pos
        if quad:
            return FormatType.QUAD, pos
        if ptrdifft:
            return FormatType.PTRDIFFT, pos
        if sizet:
            return FormatType.SIZET, pos
        return FormatType.INT, pos
    if c == "n":
        if longdouble:
            return FormatType.UNKNOWN, pos
        if sh:
            return FormatType.SHORTPOINTER, pos
        if lg:
            return FormatType.LONGPOINTER, pos
        if quad:
            return FormatType.QUADPOINTER, pos
        if ptrdifft:
            return FormatType.PTRDIFFTPOINTER, pos
        if sizet:
            return FormatType.SIZETPOINTER, pos
        return FormatType.INTPOINTER, pos
    if c in "DOU":
        if any_modifier:
            return FormatType.UNKNOWN, pos
        return FormatType.LONG, pos
    if c in "aAeEfFgG":
        if longdouble:
            return FormatType.LONGDOUBLE, pos
        if sh or lg or quad or ptrdifft or sizet:
            return FormatType.UNKNOWN, pos
        return FormatType.DOUBLE, pos
    if c == "c":
        if any_modifier:
            return FormatType.UNKNOWN, pos
        return FormatType.INT, pos
    if c == "s":
        if any_modifier:
            return FormatType.UNKNOWN, pos
        return FormatType.STRING, pos
    if c == "p":
        if any_modifier:
            return FormatType.UNKNOWN, pos
        return FormatType.LONG, pos
    return FormatType.UNKNOWN, pos


def _from_width(text: str, pos: int) -> tuple[FormatType, int]:
    if _at(text, pos) == ".":
        pos += 1
        if _at(text, pos) == "*":
            return FormatType.PRECISION, pos
        while _at(text, pos) and _at(text, pos) in _DIGITS:
            pos += 1
        if not _at(text, pos):
            return FormatType.UNKNOWN, pos
    return _from_precision(text, pos)


def _next_format(text: str, pos: int, previous: FormatType) -> tuple[FormatType, int]:
    if previous is FormatType.WIDTH:
        return _from_width(text, pos + 1)
    if previous is FormatType.PRECISION:
        return _from_precision(text, pos + 1)

    while True:
        found = text.find("%", pos)
        if found < 0:
            return FormatType.DONE, len(text)
        pos = found + 1
        c = _at(text, pos)
        if not c:
            return FormatType.UNKNOWN, pos
        if c != "%":
            break
        pos += 1

    while _at(text, pos) and _at(text, pos) in _FLAGS:
        pos += 1
    if _at(text, pos) == "*":
        return FormatType.WIDTH, pos
    while _at(text, pos) and _at(text, pos) in _DIGITS:
        pos += 1
    if not _at(text, pos):
        return FormatType.UNKNOWN, pos
    return _from_width(text, pos)


def fmtcheck(f1: Optional[str], f2: str) -> str:
    """Return ``f1`` if its conversions match those of ``f2``, else ``f2``.

    ``f1`` may hold fewer conversions than ``f2``; any unknown or
    mismatching conversion makes the template ``f2`` the result.
    """
    if f1 is None:
        return f2
    s1 = f1.split("\0", 1)[0]
    s2 = f2.split("\0", 1)[0]
    p1 = p2 = 0
    t1 = t2 = FormatType.START
    while True:
        t1, p1 = _next_format(s1, p1, t1)
        if t1 is FormatType.DONE:
            return f1
        if t1 is FormatType.UNKNOWN:
            return f2
        t2, p2 = _next_format(s2, p2, t2)
        if t1 is not t2:
            return f2