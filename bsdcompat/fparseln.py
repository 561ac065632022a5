"""Read logical lines with continuation, comment and escape handling."""

from __future__ import annotations

import enum
from typing import Optional, TextIO

_DEFAULT_DELIM = "\\\\#"


class ParseFlags(enum.IntFlag):
    """Which escape sequences :func:`fparseln` removes from its result."""

    NONE = 0
    UNESCESC = 0x01
    UNESCCONT = 0x02
    UNESCCOMM = 0x04
    UNESCREST = 0x08
    UNESCALL = 0x0F


def _delimiters(delim: Optional[str]) -> tuple[str, str, str]:
    """Return (escape, continuation, comment); a disabled one is ''."""
    if delim is None:
        delim = _DEFAULT_DELIM
    if len(delim) != 3:
        raise ValueError(f"delim must have exactly 3 characters, got {delim!r}")
    esc, con, com = ("" if c == "\0" else c for c in delim)
    return esc, con, com


def _is_escaped(text: str, pos: int, esc: str) -> bool:
    """Tell whether the character at ``pos`` follows an odd run of ``esc``."""
    if not esc:
        return False
    prefix = text[:pos]
    run = len(prefix) - len(prefix.rstrip(esc))
    return run % 2 == 1


def _find_comment(text: str, com: str, esc: str) -> int:
    pos = text.find(com)
    while pos >= 0:
        if not _is_escaped(text, pos, esc):
            return pos
        pos = text.find(com, pos + 1)
    return -1


def _unescape(text: str, esc: str, con: str, com: str, flags: ParseFlags) -> str:
    out: list[str] = []
    pos = 0
    length = len(text)
    while pos < length:
        found = text.find(esc, pos)
        if found < 0:
            out.append(text[pos:])
            break
        out.append(text[pos:found])
        if found + 1 >= length:
            # A lone escape character at the very end is dropped.
            break
        following = text[found + 1]
        if following in (com, con, esc):
            skip = (
                (following == com and bool(flags & ParseFlags.UNESCCOMM))
                or (following == con and bool(flags & ParseFlags.UNESCCONT))
                or (following == esc and bool(flags & ParseFlags.UNESCESC))
            )
        else:
            skip = bool(flags & ParseFlags.UNESCREST)
        if not skip:
            out.append(esc)
        out.append(following)
        pos = found + 2
    return "".join(out)


def fparseln(
    stream: TextIO,
    delim: Optional[str] = None,
    flags: int = ParseFlags.NONE,
) -> tuple[Optional[str], int]:
    """Read one logical line from a text stream.

    ``delim`` holds three characters: the escape, the continuation and
    the comment character (default backslash, backslash, ``#``); a NUL
    character disables the corresponding feature.  Comments are cut off,
    the trailing newline is dropped and lines ending in an unescaped
    continuation character are joined with the next one.

    Returns the line (None at end of file) and the number of physical
    reads made, which counts the final attempt at end of file.
    """
    esc, con, com = _delimiters(delim)
    flags = ParseFlags(flags)

    parts: Optional[list[str]] = None
    lines = 0
    more = True
    while more:
        more = False
        lines += 1
        raw = stream.readline()
        if not raw:
            break

        size = len(raw)
        if com:
            cut = _find_comment(raw, com, esc)
            if cut >= 0:
                size = cut
                more = size == 0 and parts is None

        if size and raw[size - 1] == "\n":
            size -= 1

        if size and con and raw[size - 1] == con and not _is_escaped(raw, size - 1, esc):
            size -= 1
            more = True

        if size == 0 and (more or parts is not None):
            continue

        if parts is None:
            parts = []
        parts.append(raw[:size])

    if parts is None:
        return None, lines

    line = "".join(parts)
    if flags & ParseFlags.UNESCALL and esc and esc in line:
        line = _unescape(line, esc, con, com, flags)
    return line, lines