"""Determine the display block size from the BLOCKSIZE variable."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import Optional

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024
_MAXB = _GB
_C_SPACE = " \t\n\v\f\r"


def _warnx(message: str) -> None:
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "python"
    sys.stdout.flush()
    sys.stderr.write(f"{name}: {message}\n")


def _strtol(text: str) -> tuple[int, int]:
    """Parse a decimal integer; return the value and the end index."""
    pos = 0
    while pos < len(text) and text[pos] in _C_SPACE:
        pos += 1
    start = pos
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    digits = pos
    while pos < len(text) and text[pos] in "0123456789":
        pos += 1
    if pos == digits:
        return 0, 0
    return int(text[start:pos]), pos


def getbsize(environ: Optional[Mapping[str, str]] = None) -> tuple[str, int]:
    """Return the column header and block size chosen by BLOCKSIZE.

    ``environ`` defaults to the process environment.  Unusable values
    produce a warning on standard error and fall back to sane limits.
    """
    if environ is None:
        environ = os.environ
    value = environ.get("BLOCKSIZE")

    if not value:
        return "512-blocks", 512

    form = ""
    n, end = _strtol(value)
    if n < 0:
        _warnx("minimum blocksize is 512")
        return "512-blocks", 512
    if n == 0:
        n = 1

    unit = value[end] if end < len(value) else ""
    if unit and end + 1 < len(value):
        unit = "?"

    if unit in ("G", "g"):
        form, maximum, mul = "G", _MAXB // _GB, _GB
    elif unit in ("K", "k"):
        form, maximum, mul = "K", _MAXB // _KB, _KB
    elif unit in ("M", "m"):
        form, maximum, mul = "M", _MAXB // _MB, _MB
    elif unit == "":
        maximum, mul = _MAXB, 1
    else:
        _warnx(f"{value}: unknown blocksize")
        n, maximum, mul = 512, _MAXB, 1

    if n > maximum:
        _warnx(f"maximum blocksize is {_MAXB // _GB}G")
        n = maximum

    blocksize = n * mul
    if blocksize < 512:
        _warnx("minimum blocksize is 512")
        form = ""
        blocksize = n = 512

    return f"{n}{form}-blocks", blocksize