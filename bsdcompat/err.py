"""Formatted warnings and fatal errors carrying an explicit error code."""

from __future__ import annotations

import os
import sys
from typing import NoReturn, Optional


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return "python"


def _report(code: int, fmt: Optional[str], args: tuple) -> None:
    sys.stdout.flush()
    parts = [f"{_program_name()}: "]
    if fmt is not None:
        parts.append((fmt % args) if args else fmt)
        parts.append(": ")
    parts.append(os.strerror(code))
    sys.stderr.write("".join(parts) + "\n")
    sys.stderr.flush()


def warnc(code: int, fmt: Optional[str], *args) -> None:
    """Print a warning with the message for error ``code`` to stderr."""
    _report(code, fmt, args)


def errc(status: int, code: int, fmt: Optional[str], *args) -> NoReturn:
    """Print like :func:`warnc`, then exit with ``status``."""
    _report(code, fmt, args)
    raise SystemExit(status)