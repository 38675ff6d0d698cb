"""Prefixed, optionally coloured status messages on standard error."""

from __future__ import annotations

import os
import sys
from typing import TextIO

DEBUG_ENV_VAR = "TOOLUP_DEBUG"

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_BRIGHT_RED = "\x1b[91m"
_BRIGHT_YELLOW = "\x1b[93m"
_BRIGHT_BLUE = "\x1b[94m"
_BRIGHT_MAGENTA = "\x1b[95m"


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except (OSError, ValueError):
        return False


def _emit(prefix: str, color: str, message: object) -> None:
    stream = sys.stderr
    if _is_tty(stream):
        stream.write(f"{color}{_BOLD}{prefix}{_RESET}")
    else:
        stream.write(prefix)
    stream.write(f"{message}\n")
    stream.flush()


def warn(message: object) -> None:
    """Report a warning."""
    _emit("warning: ", _BRIGHT_YELLOW, message)


def err(message: object) -> None:
    """Report an error."""
    _emit("error: ", _BRIGHT_RED, message)


def info(message: object) -> None:
    """Report an informational message."""
    _emit("info: ", "", message)


def verbose(message: object) -> None:
    """Report a verbose message."""
    _emit("verbose: ", _BRIGHT_MAGENTA, message)


def debug(message: object) -> None:
    """Report a debug message, only when the debug environment variable is set."""
    if os.environ.get(DEBUG_ENV_VAR) is not None:
        _emit("verbose: ", _BRIGHT_BLUE, message)