"""Selection of the program's behaviour from the name it was started under."""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import PurePath

from toolup.errors import InfiniteRecursion, NoExeName

RECURSION_COUNT_ENV = "TOOLUP_RECURSION_COUNT"
RECURSION_COUNT_MAX = 20
FORCE_ARG0_ENV = "TOOLUP_FORCE_ARG0"

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)


class Mode(Enum):
    """What the program does, decided by the stem of its executable name."""

    TOOLUP = "toolup"
    SETUP = "setup"
    GC = "gc"
    PROXY = "proxy"


def do_recursion_guard(limit: int = RECURSION_COUNT_MAX) -> int:
    """Return the current proxy recursion depth, raising if it exceeds ``limit``.

    An unset or unparsable depth counts as zero.
    """
    raw = os.environ.get(RECURSION_COUNT_ENV)
    count = int(raw) if raw is not None and _UNSIGNED.fullmatch(raw) else 0
    if count > limit:
        raise InfiniteRecursion()
    return count


def mode_for_arg0(arg0: str | os.PathLike[str] | None) -> Mode:
    """Map the name the program was started under to its mode of operation."""
    if arg0 is None:
        raise NoExeName()
    path = PurePath(os.fspath(arg0))
    if path.name in ("", ".", ".."):
        raise NoExeName()
    stem = path.stem
    if stem == "toolup":
        return Mode.TOOLUP
    # Only the prefix is checked: browsers rename duplicate downloads,
    # e.g. to toolup-init(2).
    if stem.startswith(("toolup-setup", "toolup-init")):
        return Mode.SETUP
    if stem.startswith("toolup-gc-"):
        return Mode.GC
    return Mode.PROXY