"""Interactive prompts, self-update checks and error reporting for the command line."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import traceback
from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from toolup import log
from toolup.errors import CliError

SNAP_ENV_VAR = "SNAP"
BACKTRACE_ENV_VAR = "TOOLUP_BACKTRACE"

_STDIN_ERROR = "unable to read from stdin for confirmation"


class Confirm(Enum):
    """The answer to the installation menu."""

    YES = "yes"
    NO = "no"
    ADVANCED = "advanced"


class SelfUpdatePermission(Enum):
    """Whether a self-update may go ahead."""

    HARD_FAIL = "hard_fail"
    SKIP = "skip"
    PERMIT = "permit"


def read_line() -> str:
    """Read one line from standard input without its line ending.

    Raises CliError when standard input is exhausted or unreadable.
    """
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError, UnicodeDecodeError) as exc:
        raise CliError(_STDIN_ERROR) from exc
    if not line:
        raise CliError(_STDIN_ERROR)
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _flush_stdout() -> None:
    try:
        sys.stdout.flush()
    except (OSError, ValueError):
        pass


def confirm(question: str, default: bool) -> bool:
    """Ask a yes/no question on one line; an empty answer gives ``default``."""
    print(f"{question} ", end="")
    _flush_stdout()
    answer = read_line().lower()
    print()
    if answer in ("y", "yes"):
        return True
    if answer == "":
        return default
    return False


def confirm_advanced() -> Confirm:
    """Show the installation menu and return the choice made."""
    print()
    print("1) Proceed with installation (default)")
    print("2) Customize installation")
    print("3) Cancel installation")
    print(">", end="")
    _flush_stdout()
    answer = read_line()
    print()
    if answer in ("1", ""):
        return Confirm.YES
    if answer == "2":
        return Confirm.ADVANCED
    return Confirm.NO


def question_str(question: str, default: str) -> str:
    """Ask for a string; an empty answer gives ``default``."""
    print(question)
    _flush_stdout()
    answer = read_line()
    print()
    return answer if answer else default


def question_bool(question: str, default: bool) -> bool:
    """Ask a yes/no question; an empty or unrecognised answer gives ``default``."""
    print(question)
    _flush_stdout()
    answer = read_line()
    print()
    lowered = answer.lower()
    if lowered in ("y", "yes"):
        return True
    if lowered in ("n", "no"):
        return False
    return default


def _current_exe_dir() -> Path:
    argv0 = sys.argv[0] if sys.argv else ""
    candidate = Path(argv0) if argv0 else None
    if candidate is None or not candidate.is_file():
        candidate = Path(sys.executable)
    return candidate.resolve().parent


def self_update_permitted(explicit: bool) -> SelfUpdatePermission:
    """Decide whether the program may replace itself.

    An explicit request that cannot be honoured is a hard failure; an implicit
    one is simply skipped.
    """
    if sys.platform == "win32":
        return SelfUpdatePermission.PERMIT

    refused = SelfUpdatePermission.HARD_FAIL if explicit else SelfUpdatePermission.SKIP

    if SNAP_ENV_VAR in os.environ:
        log.debug("Skipping self-update because SNAP was detected")
        return refused

    exe_dir = _current_exe_dir()
    try:
        probe = tempfile.mkdtemp(prefix="updtest", dir=exe_dir)
    except PermissionError:
        log.debug("Skipping self-update because we cannot write to the toolup dir")
        return refused
    shutil.rmtree(probe, ignore_errors=True)
    return SelfUpdatePermission.PERMIT


def _causes(error: BaseException) -> Iterator[BaseException]:
    seen = {id(error)}
    current: BaseException | None = error
    while current is not None:
        nxt = current.__cause__
        if nxt is None and not current.__suppress_context__:
            nxt = current.__context__
        if nxt is None or id(nxt) in seen:
            return
        seen.add(id(nxt))
        yield nxt
        current = nxt


def _show_backtrace() -> bool:
    if os.environ.get(BACKTRACE_ENV_VAR) == "1":
        return True
    return any(arg in ("-v", "--verbose") for arg in sys.argv)


def report_error(error: BaseException) -> None:
    """Report an error and its chain of causes; show the traceback when asked for."""
    log.err(error)
    for cause in _causes(error):
        log.info(f"caused by: {cause}")
    if _show_backtrace() and error.__traceback__ is not None:
        log.info("backtrace:")
        print()
        print("".join(traceback.format_exception(type(error), error, error.__traceback__)))