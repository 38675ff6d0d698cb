"""Exception types raised by the downloader and the command-line front end."""

from __future__ import annotations

import os
from collections.abc import Iterable


class DownloadError(Exception):
    """A download could not be completed."""


class HttpStatusError(DownloadError):
    """The server answered with a status code outside the 2xx range."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"http request returned an unsuccessful status code: {code}")


class DownloadFileNotFound(DownloadError):
    """The requested file does not exist."""

    def __init__(self, message: str = "file not found") -> None:
        super().__init__(message)


class BackendUnavailable(DownloadError):
    """The requested download backend cannot be used."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(f"download backend '{backend}' unavailable")


class CliError(Exception):
    """An error reported by the command-line front end."""

    default_message = "command failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class PermissionDeniedError(CliError):
    default_message = "permission denied"


class ToolchainNotInstalled(CliError):
    def __init__(self, toolchain: str) -> None:
        self.toolchain = toolchain
        super().__init__(f"toolchain '{toolchain}' is not installed")


class InvalidToolchainName(CliError):
    def __init__(self, toolchain: str) -> None:
        self.toolchain = toolchain
        super().__init__(f"invalid toolchain name: '{toolchain}'")


class InfiniteRecursion(CliError):
    default_message = "infinite recursion detected"


class NoExeName(CliError):
    default_message = "couldn't determine self executable name"


class NotSelfInstalled(CliError):
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path
        super().__init__(f"toolup is not installed at '{os.fspath(path)}'")


class WindowsUninstallMadness(CliError):
    default_message = "failure during windows uninstall"


class UnsupportedCompletionShell(CliError):
    def __init__(self, shell: object, command: object) -> None:
        self.shell = shell
        self.command = command
        super().__init__(f"{command} does not currently support completions for {shell}")


class TargetAllSpecifiedWithTargets(CliError):
    def __init__(self, targets: Iterable[str]) -> None:
        self.targets = list(targets)
        super().__init__(f"`toolup target add {' '.join(self.targets)}` includes `all`")


class WritingShellProfile(CliError):
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path
        super().__init__(f"could not amend shell profile: '{os.fspath(path)}'")