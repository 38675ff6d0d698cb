from pathlib import Path

import pytest

from toolup.errors import (
    BackendUnavailable,
    CliError,
    DownloadError,
    DownloadFileNotFound,
    HttpStatusError,
    InfiniteRecursion,
    InvalidToolchainName,
    NoExeName,
    NotSelfInstalled,
    PermissionDeniedError,
    TargetAllSpecifiedWithTargets,
    ToolchainNotInstalled,
    UnsupportedCompletionShell,
    WindowsUninstallMadness,
    WritingShellProfile,
)


def test_http_status_message_and_code():
    error = HttpStatusError(404)
    assert error.code == 404
    assert str(error) == "http request returned an unsuccessful status code: 404"
    assert isinstance(error, DownloadError)


def test_file_not_found_message():
    assert str(DownloadFileNotFound()) == "file not found"


def test_backend_unavailable_message():
    error = BackendUnavailable("curl")
    assert error.backend == "curl"
    assert str(error) == "download backend 'curl' unavailable"


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (PermissionDeniedError(), "permission denied"),
        (InfiniteRecursion(), "infinite recursion detected"),
        (NoExeName(), "couldn't determine self executable name"),
        (WindowsUninstallMadness(), "failure during windows uninstall"),
    ],
)
def test_fixed_cli_messages(error, message):
    assert str(error) == message
    assert isinstance(error, CliError)


def test_toolchain_not_installed():
    error = ToolchainNotInstalled("stable-x86_64")
    assert error.toolchain == "stable-x86_64"
    assert str(error) == "toolchain 'stable-x86_64' is not installed"


def test_invalid_toolchain_name():
    assert str(InvalidToolchainName("b@d")) == "invalid toolchain name: 'b@d'"


def test_not_self_installed_includes_path():
    error = NotSelfInstalled(Path("/opt/cargo"))
    assert str(Path("/opt/cargo")) in str(error)
    assert str(error).endswith("'")


def test_unsupported_completion_shell():
    error = UnsupportedCompletionShell("fish", "cargo")
    assert str(error) == "cargo does not currently support completions for fish"


def test_target_all_joins_targets():
    error = TargetAllSpecifiedWithTargets(["all", "wasm32"])
    assert error.targets == ["all", "wasm32"]
    assert "all wasm32" in str(error)
    assert str(error).endswith("includes `all`")


def test_writing_shell_profile():
    error = WritingShellProfile("/home/u/.profile")
    assert str(error) == "could not amend shell profile: '/home/u/.profile'"


def test_cli_errors_share_base_and_keep_details():
    error = ToolchainNotInstalled("nightly")
    assert isinstance(error, CliError)
    assert not isinstance(error, DownloadError)
    assert error.toolchain == "nightly"
    assert str(error) == "toolchain 'nightly' is not installed"