# toolup

Building blocks for a command-line toolchain installer: resumable file
downloads, a one-line download progress display, labelled status messages on
standard error, Markdown rendering for the terminal, interactive prompts,
selection of behaviour from the executable name, and the exception types that
tie them together.

## Modules

### `toolup.download`

`download_to_path_with_backend(backend, url, path, resume_from_partial, callback=None)`
fetches `url` into `path`.

- With `resume_from_partial` set, an existing file at `path` is kept and the
  download continues from its end; an HTTP download then sends a
  `Range: bytes=<offset>-` header. Without it, the file is opened for writing
  from its start.
- Progress is reported to the optional callback as `ResumingPartialDownload`,
  `ContentLengthReceived(length)` and `DataReceived(data)` events. When resuming
  with a callback, the bytes already on disk are replayed as `DataReceived`
  events first, and the content length reported is the server's length plus
  the resume offset, so the callback sees the file as if it had arrived in one
  piece.
- The file is flushed and synced to disk when the transfer ends.

`download_with_backend(backend, url, resume_from, callback)` performs the
transfer alone, without a target file. `download_from_file_url(url,
resume_from, callback)` serves `file:` URLs straight from disk and returns
`False` for any other scheme; a missing file raises `DownloadFileNotFound`.

`Backend.CURL` and `Backend.REQWEST` both use the standard library's HTTP
client. They differ only in details of error handling: `REQWEST` rejects a
malformed `Content-Length` header, while `CURL` ignores it. A non-2xx answer
raises `HttpStatusError`; other failures raise `DownloadError`.

### `toolup.download_tracker`

`DownloadTracker(stream=None, clock=time.monotonic)` receives
`content_length_received`, `data_received`, `download_finished`, `push_units`
and `pop_units` calls and, about once a second, rewrites a single progress line
on `stream` (standard output by default), showing the amount received, the
total and percentage when known, the average speed over the last five
refreshes, the elapsed time and an ETA. `format_size(size, units)` and
`format_duration(seconds)` produce the human-readable pieces, and
`DownloadTracker.from_seconds(sec)` splits seconds into
`(days, hours, minutes, seconds)`.

### `toolup.log`

`info`, `warn`, `err`, `verbose` and `debug` write messages prefixed with
`info: `, `warning: `, `error: `, `verbose: ` to standard error, in colour when
standard error is a terminal. `debug` prints only when the `TOOLUP_DEBUG`
environment variable is set.

### `toolup.markdown_render`

`render(stream, content)` writes Markdown to a stream, word-wrapped at 79
columns: headings and paragraphs, indented code blocks and bullet lists, with
bold headings and inline code and highlighted emphasis when the stream is a
terminal. `LineWrapper` and `LineFormatter` are the pieces it is built from.

### `toolup.common`

- Prompts reading from standard input: `confirm(question, default)`,
  `confirm_advanced()` (returns a `Confirm` member), `question_str(question,
  default)`, `question_bool(question, default)` and `read_line()`. When
  standard input is exhausted they raise `CliError("unable to read from stdin
  for confirmation")`.
- `self_update_permitted(explicit)` returns a `SelfUpdatePermission`: always
  `PERMIT` on Windows; elsewhere `HARD_FAIL` (explicit) or `SKIP` (implicit)
  when the `SNAP` environment variable is set or the program's directory is not
  writable.
- `report_error(error)` prints the error and each exception in its chain of
  causes, plus the traceback when `TOOLUP_BACKTRACE=1` or `-v`/`--verbose` is
  among the program's arguments.

### `toolup.main`

`mode_for_arg0(arg0)` maps the name the program was started under to a `Mode`:
`toolup` gives `TOOLUP`, names starting with `toolup-setup` or `toolup-init`
give `SETUP`, names starting with `toolup-gc-` give `GC`, anything else gives
`PROXY`; a missing name raises `NoExeName`. `do_recursion_guard(limit=20)`
reads `TOOLUP_RECURSION_COUNT` and raises `InfiniteRecursion` when it exceeds
the limit.

### `toolup.help` and `toolup.errors`

`toolup.help` holds the long help texts for the installer's commands as string
constants. `toolup.errors` defines the exceptions: `DownloadError` with
`HttpStatusError`, `DownloadFileNotFound` and `BackendUnavailable`, and
`CliError` with its subclasses such as `ToolchainNotInstalled`,
`InvalidToolchainName`, `NotSelfInstalled` and `WritingShellProfile`.

## Example

```python
from pathlib import Path

from toolup.download import Backend, DataReceived, download_to_path_with_backend
from toolup.errors import DownloadError


def on_event(event):
    if isinstance(event, DataReceived):
        print(f"received {len(event.data)} bytes")


def fetch(url: str, target: Path) -> None:
    try:
        download_to_path_with_backend(Backend.REQWEST, url, target, True, on_event)
    except DownloadError as exc:
        print(f"download failed: {exc}")
```

## What it does not do

This package has no command to run. It does not install, update or remove
toolchains, manage overrides, proxy tool invocations or replace itself: the
modes returned by `mode_for_arg0` and the texts in `toolup.help` describe such
behaviour, but nothing here carries it out.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
root.