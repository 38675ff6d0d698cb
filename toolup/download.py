"""File downloading with resumption of partial downloads."""

from __future__ import annotations

import os
import urllib.error
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Union
from urllib.parse import urlsplit

from toolup.errors import BackendUnavailable, DownloadError, DownloadFileNotFound, HttpStatusError

_CHUNK_SIZE = 0x10000
_PARTIAL_CHUNK_SIZE = 32768
_TIMEOUT = 30.0


class Backend(Enum):
    """The transfer implementation used for network downloads."""

    CURL = "curl"
    REQWEST = "reqwest"


@dataclass(frozen=True)
class ResumingPartialDownload:
    """An existing partial download is being resumed."""


@dataclass(frozen=True)
class ContentLengthReceived:
    """The total length of the data to be downloaded is known."""

    length: int


@dataclass(frozen=True)
class DataReceived:
    """A chunk of data arrived."""

    data: bytes


Event = Union[ResumingPartialDownload, ContentLengthReceived, DataReceived]
Callback = Callable[[Event], None]


def _file_url_path(url: str) -> Path:
    parts = urlsplit(url)
    if parts.netloc not in ("", "localhost"):
        raise DownloadError(f"bogus file url: '{url}'")
    return Path(urllib.request.url2pathname(parts.path))


def download_from_file_url(url: str, resume_from: int, callback: Callback) -> bool:
    """Serve a ``file:`` URL directly; return False for any other scheme."""
    if urlsplit(url).scheme != "file":
        return False
    source = _file_url_path(url)
    if not source.is_file():
        raise DownloadFileNotFound()
    try:
        stream = open(source, "rb")
    except OSError as exc:
        raise DownloadError("unable to open downloaded file") from exc
    with stream:
        stream.seek(resume_from)
        while True:
            try:
                chunk = stream.read(_CHUNK_SIZE)
            except OSError as exc:
                raise DownloadError("unable to read downloaded file") from exc
            if not chunk:
                break
            callback(DataReceived(chunk))
    return True


def _open_http(url: str, resume_from: int, request_error: str):
    request = urllib.request.Request(url)
    if resume_from:
        request.add_header("Range", f"bytes={resume_from}-")
    # Built per request so proxy settings follow the current environment.
    opener = urllib.request.build_opener()
    try:
        return opener.open(request, timeout=_TIMEOUT)
    except urllib.error.HTTPError as exc:
        exc.close()
        raise HttpStatusError(exc.code) from None
    except (urllib.error.URLError, ValueError, OSError) as exc:
        raise DownloadError(request_error) from exc


def _stream_response(response: BinaryIO, callback: Callback, read_error: str) -> None:
    while True:
        try:
            chunk = response.read(_CHUNK_SIZE)
        except OSError as exc:
            raise DownloadError(read_error) from exc
        if not chunk:
            return
        callback(DataReceived(chunk))


def _download_curl(url: str, resume_from: int, callback: Callback) -> None:
    if download_from_file_url(url, resume_from, callback):
        return
    with _open_http(url, resume_from, "error during download") as response:
        length = response.headers.get("Content-Length")
        if length is not None:
            try:
                total = int(length.strip())
            except ValueError:
                total = None
            if total is not None:
                callback(ContentLengthReceived(total + resume_from))
        _stream_response(response, callback, "error during download")
        status = response.status
    if status not in range(200, 300):
        raise HttpStatusError(status)


def _download_reqwest(url: str, resume_from: int, callback: Callback) -> None:
    if download_from_file_url(url, resume_from, callback):
        return
    with _open_http(url, resume_from, "failed to make network request") as response:
        if response.status not in range(200, 300):
            raise HttpStatusError(response.status)
        length = response.headers.get("Content-Length")
        if length is not None:
            try:
                total = int(length.strip())
            except ValueError as exc:
                raise DownloadError(f"invalid content-length header: '{length}'") from exc
            callback(ContentLengthReceived(total + resume_from))
        _stream_response(response, callback, "error reading from socket")


def download_with_backend(backend: Backend, url: str, resume_from: int, callback: Callback) -> None:
    """Download ``url`` starting at byte ``resume_from``, reporting events to ``callback``."""
    if backend is Backend.CURL:
        _download_curl(url, resume_from, callback)
    elif backend is Backend.REQWEST:
        _download_reqwest(url, resume_from, callback)
    else:
        raise BackendUnavailable(str(backend))


def _sync(fd: int) -> None:
    getattr(os, "fdatasync", os.fsync)(fd)


def download_to_path_with_backend(
    backend: Backend,
    url: str,
    path: str | os.PathLike[str],
    resume_from_partial: bool,
    callback: Callback | None = None,
) -> None:
    """Download ``url`` into ``path``, optionally continuing an existing partial file.

    When resuming with a callback, the bytes already on disk are replayed to the
    callback first so that it sees the data as if downloaded in one go.
    """
    path = Path(path)
    resume_from = 0
    if resume_from_partial:
        try:
            partial = open(path, "rb")
        except OSError:
            partial = None
        if partial is not None:
            with partial:
                if callback is not None:
                    callback(ResumingPartialDownload())
                    while chunk := partial.read(_PARTIAL_CHUNK_SIZE):
                        resume_from += len(chunk)
                        callback(DataReceived(chunk))
                else:
                    resume_from = os.fstat(partial.fileno()).st_size
        open_error = "error opening file for download"
    else:
        open_error = "error creating file for download"

    flags = os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0)
    try:
        fd = os.open(path, flags, 0o666)
    except OSError as exc:
        raise DownloadError(open_error) from exc

    with os.fdopen(fd, "wb") as target:
        if resume_from_partial:
            target.seek(0, os.SEEK_END)

        def on_event(event: Event) -> None:
            if isinstance(event, DataReceived):
                try:
                    target.write(event.data)
                except OSError as exc:
                    raise DownloadError("unable to write download to disk") from exc
            if callback is not None:
                callback(event)

        download_with_backend(backend, url, resume_from, on_event)

        try:
            target.flush()
            _sync(target.fileno())
        except OSError as exc:
            raise DownloadError("unable to sync download to disk") from exc