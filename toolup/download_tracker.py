"""Progress display for downloads."""

from __future__ import annotations

import math
import sys
import time
from collections import deque
from collections.abc import Callable
from typing import TextIO

DOWNLOAD_TRACK_COUNT = 5

_KI = 1024.0
_MI = _KI * _KI
_U32_MAX = 2**32 - 1


def _as_u32(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def _format_percent(percent: float) -> str:
    if math.isnan(percent):
        return "NaN"
    return f"{percent:3.0f}"


def format_duration(seconds: float) -> str:
    """Render a number of seconds as a short human readable duration."""
    if math.isinf(seconds):
        return "Unknown"
    d, h, m, s = DownloadTracker.from_seconds(_as_u32(seconds))
    if d > 0:
        return f"{d:3d}d {h:2d}h {m:2d}m {s:2d}s"
    if h > 0:
        return f"{h:2d}h {m:2d}m {s:2d}s"
    if m > 0:
        return f"{m:2d}m {s:2d}s"
    return f"{s:2d}s"


def format_size(size: int, units: str) -> str:
    """Render an amount with binary prefixes, e.g. ``  1.5 KiB``."""
    value = float(size)
    if value >= _MI:
        return f"{value / _MI:5.1f} Mi{units}"
    if value >= _KI:
        return f"{value / _KI:5.1f} Ki{units}"
    return f"{value:3.0f} {units}"


class DownloadTracker:
    """Tracks download progress and writes a one-line status to a terminal."""

    def __init__(
        self,
        stream: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._clock = clock
        self.units: list[str] = ["B"]
        self.downloaded_last_few_secs: deque[int] = deque(maxlen=DOWNLOAD_TRACK_COUNT)
        self._prepare_for_new_download()

    def _prepare_for_new_download(self) -> None:
        self.content_len: int | None = None
        self.total_downloaded = 0
        self.downloaded_this_sec = 0
        self.downloaded_last_few_secs.clear()
        self.start_sec = self._clock()
        self.last_sec: float | None = None
        self.displayed_charcount: int | None = None

    def content_length_received(self, content_len: int) -> None:
        """Record the total size of the download."""
        self.content_len = content_len

    def data_received(self, length: int) -> None:
        """Record ``length`` more bytes; refresh the display about once a second."""
        self.total_downloaded += length
        self.downloaded_this_sec += length
        now = self._clock()
        if self.last_sec is None:
            self.last_sec = now
        elif now - self.last_sec >= 1.0:
            self._display()
            self.last_sec = now
            self.downloaded_last_few_secs.appendleft(self.downloaded_this_sec)
            self.downloaded_this_sec = 0

    def download_finished(self) -> None:
        """Show the final state, if progress was shown, and reset for the next download."""
        if self.displayed_charcount is not None:
            self._display()
            self.stream.write("\n")
            self.stream.flush()
        self._prepare_for_new_download()

    @staticmethod
    def from_seconds(sec: int) -> tuple[int, int, int, int]:
        """Split seconds into (days, hours, minutes, seconds)."""
        days = sec // (24 * 3600)
        hours = sec % (24 * 3600) // 3600
        minutes = sec % 3600 // 60
        return days, hours, minutes, sec % 60

    def push_units(self, units: str) -> None:
        self.units.append(units)

    def pop_units(self) -> None:
        self.units.pop()

    def _display(self) -> None:
        units = self.units[-1]
        total_h = format_size(self.total_downloaded, units)
        history = self.downloaded_last_few_secs
        speed = sum(history) // len(history) if history else 0
        speed_h = format_size(speed, units)
        elapsed_h = format_duration(self._clock() - self.start_sec)

        self.stream.write("\r")
        if self.displayed_charcount is not None:
            self.stream.write(" " * self.displayed_charcount)
            self.stream.flush()
            self.stream.write("\r")

        if self.content_len is not None:
            content_len_h = format_size(self.content_len, units)
            percent = _divide(float(self.total_downloaded), float(self.content_len)) * 100.0
            remaining = float(self.content_len) - float(self.total_downloaded)
            eta_h = format_duration(_divide(remaining, float(speed)))
            output = (
                f"{total_h} / {content_len_h} ({_format_percent(percent)} %) "
                f"{speed_h}/s in {elapsed_h} ETA: {eta_h}"
            )
        else:
            output = f"Total: {total_h} Speed: {speed_h}/s Elapsed: {elapsed_h}"

        self.stream.write(output)
        self.stream.flush()
        self.displayed_charcount = len(output)