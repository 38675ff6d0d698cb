import io
import math

import pytest

from toolup.download_tracker import (
    DOWNLOAD_TRACK_COUNT,
    DownloadTracker,
    format_duration,
    format_size,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def tracker(stream, clock):
    return DownloadTracker(stream=stream, clock=clock)


@pytest.mark.parametrize(
    "sec, expected",
    [
        (2, (0, 0, 0, 2)),
        (60, (0, 0, 1, 0)),
        (3_600, (0, 1, 0, 0)),
        (3_600 * 24, (1, 0, 0, 0)),
        (52_292, (0, 14, 31, 32)),
        (222_292, (2, 13, 44, 52)),
    ],
)
def test_from_seconds(sec, expected):
    assert DownloadTracker.from_seconds(sec) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (2, " 2s"),
        (61, " 1m  1s"),
        (3_600, " 1h  0m  0s"),
        (222_292, "  2d 13h 44m 52s"),
        (math.inf, "Unknown"),
        (math.nan, " 0s"),
        (2.9, " 2s"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


@pytest.mark.parametrize(
    "size, expected",
    [
        (5, "  5 B"),
        (500, "500 B"),
        (1000, "1000 B"),
        (1024, "  1.0 KiB"),
        (1536, "  1.5 KiB"),
        (1024 * 1024, "  1.0 MiB"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size, "B") == expected


def test_quick_download_displays_nothing(tracker, stream):
    tracker.content_length_received(10)
    tracker.data_received(10)
    tracker.download_finished()
    assert stream.getvalue() == ""
    assert tracker.total_downloaded == 0


def test_progress_with_content_length(tracker, stream, clock):
    tracker.content_length_received(1000)
    tracker.data_received(500)
    clock.now = 2.0
    tracker.data_received(0)
    out1 = "500 B / 1000 B ( 50 %)   0 B/s in  2s ETA: Unknown"
    assert stream.getvalue() == "\r" + out1

    clock.now = 3.5
    tracker.data_received(250)
    out2 = "750 B / 1000 B ( 75 %) 500 B/s in  3s ETA:  0s"
    assert stream.getvalue() == "\r" + out1 + "\r" + " " * len(out1) + "\r" + out2
    assert tracker.displayed_charcount == len(out2)

    tracker.download_finished()
    out3 = "750 B / 1000 B ( 75 %) 375 B/s in  3s ETA:  0s"
    assert stream.getvalue().endswith("\r" + " " * len(out2) + "\r" + out3 + "\n")
    assert tracker.content_len is None
    assert tracker.total_downloaded == 0
    assert tracker.displayed_charcount is None
    assert len(tracker.downloaded_last_few_secs) == 0


def test_progress_without_content_length(tracker, stream, clock):
    tracker.data_received(100)
    clock.now = 1.5
    tracker.data_received(100)
    expected = "Total: 200 B Speed:   0 B/s Elapsed:  1s"
    assert stream.getvalue() == "\r" + expected
    assert tracker.total_downloaded == 200
    assert tracker.downloaded_this_sec == 0
    assert tracker.displayed_charcount == len(expected)
    assert list(tracker.downloaded_last_few_secs) == [200]


def test_pushed_units_are_used(tracker, stream, clock):
    tracker.push_units("iB")
    tracker.data_received(3)
    clock.now = 1.0
    tracker.data_received(0)
    assert "  3 iB" in stream.getvalue()
    tracker.pop_units()
    assert tracker.units == ["B"]


def test_history_is_bounded(tracker, clock):
    for second in range(DOWNLOAD_TRACK_COUNT + 4):
        clock.now = float(second)
        tracker.data_received(second)
    assert len(tracker.downloaded_last_few_secs) == DOWNLOAD_TRACK_COUNT
    assert tracker.downloaded_last_few_secs[0] == DOWNLOAD_TRACK_COUNT + 3


def test_total_accumulates(tracker):
    tracker.data_received(7)
    tracker.data_received(8)
    assert tracker.total_downloaded == 15
    assert tracker.downloaded_this_sec == 15


def test_popping_default_units_then_display_fails(tracker, clock):
    tracker.pop_units()
    tracker.data_received(1)
    clock.now = 1.0
    with pytest.raises(IndexError):
        tracker.data_received(1)