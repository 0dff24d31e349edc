"""Tests for active line tracking."""

import pytest

from lyricspot.core.models import ActiveLineState, LyricLine
from lyricspot.lyrics.timeline import active_line, line_duration


def _track(*points: tuple[float, str]) -> list[LyricLine]:
    return [LyricLine(time=t, text=text) for t, text in points]


@pytest.fixture
def track() -> list[LyricLine]:
    return _track((0, "a"), (5, "b"), (10, "c"))


class TestActiveLine:
    def test_between_lines(self, track):
        assert active_line(track, 7) == ActiveLineState(index=1, duration=5)

    def test_before_first_line(self, track):
        state = active_line(track, -1)
        assert state.index == -1
        assert not state.is_active

    def test_last_line_uses_tail_window(self, track):
        assert active_line(track, 12) == ActiveLineState(index=2, duration=4)

    def test_exact_line_time_is_active(self, track):
        assert active_line(track, 5).index == 1
        assert active_line(track, 0) == ActiveLineState(index=0, duration=5)

    def test_empty_track(self):
        assert active_line([], 3.0) == ActiveLineState(index=-1)

    def test_first_line_later_than_zero(self):
        track = _track((12.5, "Hello"), (15.0, "World"))
        assert active_line(track, 3.0).index == -1
        assert active_line(track, 13.0) == ActiveLineState(index=0, duration=2.5)

    def test_equal_timestamps_pick_later_line(self):
        track = _track((0, "a"), (5, "b"), (5, "c"), (9, "d"))
        assert active_line(track, 5) == ActiveLineState(index=2, duration=4)

    def test_minimum_duration_floor(self):
        track = _track((0, "a"), (0.2, "b"), (3, "c"))
        assert active_line(track, 0.1) == ActiveLineState(index=0, duration=0.5)

    def test_custom_windows(self, track):
        assert active_line(track, 11, tail_duration=6).duration == 6
        assert active_line(track, 1, min_duration=8).duration == 8

    def test_pure_function(self, track):
        snapshot = list(track)
        first = active_line(track, 7.3)
        second = active_line(track, 7.3)
        assert first == second
        assert track == snapshot


def test_line_duration_zero_gap_is_floored():
    track = _track((0, "a"), (5, "b"), (5, "c"))
    assert line_duration(track, 1) == 0.5
    assert line_duration(track, 2) == 4.0
