#!/usr/bin/env python
"""Terminal loop driven by a scripted screen: timeouts tick, q quits."""

import curses

import pytest

from pingplot import tui
from pingplot.data import SeriesStore
from pingplot.session import SessionState
from pingplot.viewport import Viewport


class FakeScreen:
    def __init__(self, keys, size=(24, 80)):
        self.keys = list(keys)
        self.size = size
        self.timeout_ms = None
        self.rows = {}
        self.refreshes = 0

    def timeout(self, ms):
        self.timeout_ms = ms

    def getch(self):
        if not self.keys:
            raise AssertionError("loop kept reading keys after quit")
        return self.keys.pop(0)

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.rows = {}

    def addnstr(self, y, x, text, n):
        self.rows[y] = text[:n]

    def refresh(self):
        self.refreshes += 1


class CountingSession:
    def __init__(self):
        self.ticks = 0
        self.terminated = 0
        self.state = SessionState.RUNNING
        self.parse_errors = 0

        self.store = SeriesStore()
        self.viewport = Viewport()

    def tick(self):
        self.ticks += 1
        return 0

    def terminate(self):
        self.terminated += 1
        self.state = SessionState.TERMINATED

    def snapshot(self):
        return self.store.snapshot()

    def bounds(self):
        return self.viewport.bounds()


@pytest.fixture(autouse=True)
def no_cursor(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)


def test_timeouts_tick_and_quit_key_terminates():
    screen = FakeScreen([-1, -1, ord("q")])
    session = CountingSession()

    tui.ui_loop(screen, session, 100)

    assert screen.timeout_ms == 100
    assert session.ticks == 2
    assert session.terminated == 1
    assert screen.keys == []
    # One redraw before each key read.
    assert screen.refreshes == 3


def test_other_keys_do_not_tick():
    screen = FakeScreen([ord("x"), curses.KEY_RESIZE, -1, ord("Q")])
    session = CountingSession()

    tui.ui_loop(screen, session, 250)

    assert session.ticks == 1
    assert session.terminated == 1


def test_status_line_on_last_row():
    screen = FakeScreen([ord("q")], size=(20, 70))
    session = CountingSession()

    tui.ui_loop(screen, session, 250)

    assert screen.rows[19].startswith("[running]")
    assert "q=quit" in screen.rows[19]
    assert any("ICMP Packets" in row for row in screen.rows.values())
