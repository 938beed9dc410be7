import curses

from . import constants
from .controllers import interaction, rendering


def _addstr(stdscr, y, x, text):
    h, w = stdscr.getmaxyx()
    if y < 0 or y >= h or x >= w:
        return
    try:
        stdscr.addnstr(y, x, text, w - x - 1)
    except curses.error:
        pass


def draw(stdscr, session):
    h, w = stdscr.getmaxyx()
    received, dropped = session.snapshot()
    chart = rendering.build_chart(received, dropped, session.bounds(), w - 1, h - 1)

    stdscr.erase()
    for y, row in enumerate(chart.splitlines()[: h - 1]):
        _addstr(stdscr, y, 0, row)
    _addstr(stdscr, h - 1, 0, rendering.status_line(session))
    stdscr.refresh()


def ui_loop(stdscr, session, tick_ms):
    """Redraw, then wait up to `tick_ms` for a key; no key means a tick."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.timeout(tick_ms)

    while True:
        draw(stdscr, session)

        ch = stdscr.getch()
        if ch == -1:
            session.tick()
        elif interaction.is_quit_key(ch):
            session.terminate()
            break


def run_tui(session, tick_ms=constants.DEFAULT_TICK_MS):
    # curses.wrapper restores the terminal even when the loop raises.
    curses.wrapper(ui_loop, session, tick_ms)
