import re

import numpy as np
import plotext as plt

from .. import constants

# plotext colors its output with ANSI escapes, which curses cannot draw.
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

RECEIVED_MARKER = "braille"
DROPPED_MARKER = "x"


def visible_points(pairs: np.ndarray):
    """Drop sentinel slots; they sit below the y axis and are never drawn."""
    if len(pairs) == 0:
        return [], []
    mask = pairs[:, 1] != constants.SENTINEL
    return pairs[mask, 0].tolist(), pairs[mask, 1].tolist()


def _ticks(upper):
    return [0.0, upper / 2.0, upper]


def _label(value):
    return f"{value:g}"


def build_chart(received, dropped, bounds, width, height):
    """Draw both series into a plain-text chart of `width` x `height` cells."""
    max_sequence_number, max_latency = bounds

    plt.clf()
    plt.theme("clear")
    plt.plotsize(max(width, 20), max(height, 8))
    plt.title(constants.CHART_TITLE)
    plt.xlabel(constants.X_AXIS_TITLE)
    plt.ylabel(constants.Y_AXIS_TITLE)

    for pairs, label, color, marker in (
        (received, constants.RECEIVED_LABEL, constants.RECEIVED_COLOR, RECEIVED_MARKER),
        (dropped, constants.DROPPED_LABEL, constants.DROPPED_COLOR, DROPPED_MARKER),
    ):
        xs, ys = visible_points(pairs)
        if xs:
            plt.scatter(xs, ys, label=label, color=color, marker=marker)

    plt.xlim(0, max_sequence_number)
    plt.ylim(0, max_latency)
    x_ticks = _ticks(max_sequence_number)
    y_ticks = _ticks(max_latency)
    plt.xticks(x_ticks, [_label(v) for v in x_ticks])
    plt.yticks(y_ticks, [_label(v) for v in y_ticks])

    return ANSI_ESCAPE.sub("", plt.build())


def status_line(session):
    store = session.store
    return (
        f"[{session.state.value}] received={store.received_count} "
        f"dropped={store.dropped_count} skipped={session.parse_errors}   q=quit"
    )
