#!/usr/bin/env python
"""Gap filling and overwrite behaviour of the sequence series store."""

import random

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from pingplot.constants import SENTINEL
from pingplot.data import SeriesStore
from pingplot.packets import Dropped, Received


def test_empty_snapshot():
    received, dropped = SeriesStore().snapshot()
    assert received.shape == (0, 2)
    assert dropped.shape == (0, 2)


def test_gap_is_sentinel_filled():
    store = SeriesStore()
    store.record(Received(3, 12.5))

    received, dropped = store.snapshot()
    assert_array_equal(received[:, 0], [0.0, 1.0, 2.0, 3.0])
    assert_array_equal(received[:, 1], [SENTINEL, SENTINEL, SENTINEL, 12.5])
    assert len(dropped) == 0


def test_dropped_goes_to_its_own_series_with_zero_latency():
    store = SeriesStore()
    store.record(Received(0, 1.0))
    store.record(Dropped(2))

    received, dropped = store.snapshot()
    assert_array_equal(received[:, 1], [1.0])
    assert_array_equal(dropped[:, 1], [SENTINEL, SENTINEL, 0.0])
    assert store.received_count == 1
    assert store.dropped_count == 1


def test_out_of_order_overwrites_without_truncating():
    store = SeriesStore()
    store.record(Received(10, 5.0))
    store.record(Received(3, 2.0))

    received, _ = store.snapshot()
    assert len(received) == 11
    assert tuple(received[3]) == (3.0, 2.0)
    assert tuple(received[10]) == (10.0, 5.0)
    assert np.count_nonzero(received[:, 1] == SENTINEL) == 9


def test_recording_twice_is_idempotent():
    once = SeriesStore()
    once.record(Received(4, 7.0))

    twice = SeriesStore()
    twice.record(Received(4, 7.0))
    twice.record(Received(4, 7.0))

    for a, b in zip(once.snapshot(), twice.snapshot()):
        assert_array_equal(a, b)


def test_length_tracks_max_sequence_number():
    rng = random.Random(1234)
    store = SeriesStore()
    set_received = {}
    set_dropped = {}

    for _ in range(300):
        seq = rng.randrange(0, 80)
        if rng.random() < 0.7:
            latency = round(rng.uniform(0, 50), 3)
            store.record(Received(seq, latency))
            set_received[seq] = latency
        else:
            store.record(Dropped(seq))
            set_dropped[seq] = 0.0

    received, dropped = store.snapshot()
    for pairs, expected in ((received, set_received), (dropped, set_dropped)):
        assert len(pairs) == max(expected) + 1
        for i, (x, y) in enumerate(pairs):
            assert x == i
            assert y == expected.get(i, SENTINEL)


def test_snapshot_is_a_copy():
    store = SeriesStore()
    store.record(Received(1, 3.0))

    received, _ = store.snapshot()
    received[1, 1] = 99.0

    assert store.snapshot()[0][1, 1] == 3.0


def test_rejects_negative_sequence_number():
    store = SeriesStore()
    store.record(Received(3, 7.0))

    with pytest.raises(ValueError):
        store.record(Received(-1, 99.0))
    with pytest.raises(ValueError):
        store.record(Dropped(-2))

    received, dropped = store.snapshot()
    assert tuple(received[3]) == (3.0, 7.0)
    assert len(received) == 4
    assert len(dropped) == 0


@pytest.mark.parametrize("sequence_number", [2.0, "2", None, True])
def test_rejects_non_integer_sequence_number(sequence_number):
    store = SeriesStore()
    with pytest.raises(ValueError):
        store.record(Received(sequence_number, 1.0))
    assert len(store.snapshot()[0]) == 0


def test_accepts_numpy_integers():
    store = SeriesStore()
    store.record(Received(np.int64(2), 1.5))
    assert tuple(store.snapshot()[0][2]) == (2.0, 1.5)


def test_dropped_keeps_reported_latency():
    store = SeriesStore()
    store.record(Dropped(1, latency=50.0))
    assert_array_equal(store.snapshot()[1][:, 1], [SENTINEL, 50.0])
