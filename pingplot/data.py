import numpy as np

from . import constants
from .packets import Dropped, Received


def _ensure_length(values: np.ndarray, length: int) -> np.ndarray:
    """Grow `values` to at least `length`, sentinel-filling only new slots."""
    missing = length - len(values)
    if missing <= 0:
        return values
    return np.append(values, np.full(missing, constants.SENTINEL))


def _pairs(values: np.ndarray) -> np.ndarray:
    return np.column_stack((np.arange(len(values), dtype=float), values))


class SeriesStore:
    """Received and dropped latency series indexed by sequence number.

    Position i of each series always belongs to sequence number i. Slots
    that were never recorded hold `constants.SENTINEL`.
    """

    def __init__(self):
        self.received = np.array([], dtype=float)
        self.dropped = np.array([], dtype=float)

    def record(self, packet):
        if isinstance(packet, Received):
            self.received = self._set(self.received, packet.sequence_number, packet.latency)
        elif isinstance(packet, Dropped):
            latency = packet.latency if packet.latency is not None else 0.0
            self.dropped = self._set(self.dropped, packet.sequence_number, latency)
        else:
            raise TypeError(f"cannot record {packet!r}")

    @staticmethod
    def _set(values, sequence_number, latency):
        if isinstance(sequence_number, bool) or not isinstance(sequence_number, (int, np.integer)):
            raise ValueError(f"sequence number must be an integer, got {sequence_number!r}")
        if sequence_number < 0:
            raise ValueError(f"negative sequence number {sequence_number}")
        values = _ensure_length(values, sequence_number + 1)
        values[sequence_number] = latency
        return values

    @property
    def received_count(self):
        return int(np.count_nonzero(self.received != constants.SENTINEL))

    @property
    def dropped_count(self):
        return int(np.count_nonzero(self.dropped != constants.SENTINEL))

    def snapshot(self):
        """Return (received, dropped) as (n, 2) arrays of (sequence, value) pairs."""
        return _pairs(self.received), _pairs(self.dropped)
