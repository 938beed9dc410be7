from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Received:
    sequence_number: int
    latency: float


@dataclass(frozen=True)
class Dropped:
    sequence_number: int
    # Timeout notices carry no round-trip time.
    latency: Optional[float] = None


class _EndOfStream:
    def __repr__(self):
        return "END_OF_STREAM"


END_OF_STREAM = _EndOfStream()
