import math

from .errors import ParseError
from .packets import END_OF_STREAM, Dropped, Received

SEQ_PREFIX = "icmp_seq="
TIME_PREFIX = "time="


def _parse_sequence(token, line):
    try:
        value = int(token)
    except ValueError:
        raise ParseError(f"invalid sequence number {token!r}", line) from None
    if value < 0:
        raise ParseError(f"negative sequence number {value}", line)
    return value


def _parse_latency(token, line):
    if token.endswith("ms"):
        token = token[:-2]
    try:
        value = float(token)
    except ValueError:
        raise ParseError(f"invalid latency {token!r}", line) from None
    if not math.isfinite(value) or value < 0:
        raise ParseError(f"latency out of range {value}", line)
    return value


def parse_line(line):
    """Turn one line of ping output into a packet.

    Returns a `Received` or `Dropped` packet, or `END_OF_STREAM` for the
    blank line / "--- host ping statistics ---" block that closes the
    output. Raises `ParseError` for anything else.
    """
    if not line.strip() or line.startswith("-"):
        return END_OF_STREAM

    parts = line.split()

    # "Request timeout for icmp_seq 7"
    if parts[0] == "Request":
        return Dropped(sequence_number=_parse_sequence(parts[-1], line))

    seq_token = None
    time_token = None
    for part in parts:
        if part.startswith(SEQ_PREFIX):
            seq_token = part[len(SEQ_PREFIX):]
        elif part.startswith(TIME_PREFIX):
            time_token = part[len(TIME_PREFIX):]

    if seq_token is None:
        raise ParseError("no icmp_seq= field", line)

    sequence_number = _parse_sequence(seq_token, line)

    # Reports naming a sequence without a round-trip time are non-replies
    # ("no answer yet for icmp_seq=3", "Destination Host Unreachable").
    if time_token is None:
        return Dropped(sequence_number=sequence_number)

    return Received(sequence_number=sequence_number, latency=_parse_latency(time_token, line))
