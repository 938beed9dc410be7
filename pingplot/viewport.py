from . import constants


class Viewport:
    """Axis bounds that only ever grow, so the chart scale never jitters."""

    def __init__(
        self,
        max_sequence_number=constants.DEFAULT_MAX_SEQUENCE_NUMBER,
        max_latency=constants.DEFAULT_MAX_LATENCY,
    ):
        self.max_sequence_number = float(max_sequence_number)
        self.max_latency = float(max_latency)

    def observe(self, sequence_number, latency=None):
        if sequence_number >= self.max_sequence_number:
            self.max_sequence_number = float(sequence_number + constants.SEQUENCE_HEADROOM)

        if latency is not None and latency >= self.max_latency:
            self.max_latency = float(latency + constants.LATENCY_HEADROOM)

    def bounds(self):
        return self.max_sequence_number, self.max_latency
