class PingPlotError(Exception):
    """Base class for errors raised by pingplot."""


class SpawnError(PingPlotError):
    """The probe executable could not be launched."""


class ReadError(PingPlotError):
    """Reading the probe's output failed."""


class ParseError(PingPlotError):
    """A line of probe output could not be turned into a packet."""

    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line
