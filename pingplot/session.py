import enum
import logging

from . import constants
from .data import SeriesStore
from .errors import ParseError
from .packets import END_OF_STREAM
from .parser import parse_line
from .ping import PingRunner
from .viewport import Viewport

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    TERMINATED = "terminated"


class Session:
    """One ping run: the probe process plus the series and bounds it feeds.

    Use as a context manager so the probe is killed on every exit path:

        with Session(["1.1.1.1"]) as session:
            session.tick()
    """

    def __init__(
        self,
        args,
        command=constants.DEFAULT_PING_COMMAND,
        batch_size=constants.DEFAULT_BATCH_SIZE,
        spawn=PingRunner.run,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.args = list(args)
        self.command = command
        self.batch_size = batch_size
        self._spawn = spawn

        self.state = SessionState.IDLE
        self.runner = None
        self.store = SeriesStore()
        self.viewport = Viewport()
        self.parse_errors = 0

    def _set_state(self, state):
        logger.info("session %s -> %s", self.state.value, state.value)
        self.state = state

    def start(self):
        if self.state is not SessionState.IDLE:
            raise RuntimeError(f"cannot start a {self.state.value} session")
        self.runner = self._spawn(self.args, command=self.command)
        self._set_state(SessionState.RUNNING)
        return self

    def tick(self):
        """Consume one batch of probe output. Returns the packets recorded."""
        if self.state is SessionState.DRAINING:
            if self.runner.exited():
                self.terminate()
            return 0

        if self.state is not SessionState.RUNNING:
            return 0

        recorded = 0
        for _ in range(self.batch_size):
            line = self.runner.next_line()
            if line is None:
                self._set_state(SessionState.DRAINING)
                break

            try:
                packet = parse_line(line)
            except ParseError as e:
                self.parse_errors += 1
                logger.warning("skipping line %r: %s", e.line, e)
                continue

            if packet is END_OF_STREAM:
                self.runner.finish()
                self._set_state(SessionState.DRAINING)
                break

            self.record(packet)
            recorded += 1

        return recorded

    def record(self, packet):
        self.store.record(packet)
        self.viewport.observe(packet.sequence_number, packet.latency)

    def terminate(self):
        if self.state is SessionState.TERMINATED:
            return
        if self.runner is not None:
            self.runner.terminate()
        self._set_state(SessionState.TERMINATED)

    def snapshot(self):
        return self.store.snapshot()

    def bounds(self):
        return self.viewport.bounds()

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.terminate()
        return False
