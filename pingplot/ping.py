import logging
import subprocess

from . import constants
from .errors import ReadError, SpawnError

logger = logging.getLogger(__name__)


class PingRunner:
    """Owns a probe subprocess and hands out its stdout one line at a time.

    `next_line()` returns None once the stream has ended or a read failed;
    from then on the runner is `done` and never touches the pipe again.
    Process lifetime is controlled separately through `terminate()`.
    """

    def __init__(self, process):
        self.process = process
        self.done = False
        self._terminated = False

    @classmethod
    def run(cls, args, command=constants.DEFAULT_PING_COMMAND):
        argv = [command, *args]
        try:
            process = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                bufsize=1,
            )
        except (OSError, ValueError) as e:
            raise SpawnError(f"could not start {command!r}: {e}") from e

        logger.debug("spawned %s (pid %s)", argv, process.pid)
        return cls(process)

    def next_line(self):
        if self.done:
            return None

        try:
            line = self._read_line()
        except ReadError as e:
            logger.warning("%s, treating as end of output", e)
            line = ""

        if not line:
            self.done = True
            return None

        return line.rstrip("\r\n")

    def _read_line(self):
        stdout = self.process.stdout
        if stdout is None or stdout.closed:
            raise ReadError("probe output is closed")
        try:
            return stdout.readline()
        except (OSError, ValueError) as e:
            raise ReadError(f"reading probe output failed: {e}") from e

    def finish(self):
        self.done = True

    def exited(self):
        return self.process.poll() is not None

    def terminate(self):
        if self._terminated:
            return
        self._terminated = True
        self.done = True

        try:
            self.process.kill()
        except OSError:
            # Already gone.
            pass

        if self.process.stdout is not None:
            try:
                self.process.stdout.close()
            except OSError:
                pass

        # Reap without blocking if the kill has already landed.
        self.process.poll()
        logger.debug("terminated pid %s", self.process.pid)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.terminate()
        return False
