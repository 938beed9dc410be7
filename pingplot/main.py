import argparse
import logging
import sys

from . import constants
from .errors import SpawnError
from .logger_config import setup_logger
from .session import Session

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ping-plot",
        add_help=True,
        allow_abbrev=False,
        description="Chart ping round-trip times live. Arguments not listed "
        "below are passed to ping unchanged, e.g. `ping-plot 1.1.1.1 -i 0.5`.",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open a chart window instead of drawing in the terminal.",
    )
    parser.add_argument(
        "--no-gpu",
        action="store_true",
        help="Disable OpenGL/GPU acceleration in the chart window.",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=constants.DEFAULT_TICK_MS,
        metavar="MS",
        help="Interval between output polls and redraws (default: %(default)s).",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=constants.DEFAULT_BATCH_SIZE,
        metavar="N",
        help="Maximum ping lines consumed per tick (default: %(default)s).",
    )
    parser.add_argument(
        "--ping-command",
        default=constants.DEFAULT_PING_COMMAND,
        metavar="PATH",
        help="Probe executable to run (default: %(default)s).",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write log messages to PATH.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: %(default)s).",
    )
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args, ping_args = parser.parse_known_args(argv if argv is not None else sys.argv[1:])

    if not ping_args:
        parser.error("no ping arguments given, e.g. `ping-plot 1.1.1.1`")
    if args.tick_ms < 1:
        parser.error("--tick-ms must be at least 1")
    if args.batch_size < 1:
        parser.error("--batch-size must be at least 1")

    args.ping_args = ping_args
    return args


def run_gui(session, args):
    from PyQt5.QtWidgets import QApplication

    from .gpu import configure_pyqtgraph
    from .windows.main_window import PingPlotWindow

    app = QApplication([sys.argv[0]])
    antialias_default = configure_pyqtgraph(force_no_gpu=args.no_gpu)

    window = PingPlotWindow(session, tick_ms=args.tick_ms, antialias_default=antialias_default)
    window.show()
    app.aboutToQuit.connect(session.terminate)
    return app.exec_()


def main(argv=None):
    args = parse_args(argv)
    setup_logger(log_file=args.log_file, level=getattr(logging, args.log_level), console=args.gui)

    session = Session(args.ping_args, command=args.ping_command, batch_size=args.batch_size)
    try:
        with session:
            if args.gui:
                run_gui(session, args)
            else:
                from .tui import run_tui

                run_tui(session, tick_ms=args.tick_ms)
    except SpawnError as e:
        logger.error("%s", e)
        print(f"ping-plot: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
