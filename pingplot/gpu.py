import logging
import os
import subprocess

import pyqtgraph as pg

try:
    from OpenGL import GL  # noqa: F401

    OPENGL_AVAILABLE = True
except ImportError:
    OPENGL_AVAILABLE = False

logger = logging.getLogger(__name__)

DARK_THEME = {
    "background": (30, 30, 30),
    "foreground": (200, 200, 200),
    "legend_brush": (50, 50, 50, 200),
    "legend_text": (200, 200, 200),
}
LIGHT_THEME = {
    "background": "w",
    "foreground": "k",
    "legend_brush": (255, 255, 255, 200),
    "legend_text": (0, 0, 0),
}
# Keys of a theme that are pyqtgraph config options
PLOT_OPTIONS = ("background", "foreground")

active_theme = LIGHT_THEME


def select_theme(dark_mode: bool):
    return DARK_THEME if dark_mode else LIGHT_THEME


def opengl_status(force_no_gpu: bool = False):
    """Return (usable, reason) for drawing the chart through OpenGL."""
    if force_no_gpu:
        return False, "disabled by --no-gpu"
    if not OPENGL_AVAILABLE:
        return False, "PyOpenGL not installed (pip install 'ping-plot[gpu]')"

    from PyQt5.QtGui import QSurfaceFormat

    if QSurfaceFormat.defaultFormat().majorVersion() < 2:
        return False, "OpenGL version too old (< 2.0)"
    return True, "OpenGL available"


def prefers_dark_theme():
    if "dark" in os.environ.get("GTK_THEME", "").lower():
        return True

    try:
        result = subprocess.run(
            ["gsettings", "get", "org.gnome.desktop.interface", "color-scheme"],
            capture_output=True, text=True, timeout=2
        )
        if "dark" in result.stdout.lower():
            return True
    except (OSError, subprocess.SubprocessError):
        pass

    # Qt palette, works for KDE
    from PyQt5.QtGui import QPalette
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    return bool(app) and app.palette().color(QPalette.Window).lightness() < 128


def configure_pyqtgraph(force_no_gpu: bool = False, dark_mode: bool = None):
    """Apply theme and OpenGL options. Returns the antialias default for plot items."""
    global active_theme

    pg.setConfigOptions(antialias=True)

    if dark_mode is None:
        dark_mode = prefers_dark_theme()
    active_theme = select_theme(dark_mode)
    pg.setConfigOptions(**{key: active_theme[key] for key in PLOT_OPTIONS})

    use_gl, reason = opengl_status(force_no_gpu)
    if use_gl:
        pg.setConfigOption("useOpenGL", True)
        print("OpenGL acceleration enabled")
    else:
        print(f"No GPU acceleration: {reason}")
    logger.info("pyqtgraph configured: dark=%s opengl=%s (%s)", dark_mode, use_gl, reason)

    return use_gl
