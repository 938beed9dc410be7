import pyqtgraph as pg
from PyQt5.QtCore import QTimer
from PyQt5.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from .. import constants, gpu
from ..controllers import interaction, rendering
from ..plot_items import packet_scatter, setup_legend


class PingPlotWindow(QMainWindow):
    def __init__(self, session, tick_ms: int = constants.DEFAULT_TICK_MS, antialias_default: bool = False):
        super().__init__()
        self.session = session

        target = " ".join(session.args)
        self.setWindowTitle(f"Ping Plot [{target}]" if target else "Ping Plot")
        self.setGeometry(100, 100, 1000, 600)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setSpacing(5)

        self.plot = pg.PlotWidget()
        self.plot.setMenuEnabled(False)
        self.plot.setTitle(constants.CHART_TITLE, anchor="w")
        self.plot.setLabel("bottom", constants.X_AXIS_TITLE)
        self.plot.setLabel("left", constants.Y_AXIS_TITLE)
        self.plot.showGrid(x=True, y=True, alpha=0.15)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.wheelEvent = lambda evt: None
        self.plot.hideButtons()
        self.plot.enableAutoRange(enable=False)
        layout.addWidget(self.plot)

        self.legend = setup_legend(self.plot, gpu.active_theme)
        self.received_scatter = packet_scatter(constants.RECEIVED_PEN, antialias=antialias_default)
        self.dropped_scatter = packet_scatter(constants.DROPPED_PEN, symbol="x", antialias=antialias_default)
        self.plot.addItem(self.received_scatter)
        self.plot.addItem(self.dropped_scatter)
        self.legend.addItem(self.received_scatter, constants.RECEIVED_LABEL)
        self.legend.addItem(self.dropped_scatter, constants.DROPPED_LABEL)

        self.status = QLabel()
        layout.addWidget(self.status)

        self.draw_chart()

        self.timer = QTimer()
        self.timer.timeout.connect(self.update_data)
        self.timer.start(tick_ms)

    # ---- Qt events ----

    def keyPressEvent(self, event):
        if interaction.is_quit_key(event.text()):
            self.close()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event):
        self.timer.stop()
        self.session.terminate()
        super().closeEvent(event)

    # ---- Data + rendering ----

    def update_data(self):
        self.session.tick()
        self.draw_chart()

    def draw_chart(self):
        received, dropped = self.session.snapshot()
        for scatter, pairs in ((self.received_scatter, received), (self.dropped_scatter, dropped)):
            xs, ys = rendering.visible_points(pairs)
            scatter.setData(x=xs, y=ys)

        max_sequence_number, max_latency = self.session.bounds()
        self.plot.setXRange(0, max_sequence_number, padding=0)
        self.plot.setYRange(0, max_latency, padding=0)
        self.status.setText(rendering.status_line(self.session))
