import pyqtgraph as pg


def setup_legend(plot, theme, offset=(5, 5)):
    """Legend pinned to the top left of `plot`, colored from a `gpu` theme."""
    legend = pg.LegendItem(offset=offset, pen=pg.mkPen(None), brush=pg.mkBrush(*theme["legend_brush"]))
    legend.setParentItem(plot.getPlotItem().vb)
    legend.anchor((0, 0), (0, 0), offset=offset)
    legend.setLabelTextColor(theme["legend_text"])
    legend.layout.setSpacing(3)
    legend.layout.setContentsMargins(7, 5, 7, 0)

    return legend


def packet_scatter(color, symbol="o", antialias=False):
    """Scatter item for one packet series; sentinel slots are masked by the caller."""
    return pg.ScatterPlotItem(
        size=5,
        symbol=symbol,
        pen=pg.mkPen(None),
        brush=pg.mkBrush(color),
        antialias=antialias,
    )
