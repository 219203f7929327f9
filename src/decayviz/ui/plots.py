# src/decayviz/ui/plots.py
from PySide6.QtWidgets import QWidget, QVBoxLayout
import pyqtgraph as pg


class DecayPlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Main plot area
        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setLabel("left", "Remaining", units="%")
        self.plot_widget.setLabel("bottom", "Time since dose", units="h")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setYRange(0, 100)
        layout.addWidget(self.plot_widget)

        self.curve = None   # decay curve item
        self.marker = None  # current position on the curve

    def plot_decay(self, t, pct, now_h: float | None = None, now_pct: float | None = None):
        """Draw the curve, plus a marker at (now_h, now_pct) when both are given."""
        self.clear()
        self.curve = self.plot_widget.plot(t, pct, pen=pg.mkPen(width=2))
        if now_h is not None and now_pct is not None:
            self.marker = self.plot_widget.plot(
                [now_h], [now_pct],
                pen=None, symbol="o", symbolSize=10, symbolBrush="r",
            )

    def clear(self):
        self.plot_widget.clear()
        self.curve = None
        self.marker = None
