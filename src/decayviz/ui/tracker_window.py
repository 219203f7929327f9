# src/decayviz/ui/tracker_window.py
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QGridLayout, QLabel,
                               QLineEdit, QPushButton, QStatusBar)

from decayengine.curves import decay_curve
from decayengine.timefmt import TIMESTAMP_PATTERN
from decayengine.types import Remaining
from ..config import WINDOW_TITLE
from ..presenter import StatusMessage, TrackerPresenter
from .plots import DecayPlotWidget

# result label colour per severity
COLORS = {
    "idle": "black",
    "prompt": "orange",
    "error": "red",
    "result": "blue",
}

DISCLAIMER = ("<html><center><b>Disclaimer:</b> This is a simplified estimate and NOT medical advice.<br>"
              "Consult your doctor for any medical concerns.</center></html>")


class TrackerWindow(QMainWindow):
    def __init__(self, presenter: TrackerPresenter):
        super().__init__()
        self.presenter = presenter
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(640, 560)

        central = QWidget(self); self.setCentralWidget(central)
        root = QVBoxLayout(central)
        form = QGridLayout(); root.addLayout(form)

        # --- Inputs ---
        form.addWidget(QLabel(presenter.half_life_text()), 0, 0, 1, 2)

        form.addWidget(QLabel(f"Last Dose ({TIMESTAMP_PATTERN}):"), 1, 0)
        self.dose_field = QLineEdit(presenter.state.dose_text)
        self.dose_field.setPlaceholderText(TIMESTAMP_PATTERN)
        form.addWidget(self.dose_field, 1, 1)

        now_button = QPushButton("Set to Now")
        now_button.setToolTip("Set the last dose time to the current time.")
        form.addWidget(now_button, 2, 0)

        calculate_button = QPushButton("Calculate % Remaining")
        form.addWidget(calculate_button, 2, 1)

        # --- Outputs ---
        self.result_label = QLabel()
        font = QFont(); font.setBold(True); font.setPointSize(16)
        self.result_label.setFont(font)
        self.result_label.setAlignment(Qt.AlignCenter)
        root.addWidget(self.result_label)

        self.plot = DecayPlotWidget()
        root.addWidget(self.plot, 1)

        disclaimer = QLabel(DISCLAIMER)
        disclaimer.setStyleSheet("color: red;")
        disclaimer.setAlignment(Qt.AlignCenter)
        root.addWidget(disclaimer)

        self.status = QStatusBar(); self.setStatusBar(self.status)

        # wire events (Enter in the field calculates too)
        now_button.clicked.connect(self.on_set_to_now)
        calculate_button.clicked.connect(self.on_calculate)
        self.dose_field.returnPressed.connect(self.on_calculate)

        self.show_status(presenter.state.status)
        self.plot_curve()

    def on_set_to_now(self):
        self.dose_field.setText(self.presenter.set_to_now())

    def on_calculate(self):
        self.show_status(self.presenter.calculate(self.dose_field.text()))
        self.plot_curve()
        report = self.presenter.threshold_report()
        if report:
            self.status.showMessage(report, 8000)
        else:
            self.status.clearMessage()

    def show_status(self, status: StatusMessage):
        self.result_label.setText(status.text)
        self.result_label.setStyleSheet(f"color: {COLORS[status.severity]};")

    def plot_curve(self):
        half_life = self.presenter.compound.half_life_hours
        outcome = self.presenter.state.outcome
        if isinstance(outcome, Remaining):
            # extend the axis so a late marker stays on screen
            t_end = max(7.0 * half_life, outcome.elapsed_hours * 1.1)
            t, pct = decay_curve(half_life, t_end_h=t_end, dt_h=t_end / 500.0)
            self.plot.plot_decay(t, pct, now_h=outcome.elapsed_hours, now_pct=outcome.percentage)
        else:
            t, pct = decay_curve(half_life)
            self.plot.plot_decay(t, pct)
