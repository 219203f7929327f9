import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from datetime import datetime

import pytest
from PySide6.QtWidgets import QApplication

from decayviz.config import PREF_LAST_DOSE_TIME, SETTINGS_APPLICATION, WINDOW_TITLE
from decayviz.presenter import TrackerPresenter
from decayviz.ui.tracker_window import TrackerWindow

NOW = datetime(2024, 5, 4, 2, 0)


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(qapp, store):
    w = TrackerWindow(TrackerPresenter(store, clock=lambda: NOW))
    yield w
    w.close()


def test_initial_labels(qapp, store_factory):
    w = TrackerWindow(TrackerPresenter(store_factory({PREF_LAST_DOSE_TIME: "2024-05-01 08:00"}),
                                       clock=lambda: NOW))
    assert w.windowTitle() == WINDOW_TITLE
    assert w.dose_field.text() == "2024-05-01 08:00"
    assert w.result_label.text() == "Result: - %"
    w.close()


def test_enter_in_field_calculates(window, store):
    """Return in the line edit runs the calculation and fills the status bar."""
    window.dose_field.setText("2024-05-01 08:00")
    window.dose_field.returnPressed.emit()
    assert window.result_label.text() == "Result: 50.00 % remaining."
    assert window.status.currentMessage().startswith("66.0 h since dose | below 1 % in 372.5 h")
    assert store.values[PREF_LAST_DOSE_TIME] == "2024-05-01 08:00"
    assert window.plot.marker is not None


def test_set_to_now_overwrites_field(window):
    window.dose_field.setText("garbage")
    window.on_set_to_now()
    assert window.dose_field.text() == "2024-05-04 02:00"


def test_invalid_input_clears_status_bar(window):
    window.dose_field.setText("2024-05-01 08:00")
    window.on_calculate()
    window.dose_field.setText("not-a-date")
    window.on_calculate()
    assert window.result_label.text() == "Result: Invalid date/time format. Use yyyy-MM-dd HH:mm"
    assert window.status.currentMessage() == ""
    assert window.plot.marker is None


def test_settings_scope_independent_of_title():
    assert SETTINGS_APPLICATION != WINDOW_TITLE
