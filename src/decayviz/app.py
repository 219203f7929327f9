# src/decayviz/app.py
import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from .presenter import TrackerPresenter
from .settings import QtSettingsStore
from .ui.tracker_window import TrackerWindow

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    configure_logging()
    app = QApplication(sys.argv)

    presenter = TrackerPresenter(QtSettingsStore())
    window = TrackerWindow(presenter)
    window.show()
    logger.info("started, last dose field %r", presenter.state.dose_text)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
