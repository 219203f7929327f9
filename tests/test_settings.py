from PySide6.QtCore import QSettings

from decayviz.config import PREF_LAST_DOSE_TIME
from decayviz.settings import QtSettingsStore


def ini_settings(path):
    return QSettings(str(path), QSettings.IniFormat)


def test_missing_key_reads_none(tmp_path):
    store = QtSettingsStore(ini_settings(tmp_path / "tracker.ini"))
    assert store.get(PREF_LAST_DOSE_TIME) is None


def test_value_survives_a_new_store(tmp_path):
    """A fresh QSettings on the same file sees the saved string (i.e. across restarts)."""
    path = tmp_path / "tracker.ini"
    QtSettingsStore(ini_settings(path)).set(PREF_LAST_DOSE_TIME, "2024-05-01 08:00")

    reopened = QtSettingsStore(ini_settings(path))
    assert reopened.get(PREF_LAST_DOSE_TIME) == "2024-05-01 08:00"


def test_overwrite_keeps_only_latest(tmp_path):
    store = QtSettingsStore(ini_settings(tmp_path / "tracker.ini"))
    store.set(PREF_LAST_DOSE_TIME, "2024-05-01 08:00")
    store.set(PREF_LAST_DOSE_TIME, "2024-05-02 09:15")
    assert store.get(PREF_LAST_DOSE_TIME) == "2024-05-02 09:15"
