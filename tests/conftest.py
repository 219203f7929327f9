import pytest


class DictStore:
    """In-memory stand-in for the QSettings-backed store; records every write."""

    def __init__(self, initial=None):
        self.values = dict(initial or {})
        self.writes = []

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value
        self.writes.append((key, value))


@pytest.fixture
def store():
    return DictStore()


@pytest.fixture
def store_factory():
    """Build a DictStore pre-filled with saved values."""
    return DictStore
