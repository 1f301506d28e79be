# tests/conftest.py
import pytest


@pytest.fixture
def scripted_source():
    """Builds a random source that replays fixed uniform values in order."""
    def _make(values):
        values_iter = iter(values)
        return lambda: next(values_iter)
    return _make
