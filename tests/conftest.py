import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from destinations import app_factory  # noqa: E402


@pytest.fixture
def factory():
    return app_factory


@pytest.fixture
def recording_factory():
    """Factory that records every call and never resolves anything."""

    calls = []

    def _factory(path, full_path, parameters):
        calls.append((path, tuple(full_path), dict(parameters)))
        return None

    _factory.calls = calls
    return _factory
