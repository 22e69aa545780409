"""Configure pytest environment for all tests."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Drop BINDGEN_* variables so the host environment cannot leak into configuration."""
    for key in list(os.environ):
        if key.startswith("BINDGEN_"):
            monkeypatch.delenv(key, raising=False)
