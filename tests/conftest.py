"""Pytest configuration and shared fixtures."""
import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from drone_delivery.domain import Location


@pytest.fixture
def depot_location():
    """Valid location of a delivery depot."""
    return Location(latitude=45, longitude=90, altitude=100)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings variables so defaults apply."""
    for name in ("ENVIRONMENT", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
