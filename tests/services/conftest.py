# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from gridcollage.services.api.app import create_app


@pytest.fixture()
def api_app(cfg):
    """A fresh app per test; `cfg` points settings at the test's tmp dirs first."""
    app = create_app()
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def api_client(api_app):
    with TestClient(api_app) as client:
        yield client
