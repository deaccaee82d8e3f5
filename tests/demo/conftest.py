"""
tests.demo.conftest

Shared pytest fixtures for demo service tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from clacks.demo.main import create_app


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh app + TestClient.

    IMPORTANT:
        Used when tests need to set env vars or add routes before the
        first request.
    """

    def _make(*, raise_server_exceptions: bool = True) -> TestClient:
        app = create_app()
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
