"""Fixtures for tests."""

import pytest
from fastapi.testclient import TestClient

from hybrid_layouts.server import app


@pytest.fixture
def client():
    """Test client with the lifespan run, so the layout store is injected."""
    with TestClient(app) as test_client:
        yield test_client
