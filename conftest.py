import pytest
from fastapi.testclient import TestClient

import api
from config import settings
from library import Library
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # The CLI stores --output in the environment; keep every test on plain
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")

@pytest.fixture
def lib():
    return Library()

@pytest.fixture
def client(lib):
    """TestClient whose requests are served by the per-test `lib` catalog."""
    api.app.dependency_overrides[api.get_library] = lambda: lib
    test_client = TestClient(api.app, headers={"X-API-Key": settings.api_key})
    try:
        yield test_client
    finally:
        api.app.dependency_overrides.clear()
