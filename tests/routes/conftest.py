"""Fixtures for route tests."""

import pytest
from fastapi.testclient import TestClient

from testgen.config.settings import Settings
from testgen.main import create_app


@pytest.fixture
def app():
    """App with no GitHub token and no LLM key configured."""
    return create_app(Settings(_env_file=None, GITHUB_TOKEN=None, GEMINI_API_KEY=None))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
