"""Pytest configuration for tests.

Sets up Python path, a predictable environment and shared fixtures.
"""

import os
import sys
from pathlib import Path

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Settings are read at import time; pin the values tests rely on
os.environ["ENV"] = "test"
os.environ["LLM_PROVIDER"] = "gemini"
os.environ.pop("GITHUB_TOKEN", None)
os.environ.pop("GEMINI_API_KEY", None)
os.environ["LOG_TO_FILE"] = "false"

import httpx  # noqa: E402
import pytest  # noqa: E402
from unittest.mock import AsyncMock, Mock  # noqa: E402

from langchain_core.messages import AIMessage  # noqa: E402

from testgen.config.logging_config import configure_logging  # noqa: E402
from testgen.services.github import GitHubService  # noqa: E402

# Before anything imports testgen.main, whose own call is then a no-op
configure_logging(log_to_file=False)


@pytest.fixture
def make_llm():
    """Build a fake chat model whose ainvoke returns the given text."""

    def _make(content="", side_effect=None):
        llm = Mock()
        if side_effect is not None:
            llm.ainvoke = AsyncMock(side_effect=side_effect)
        else:
            llm.ainvoke = AsyncMock(return_value=AIMessage(content=content))
        return llm

    return _make


@pytest.fixture
def make_github_service():
    """Build a GitHubService backed by an httpx MockTransport.

    routes maps a request path to (status, json body). Unknown paths answer
    404 with GitHub's "Not Found" body. Every request seen is recorded on
    the returned service as `seen_requests`.
    """

    def _make(routes: dict) -> GitHubService:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path in routes:
                status_code, body = routes[request.url.path]
                return httpx.Response(status_code, json=body)
            return httpx.Response(404, json={"message": "Not Found"})

        service = GitHubService(token="test-token", transport=httpx.MockTransport(handler))
        service.seen_requests = seen
        return service

    return _make


@pytest.fixture
def widgets_routes():
    """GitHub responses for an acme/widgets repository."""
    return {
        "/repos/acme/widgets": (200, {"name": "widgets", "default_branch": "main"}),
        "/repos/acme/widgets/git/trees/main": (200, {
            "sha": "root",
            "truncated": False,
            "tree": [
                {"path": "src", "type": "tree", "sha": "t1", "mode": "040000"},
                {"path": "src/app.ts", "type": "blob", "sha": "b1", "size": 120, "mode": "100644"},
            ],
        }),
    }
