"""Tests for the repository routes."""

from unittest.mock import AsyncMock, Mock

from testgen.core.exceptions import GitHubRequestError
from testgen.services.github.models import RepositorySummary


def test_repos_without_token_is_503(client):
    response = client.get("/api/repos")

    assert response.status_code == 503
    assert response.json() == {
        "success": False,
        "error": "GitHub integration not configured",
        "message": "GITHUB_TOKEN environment variable is required",
    }


def test_files_without_token_is_503(client):
    response = client.get("/api/repos/acme/widgets/files")

    assert response.status_code == 503


def test_list_repositories(app, client):
    repo = RepositorySummary(
        id=1, name="widgets", full_name="acme/widgets", description="Widgets",
        html_url="https://github.com/acme/widgets", clone_url="https://github.com/acme/widgets.git",
        language="TypeScript", stargazers_count=3, forks_count=1, private=False,
        updated_at="2026-01-02T03:04:05Z",
    )
    service = Mock()
    service.list_repositories = AsyncMock(return_value=[repo])
    app.state.github_service = service

    response = client.get("/api/repos")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["total"] == 1
    assert body["repos"][0]["full_name"] == "acme/widgets"
    assert body["repos"][0]["stargazers_count"] == 3


def test_list_repositories_transport_error_is_500(app, client):
    service = Mock()
    service.list_repositories = AsyncMock(
        side_effect=GitHubRequestError("Failed to fetch repositories", "Bad credentials")
    )
    app.state.github_service = service

    response = client.get("/api/repos")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to fetch repositories",
        "message": "Failed to fetch repositories: Bad credentials",
    }


def test_list_files_end_to_end(app, client, make_github_service, widgets_routes):
    app.state.github_service = make_github_service(widgets_routes)

    response = client.get("/api/repos/acme/widgets/files")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["repository"] == {"owner": "acme", "name": "widgets", "full_name": "acme/widgets"}
    assert body["files"][0] == {
        "path": "src/app.ts",
        "type": "file",
        "language": "TypeScript",
        "size": 120,
        "sha": "b1",
        "download_url": "https://raw.githubusercontent.com/acme/widgets/main/src/app.ts",
    }


def test_unknown_repository_is_404(app, client, make_github_service):
    app.state.github_service = make_github_service({})

    response = client.get("/api/repos/acme/missing/files")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Failed to fetch repository files"
    assert "Not Found" in body["message"]


def test_blank_owner_is_400(app, client, make_github_service):
    app.state.github_service = make_github_service({})

    response = client.get("/api/repos/%20/widgets/files")

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required parameters"
