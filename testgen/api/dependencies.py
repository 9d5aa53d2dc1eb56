"""FastAPI dependencies for dependency injection.

Services are built once in the application lifespan and kept on app.state.
A missing GitHub service means no token was configured.
"""

from fastapi import Request

from testgen.core.exceptions import GitHubNotConfiguredError
from testgen.services.generation import GenerationService
from testgen.services.github import GitHubService


def get_github_service(request: Request) -> GitHubService:
    """GitHub adapter for the request; fails fast when not configured."""
    service: GitHubService | None = getattr(request.app.state, "github_service", None)
    if service is None:
        raise GitHubNotConfiguredError()
    return service


def get_generation_service(request: Request) -> GenerationService:
    """Generation adapter for the request."""
    return request.app.state.generation_service
