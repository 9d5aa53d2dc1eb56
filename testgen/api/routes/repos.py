"""GitHub repository API routes."""

from fastapi import APIRouter, Depends
from loguru import logger

from testgen.api.dependencies import get_github_service
from testgen.api.schemas.repos import (
    CodeFileResponse,
    FileTreeResponse,
    RepositoryRef,
    RepositoryResponse,
    ReposResponse,
)
from testgen.core.exceptions import RequestValidationFailure
from testgen.services.github import GitHubService

router = APIRouter(prefix="/repos", tags=["Repositories"])


@router.get("", response_model=ReposResponse)
async def list_repositories(
    service: GitHubService = Depends(get_github_service),
) -> ReposResponse:
    """List repositories of the token owner, most recently updated first."""
    repos = await service.list_repositories()
    return ReposResponse(
        repos=[RepositoryResponse.model_validate(r) for r in repos],
        total=len(repos),
    )


@router.get("/{owner}/{repo}/files", response_model=FileTreeResponse)
async def list_repository_files(
    owner: str,
    repo: str,
    service: GitHubService = Depends(get_github_service),
) -> FileTreeResponse:
    """List the code files of a repository's default branch."""
    owner, repo = owner.strip(), repo.strip()
    if not owner or not repo:
        raise RequestValidationFailure(
            "Missing required parameters",
            "Both owner and repo parameters are required",
        )

    logger.info(f"Fetching files for {owner}/{repo}")
    files = await service.list_files(owner, repo)

    return FileTreeResponse(
        files=[CodeFileResponse.model_validate(f) for f in files],
        total=len(files),
        repository=RepositoryRef(owner=owner, name=repo, full_name=f"{owner}/{repo}"),
    )
