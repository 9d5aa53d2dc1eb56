"""GitHub API adapter for listing repositories and their code files."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from testgen.core.exceptions import GitHubRequestError, RepositoryNotFoundError
from testgen.services.github.classifier import DEFAULT_RAW_BASE_URL, classify_tree
from testgen.services.github.models import CodeFileRecord, RepositorySummary, TreeEntry

NOT_FOUND_MARKER = "Not Found"
DEFAULT_BRANCH = "main"

# Raised by a 2xx body that is not JSON or lacks the fields we read
MALFORMED_RESPONSE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class GitHubService:
    """Thin client over the GitHub REST API.

    Holds only the token and client configuration; every call opens its own
    httpx.AsyncClient. Nothing is retried.
    """

    BASE_URL = "https://api.github.com"
    USER_AGENT = "TestCaseGenerator/1.0.0"

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        raw_base_url: str = DEFAULT_RAW_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            token: GitHub personal access token
            base_url: API root, defaults to https://api.github.com
            raw_base_url: Root used to build raw download URLs
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._token = token
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.raw_base_url = raw_base_url
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.USER_AGENT,
        }

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a JSON document; raises httpx errors to the caller."""
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(path, params=params)
            response.raise_for_status()
            return response.json()

    @staticmethod
    def _error_reason(exc: Exception) -> str:
        """Prefer GitHub's own error message over the httpx description."""
        if isinstance(exc, httpx.HTTPStatusError):
            try:
                body = exc.response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("message"):
                return str(body["message"])
        if not isinstance(exc, httpx.HTTPError):
            return f"Unexpected response from GitHub ({exc.__class__.__name__}: {exc})"
        return str(exc) or exc.__class__.__name__

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def list_repositories(self) -> list[RepositorySummary]:
        """Repositories of the authenticated user, most recently updated first."""
        try:
            data = await self._get(
                "/user/repos",
                params={"per_page": 100, "sort": "updated", "type": "all"},
            )
            repos = [RepositorySummary.from_api(item) for item in data]
        except (httpx.HTTPError, *MALFORMED_RESPONSE_ERRORS) as e:
            reason = self._error_reason(e)
            logger.error(f"Failed to fetch repositories: {reason}")
            raise GitHubRequestError("Failed to fetch repositories", reason) from e

        logger.debug(f"Fetched {len(repos)} repositories")
        return repos

    async def get_default_branch(self, owner: str, repo: str) -> str:
        data = await self._get(f"/repos/{owner}/{repo}")
        return data.get("default_branch") or DEFAULT_BRANCH

    async def list_files(self, owner: str, repo: str) -> list[CodeFileRecord]:
        """Code files of a repository's default branch.

        Raises:
            RepositoryNotFoundError: GitHub reports the repository as not found
            GitHubRequestError: Any other transport or API failure, including
                a body that is not the expected JSON
        """
        operation = "Failed to fetch repository files"
        try:
            branch = await self.get_default_branch(owner, repo)
            tree = await self._get(
                f"/repos/{owner}/{repo}/git/trees/{branch}",
                params={"recursive": 1},
            )
            truncated = bool(tree.get("truncated"))
            entries = [TreeEntry.from_api(item) for item in tree.get("tree", [])]
        except (httpx.HTTPError, *MALFORMED_RESPONSE_ERRORS) as e:
            reason = self._error_reason(e)
            logger.error(f"Error fetching files for {owner}/{repo}: {reason}")
            if isinstance(e, httpx.HTTPError) and NOT_FOUND_MARKER in reason:
                raise RepositoryNotFoundError(operation, reason, owner, repo) from e
            raise GitHubRequestError(operation, reason) from e

        if truncated:
            logger.warning(f"Tree for {owner}/{repo}@{branch} was truncated by GitHub")

        files = classify_tree(entries, owner, repo, branch, self.raw_base_url)
        logger.info(
            f"Classified {len(files)} code file(s) out of {len(entries)} tree entries "
            f"for {owner}/{repo}@{branch}"
        )
        return files
