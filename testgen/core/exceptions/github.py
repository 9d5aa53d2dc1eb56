"""GitHub integration exceptions."""


class GitHubException(Exception):
    """Base exception for GitHub-related errors."""

    error = "GitHub request failed"

    def __init__(self, message: str = "A GitHub error occurred"):
        self.message = message
        super().__init__(self.message)


class GitHubNotConfiguredError(GitHubException):
    """Raised when no GitHub token is configured."""

    error = "GitHub integration not configured"

    def __init__(self, message: str = "GITHUB_TOKEN environment variable is required"):
        super().__init__(message)


class GitHubRequestError(GitHubException):
    """Raised when a GitHub API call fails (transport or API error)."""

    def __init__(self, operation: str, reason: str):
        self.error = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")


class RepositoryNotFoundError(GitHubRequestError):
    """Raised when GitHub reports the repository as not found."""

    def __init__(self, operation: str, reason: str, owner: str, repo: str):
        self.owner = owner
        self.repo = repo
        super().__init__(operation, reason)
