"""Core exceptions for the application."""

from testgen.core.exceptions.generation import (
    CodeGenerationError,
    GenerationException,
    LLMConfigurationError,
    SummaryGenerationError,
)
from testgen.core.exceptions.github import (
    GitHubException,
    GitHubNotConfiguredError,
    GitHubRequestError,
    RepositoryNotFoundError,
)
from testgen.core.exceptions.request import RequestValidationFailure

__all__ = [
    # GitHub
    "GitHubException",
    "GitHubNotConfiguredError",
    "GitHubRequestError",
    "RepositoryNotFoundError",
    # Generation
    "GenerationException",
    "LLMConfigurationError",
    "SummaryGenerationError",
    "CodeGenerationError",
    # Request
    "RequestValidationFailure",
]
