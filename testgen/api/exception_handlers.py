"""Centralized exception handlers for FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from testgen.api.schemas.common import ErrorResponse
from testgen.core.exceptions import (
    GenerationException,
    GitHubException,
    GitHubNotConfiguredError,
    LLMConfigurationError,
    RepositoryNotFoundError,
    RequestValidationFailure,
)


def _error_response(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    response = ErrorResponse.fail(error=error, message=message)
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json"),
    )


async def github_exception_handler(
    request: Request, exc: GitHubException
) -> JSONResponse:
    """Handle GitHub-related exceptions."""
    if isinstance(exc, GitHubNotConfiguredError):
        logger.warning(f"GitHub request rejected: {exc.message}")
        status_code = 503
    elif isinstance(exc, RepositoryNotFoundError):
        logger.error(f"GitHub error: {exc.message}")
        status_code = 404
    else:
        logger.error(f"GitHub error: {exc.message}")
        status_code = 500

    return _error_response(status_code, exc.error, exc.message)


async def generation_exception_handler(
    request: Request, exc: GenerationException
) -> JSONResponse:
    """Handle AI generation exceptions."""
    if isinstance(exc, LLMConfigurationError):
        logger.error(f"Generation rejected: {exc.message}")
    else:
        logger.error(f"Generation error: {exc.message}")

    return _error_response(500, exc.error, exc.message)


async def request_failure_handler(
    request: Request, exc: RequestValidationFailure
) -> JSONResponse:
    """Handle request shape errors raised by route handlers."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.message}")
    return _error_response(400, exc.error, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report pydantic body validation errors as 400 instead of 422."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    message = "; ".join(problems) or "Request body is invalid"

    logger.warning(f"Invalid request to {request.url.path}: {message}")
    return _error_response(400, "Invalid request format", message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap routing errors (unknown path, wrong method) in the error body."""
    if exc.status_code == 404:
        return _error_response(404, "Route not found", f"Path {request.url.path} not found")
    return _error_response(exc.status_code, str(exc.detail))


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {str(exc)}")
    return _error_response(500, "Something went wrong!", str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(GitHubException, github_exception_handler)
    app.add_exception_handler(GenerationException, generation_exception_handler)
    app.add_exception_handler(RequestValidationFailure, request_failure_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
