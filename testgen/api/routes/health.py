"""Health check endpoints for API monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["Health"])


class RootStatus(BaseModel):
    message: str
    timestamp: datetime
    github_configured: bool


class HealthStatus(BaseModel):
    """Health check response data."""

    status: str
    service: str
    version: str
    timestamp: datetime
    github_configured: bool
    ai_configured: bool
    ai_provider: str


def _github_configured(request: Request) -> bool:
    return getattr(request.app.state, "github_service", None) is not None


@router.get("/", response_model=RootStatus)
async def root(request: Request) -> RootStatus:
    return RootStatus(
        message=f"{request.app.state.settings.APP_NAME} is running!",
        timestamp=datetime.now(timezone.utc),
        github_configured=_github_configured(request),
    )


@router.get("/api/health", response_model=HealthStatus)
async def health_check(request: Request) -> HealthStatus:
    """
    Health check endpoint.

    Reports which integrations are configured. Does not call GitHub or the LLM.
    """
    config = request.app.state.settings
    generation_service = request.app.state.generation_service
    return HealthStatus(
        status="OK",
        service=config.APP_NAME,
        version=config.APP_VERSION,
        timestamp=datetime.now(timezone.utc),
        github_configured=_github_configured(request),
        ai_configured=generation_service.is_configured,
        ai_provider=generation_service.provider_label,
    )
