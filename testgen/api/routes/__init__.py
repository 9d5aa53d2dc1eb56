"""API routes module."""

from testgen.api.routes.generation import router as generation_router
from testgen.api.routes.health import router as health_router
from testgen.api.routes.repos import router as repos_router

__all__ = ["generation_router", "health_router", "repos_router"]
