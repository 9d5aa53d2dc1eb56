from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from testgen.api.exception_handlers import register_exception_handlers
from testgen.api.routes import generation_router, health_router, repos_router
from testgen.config.llm_config import get_api_key_name, get_llm, get_provider_label
from testgen.config.logging_config import configure_logging
from testgen.config.settings import Settings, settings
from testgen.services.generation import GenerationService
from testgen.services.github import GitHubService


configure_logging()


def build_github_service(config: Settings) -> GitHubService | None:
    """GitHub adapter, or None when no token is configured."""
    if not config.GITHUB_TOKEN:
        logger.warning("GITHUB_TOKEN not found in environment variables. GitHub endpoints will not work.")
        return None

    logger.info("GitHub API integration enabled")
    return GitHubService(
        token=config.GITHUB_TOKEN,
        base_url=config.GITHUB_API_URL,
        raw_base_url=config.GITHUB_RAW_URL,
        timeout=config.GITHUB_TIMEOUT,
    )


def build_generation_service(config: Settings) -> GenerationService:
    provider_label = get_provider_label(config)
    llm = get_llm(config)
    if llm is not None:
        logger.info(f"{provider_label} AI integration enabled")
    return GenerationService(
        llm=llm,
        provider_label=provider_label,
        api_key_name=get_api_key_name(config),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_name = app.state.settings.APP_NAME
    logger.info(f"Starting {app_name}...")
    yield
    logger.info(f"Shutting down {app_name}...")


def create_app(config: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="Browse GitHub repositories and generate AI test cases for their files.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Config and services are immutable once built; handlers read them from app.state
    app.state.settings = config
    app.state.github_service = build_github_service(config)
    app.state.generation_service = build_generation_service(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.CLIENT_ORIGIN_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(repos_router, prefix="/api")
    app.include_router(generation_router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run("testgen.main:app", host="0.0.0.0", port=settings.PORT, log_config=None)
