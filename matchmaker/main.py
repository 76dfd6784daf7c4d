"""Main FastAPI application for the matchmaking service."""

from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Any, Dict

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from matchmaker import __version__
from matchmaker.core import db_manager, get_global_settings
from matchmaker.core.logging import setup_logging
from matchmaker.core.rate_limiter import limiter
from matchmaker.features.matchmaking.router import router as matchmaking_router
from matchmaker.middleware import PerformanceMiddleware

settings = get_global_settings()
setup_logging(settings.log_level)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting up matchmaking service",
        port=settings.port,
        **asdict(settings.matchmaking_config),
    )
    yield
    logger.info("Shutting down matchmaking service")
    try:
        await db_manager.close()
    except Exception as e:
        logger.error(
            "Error while closing database connections",
            error=str(e),
            error_type=type(e).__name__,
        )


tags_metadata = [
    {
        "name": "matchmaking",
        "description": "Find a suitable opponent for a player in a given game.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

app = FastAPI(
    title="Matchmaker",
    description="""
    Matchmaking service pairing a player with the best waiting opponent.

    Opponents are filtered by a skill window that widens on each retry and
    then scored on queue time, total score difference and rank parity.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure rate limiter for FastAPI app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(PerformanceMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(matchmaking_router, prefix="/api/v1")

# Legacy route compatibility (existing clients call /matchmaker/{handle})
app.include_router(matchmaking_router)


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Can be used by monitoring tools and load balancers to check if the
    service is running.
    """
    return {
        "status": "healthy",
        "message": "Application is running",
        "version": __version__,
        "debug": settings.debug,
    }
