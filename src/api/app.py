"""
FastAPI application factory.
Creates and configures the main API application.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.config import settings
from .dependencies import limiter
from .middleware import CorrelationIdMiddleware, RequestLoggingMiddleware
from .routes import api_router
from .schemas import ServiceInfoResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan manager."""
    logger.info("Starting application...")

    if not settings.google_maps_api_key:
        logger.warning(
            "GOOGLE_MAPS_API_KEY is not set: nearby searches will fail until it is configured"
        )

    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title=settings.app_name,
        description="""
        # Nearby Places Ranking Service

        Search backend of the restaurant check-in application.

        ## Features

        - **Nearby search**: queries a swappable places provider (Google Places)
        - **Hybrid ranking**: re-ranks results by 70% proximity and 30%
          provider relevance, keeps the top 10

        ## Architecture

        - FastAPI for API
        - httpx for the places provider
        - numpy for candidate scoring
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Request context and access logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Elastic APM integration
    if settings.apm_enabled:
        from elasticapm.contrib.starlette import make_apm_client, ElasticAPM

        apm_client = make_apm_client({
            "SERVICE_NAME": settings.app_name,
            "SERVER_URL": settings.apm_server_url,
            "ENVIRONMENT": settings.environment,
            "TRANSACTION_SAMPLE_RATE": 1.0,
        })
        app.add_middleware(ElasticAPM, client=apm_client)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.debug else "An error occurred",
                "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            },
        )

    # Include API router
    app.include_router(api_router, prefix=settings.api_prefix)

    # Root endpoint
    @app.get("/", tags=["Root"], response_model=ServiceInfoResponse)
    async def root():
        return ServiceInfoResponse(
            name=settings.app_name,
            version=settings.app_version,
            docs="/docs",
            health=f"{settings.api_prefix}/health",
        )

    return app


# Application instance
app = create_app()
