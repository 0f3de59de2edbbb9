"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from gardien.config.settings import Settings, get_settings
from gardien.di import (
    DIContainer,
    initialize_container,
    set_container,
    shutdown_container,
)
from gardien.domain.exceptions import GardienException
from gardien.infrastructure.monitoring import get_logger, setup_logging
from gardien.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    gardien_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from gardien.presentation.api.routes import decrypt, health, keys


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)
        container: Optional DI container with injected services (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = container.settings if container else get_settings()

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating Gardien application (ENV={settings.ENV})")

    set_container(container or DIContainer(settings=settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Gardien application...")
        await initialize_container()
        logger.info(f"Gardien serving program {settings.PROGRAM_ID}")

        yield

        logger.info("Shutting down Gardien application...")
        await shutdown_container()
        logger.info("Gardien application shutdown complete")

    app = FastAPI(
        title="Gardien API",
        description="Purchase-gated content key release",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    # Middleware chain (last added runs first)
    app.add_middleware(RequestIDMiddleware)

    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Exception handlers
    app.add_exception_handler(GardienException, gardien_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(decrypt.router)
    app.include_router(keys.router)
    app.include_router(health.router)

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info("Gardien application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance.

    For uvicorn: uvicorn gardien.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gardien.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
