"""Freepik Icons relay - cross-origin forwarding proxy for the Freepik API.

The upstream API answers preflights but omits cross-origin headers on real
responses, so browser callers go through this relay instead.
"""

from __future__ import annotations

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from freepik_service_libs.error_handling.fastapi import (
    register_error_handlers as register_fastapi_error_handlers,
)
from freepik_service_libs.logging_utils import configure_service_logging, create_service_logger
from services.relay_service.config import settings
from services.relay_service.di import RelayProvider
from services.relay_service.middleware import (
    CorrelationIDMiddleware,
    CrossOriginHeadersMiddleware,
)
from services.relay_service.routers.health_routes import router as health_router
from services.relay_service.routers.proxy_routes import router as proxy_router

logger = create_service_logger("relay_service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_service_logging(
        settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level=settings.LOG_LEVEL,
    )

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version="1.0.0",
        description="Forwards Freepik API calls and adds cross-origin headers",
        docs_url=None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development() else None,
    )

    # Register error handlers
    register_fastapi_error_handlers(app)

    # Correlation ID first, cross-origin headers outermost
    app.add_middleware(CorrelationIDMiddleware)
    app.add_middleware(CrossOriginHeadersMiddleware, settings=settings)

    # Health probe must be registered before the catch-all proxy route
    app.include_router(health_router)
    app.include_router(proxy_router)

    # Setup Dishka DI container
    container = make_async_container(RelayProvider(), FastapiProvider())
    setup_dishka(container, app)
    app.state.di_container = container

    logger.info("Relay application created", extra={"upstream": settings.UPSTREAM_BASE_URL})
    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.relay_service.app:app",
        host=settings.HTTP_HOST,
        port=settings.HTTP_PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
