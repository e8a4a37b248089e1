"""FastAPI application factory and entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI

from launchpilot import __version__
from launchpilot.api.middleware import CorrelationIdMiddleware, add_exception_handlers
from launchpilot.api.routes import blueprints, catalog, system
from launchpilot.composer import utcnow
from launchpilot.config import Settings
from launchpilot.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from launchpilot.protocols import ClockPort

logger = structlog.get_logger()

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    configure_logging(log_level=settings.log_level, log_format=settings.log_format)
    logger.info("LaunchPilot API started", host=settings.api_host, port=settings.api_port)
    yield
    logger.info("LaunchPilot API shut down")


def create_app(settings: Settings | None = None, clock: ClockPort = utcnow) -> FastAPI:
    """Application factory."""
    app = FastAPI(
        title="LaunchPilot",
        description="Landing page blueprints and static HTML export from a product brief",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings()
    app.state.clock = clock

    app.add_middleware(CorrelationIdMiddleware)
    add_exception_handlers(app)

    # Prometheus metrics endpoint
    from prometheus_client import make_asgi_app

    app.mount("/metrics", make_asgi_app())

    app.include_router(system.router, prefix=API_PREFIX)
    app.include_router(catalog.router, prefix=API_PREFIX)
    app.include_router(blueprints.router, prefix=API_PREFIX)

    return app


def main() -> None:
    """Entry point for `launchpilot-api` command."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "launchpilot.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
