"""FastAPI application factory for hosting the skill over HTTPS."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from service_skill_engine.apps.api.middleware import CorrelationIdMiddleware
from service_skill_engine.core.logging import configure_logging, get_logger
from service_skill_engine.services import ServiceContainer, runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize shared resources at startup."""
    configure_logging()
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
        if services.skill_logger is not None:
            await services.skill_logger.init()
    logger.info("service skill engine ready.")
    yield


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    return app


__all__ = ["create_app", "lifespan"]
