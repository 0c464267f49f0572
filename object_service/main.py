"""Object Service - FastAPI application factory, lifespan and process entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ObjectServiceError -> {"error": "<message>"}
    - The repository is built once per app and reached by handlers through app.state
    - Configuration and store connectivity failures stop the process before it serves

Design Decisions:
    - create_app() factory: tests build an app around an in-memory repository and
      skip the store bootstrap entirely
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - main() loads the configuration file before uvicorn starts so a bad file exits
      with status 1 and a readable message instead of a lifespan traceback
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from object_service import __version__
from object_service.api.error_handlers import register_error_handlers
from object_service.api.routes import health, objects
from object_service.config import ServiceConfig, Settings, get_settings, load_config
from object_service.core.errors import ConfigurationError, StoreError
from object_service.core.repository_protocols import ObjectRepository
from object_service.infrastructure.database import (
    MongoCollectionManager, MongoObjectRepository,
)
from object_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle: connect to the store unless a repository was injected."""
    if app.state.repository is not None:
        yield
        return

    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    try:
        config = app.state.config or load_config(settings.config_path)
    except ConfigurationError as e:
        logger.critical(e.message, extra={"error_code": e.code})
        raise

    manager = MongoCollectionManager(config.mongo)
    try:
        await manager.connect()
    except StoreError as e:
        logger.critical(
            f"unable to connect to MongoDB: {e.detail}",
            extra={"error_code": e.code, "operation": e.operation},
        )
        manager.close()
        raise

    app.state.repository = MongoObjectRepository(manager.collection)
    logger.info("Object Service started")
    try:
        yield
    finally:
        logger.info("Object Service shutting down")
        app.state.repository = None
        manager.close()


def create_app(
    settings: Settings | None = None,
    config: ServiceConfig | None = None,
    repository: ObjectRepository | None = None,
) -> FastAPI:
    """Build the ASGI app. A given repository bypasses the store bootstrap."""
    app = FastAPI(title="Object Service", version=__version__, lifespan=lifespan)
    app.state.settings = settings or get_settings()
    app.state.config = config
    app.state.repository = repository

    register_error_handlers(app)

    # Routes - explicit registration
    app.include_router(health.router)
    app.include_router(objects.router)
    return app


app = create_app()


def main() -> None:
    """Console entry point: load settings and configuration, then serve."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        config = load_config(settings.config_path)
    except ConfigurationError as e:
        logger.critical(e.message, extra={"error_code": e.code})
        raise SystemExit(1) from e

    logger.info(f"Server listening on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings, config=config),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
