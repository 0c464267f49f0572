"""Route Dependencies - hand the startup-built objects to request handlers.

Invariants:
    - The repository is built once (lifespan or create_app) and stored on app.state
    - Handlers never construct clients or read settings from the environment themselves

Design Decisions:
    - app.state over module globals: tests inject a repository per app instance
      (ADR: explicit dependency injection)
"""

from fastapi import Request

from object_service.config import Settings
from object_service.core.repository_protocols import ObjectRepository


def get_repository(request: Request) -> ObjectRepository:
    """FastAPI dependency for the object repository."""
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("Object repository not initialized")
    return repository


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
