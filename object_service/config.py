"""Application Configuration - environment settings plus the JSON store configuration file.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - Store coordinates (host, port, database, collection) come only from the JSON file,
      never from environment variables
    - load_config() either returns a fully populated ServiceConfig or raises ConfigurationError

Design Decisions:
    - pydantic-settings for process knobs: validation, type coercion, .env file support
      (ADR: developer UX)
    - Fail-fast config file: no retry, no defaults for store coordinates (ADR: a service
      pointed at the wrong database is worse than one that refuses to start)
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from object_service.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Process settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Store configuration file
    config_path: str = "config.json"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000

    # Status served for undecodable request bodies
    decode_error_status: int = 500

    @field_validator("decode_error_status")
    @classmethod
    def check_error_status(cls, v: int) -> int:
        if not 400 <= v <= 599:
            raise ValueError("decode_error_status must be a 4xx or 5xx status")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


class MongoConfig(BaseModel):
    """Coordinates of the document collection."""
    host: str
    port: int
    database: str
    collection: str

    @property
    def uri(self) -> str:
        return f"mongodb://{self.host}:{self.port}"


class ServiceConfig(BaseModel):
    """Shape of the JSON configuration file."""
    mongo: MongoConfig


def load_config(path: str | Path) -> ServiceConfig:
    """Read and validate the configuration file at path."""
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise ConfigurationError(
            f"unable to open configuration file: {e}", path=str(path),
        ) from e

    try:
        config = ServiceConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"unable to parse configuration: {e}", path=str(path),
        ) from e

    logger.info(
        f"Loaded configuration from {path} "
        f"(database={config.mongo.database}, collection={config.mongo.collection})",
    )
    return config
