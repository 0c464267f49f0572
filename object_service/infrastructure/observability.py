"""Structured Logging - JSON formatter and setup for production observability.

Invariants:
    - Every line carries timestamp, level, logger, service name and message
    - Request context (method, path, status_code, object_id) and store context
      (operation, collection, error_code) are surfaced when a call passes them as extra
    - JSON format in production, human-readable in development
    - setup_logging replaces root handlers, so calling it twice never duplicates output

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called by the entry point and again by the lifespan; both are safe
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "object-service"

# request context first, then store context
REQUEST_FIELDS = ("method", "path", "status_code", "object_id")
STORE_FIELDS = ("operation", "collection", "error_code")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, request and store context included."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "message": record.getMessage(),
        }
        for key in REQUEST_FIELDS + STORE_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging for the service."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
