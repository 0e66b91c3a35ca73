"""
Monitoring and Tracing Configuration Module.

This module provides optional integration with Pydantic Logfire for tracing
LoungeOS operations:
- API endpoint tracing
- Database operation monitoring
- Backup and accounting-sync events

Logfire is only configured when ``LOGFIRE_ENABLED`` is true and a token is
present. Every helper degrades to debug logging when Logfire is unavailable.
"""

import logging
import os
from typing import Any, Optional

from fastapi import FastAPI

logger = logging.getLogger(__name__)

LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "loungeos-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")


def initialize_monitoring(app: FastAPI | None = None) -> None:
    """
    Initialize Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).
    """
    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return

    if not LOGFIRE_TOKEN:
        logger.warning("Logfire is enabled but LOGFIRE_TOKEN is not set. Monitoring will not work.")
        return

    try:
        import logfire

        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )

        if LOGFIRE_TRACE_SQLALCHEMY:
            try:
                logfire.instrument_sqlalchemy()
                logger.info("Logfire: SQLAlchemy instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument SQLAlchemy: {e}")

        if LOGFIRE_TRACE_FASTAPI and app is not None:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")

        logger.info(f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}")

    except ImportError:
        logger.warning("Logfire is enabled but 'logfire' package is not installed. Install it with: pip install logfire")
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)


def _emit(message: str, **attributes: Any) -> None:
    try:
        import logfire

        logfire.info(message, **attributes)
    except Exception:
        logger.debug(f"Could not log to Logfire: {message} {attributes}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    _emit("API request completed", method=method, path=path, status_code=status_code, duration_ms=duration_ms)


def log_backup(filename: str, size: int, backup_type: str) -> None:
    """Log a completed database backup."""
    _emit("Backup created", filename=filename, size=size, backup_type=backup_type)


def log_sync(source: str, synced: int, total: int, context: Optional[dict] = None) -> None:
    """Log an accounting sync run for a source (``sales`` or ``inventory``)."""
    _emit("Accounting sync completed", source=source, synced=synced, total=total, **(context or {}))
