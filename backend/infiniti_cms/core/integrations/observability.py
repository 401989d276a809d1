"""
Observability hooks.
Traces and metrics exporters are not wired yet; exceptions are logged with request context.
"""

from fastapi import Request
import logging

from infiniti_cms.core.config import settings

logger = logging.getLogger(__name__)


def setup_observability() -> None:
    """Initialize observability for the API process."""
    logger.info(
        "Setting up observability",
        extra={
            "otel_endpoint": settings.OTEL_EXPORTER_OTLP_ENDPOINT,
            "service_name": settings.OTEL_SERVICE_NAME,
        },
    )


def record_exception(exc: Exception, request: Request) -> None:
    """
    Record an exception in the observability backend.

    Args:
        exc: The exception that occurred
        request: The FastAPI request object
    """
    logger.error(
        f"Exception recorded: {type(exc).__name__}",
        extra={
            "exception_message": str(exc),
            "path": request.url.path,
            "method": request.method,
            "service_name": settings.OTEL_SERVICE_NAME,
        },
    )
