"""
Logging setup shared by the API process and the import CLI.
"""

import logging
import sys
from typing import Optional, TextIO

from infiniti_cms.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "aiohttp", "multipart")


def setup_logging(level: Optional[str] = None, stream: TextIO = sys.stdout) -> None:
    """
    Configure root logging.

    The CLI passes stderr so log lines stay out of its progress output.
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream)],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured", extra={"environment": settings.OTEL_ENVIRONMENT})


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(name)
