"""
Health service.
Provides health check functionality.
"""

import time
from sqlalchemy.exc import SQLAlchemyError

from infiniti_cms.core.config import settings
from infiniti_cms.services.base_service import BaseService
from infiniti_cms.schemas.health import HealthResponse
from infiniti_cms.db.session import get_session_maker
from infiniti_cms.db.repositories.health_repository import HealthRepository


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, service name and version, uptime and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}

        try:
            async with get_session_maker()() as session:
                repo = HealthRepository(session=session)
                db_status = await repo.check_database()
                checks["database"] = "ok" if db_status else "error"
        except (SQLAlchemyError, OSError) as e:
            checks["database"] = f"error: {str(e)}"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            service=settings.PROJECT_NAME,
            version=settings.VERSION,
            uptime=uptime_str,
            checks=checks,
        )
