"""
Health controller.
Coordinates health service to return health status.
"""

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.schemas.health import HealthResponse
from infiniti_cms.services.health_service import HealthService


class HealthController(BaseController):
    """Controller for health check operations."""

    def __init__(self, health_service: HealthService = None):
        self.health_service = health_service or HealthService()

    async def get_health(self) -> HealthResponse:
        return await self.health_service.get_health()
