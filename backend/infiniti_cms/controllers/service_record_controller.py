"""
Service record controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.services.service_record_service import ServiceRecordService
from infiniti_cms.schemas.service import ServiceCreate, ServiceUpdate, ServiceResponse, ServiceListResponse


class ServiceRecordController(BaseController):
    """Controller for billing service operations."""

    def __init__(self, session: AsyncSession):
        self.service_record_service = ServiceRecordService(session)

    async def create_service(self, service_data: ServiceCreate) -> ServiceResponse:
        return await self.service_record_service.create_service(service_data)

    async def get_service(self, service_id: UUID) -> Optional[ServiceResponse]:
        return await self.service_record_service.get_service(service_id)

    async def list_services(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        service_type: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> ServiceListResponse:
        items, stats = await self.service_record_service.list_services(
            search=search,
            client_id=client_id,
            service_type=service_type,
            currency=currency,
        )
        return ServiceListResponse(items=items, total=len(items), stats=stats)

    async def update_service(self, service_id: UUID, service_data: ServiceUpdate) -> Optional[ServiceResponse]:
        return await self.service_record_service.update_service(service_id, service_data)

    async def delete_service(self, service_id: UUID) -> bool:
        return await self.service_record_service.delete_service(service_id)
