"""
Service record (billing line item) service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.core.logging import get_logger
from infiniti_cms.services.base_service import BaseService, index_by_id
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.service_repository import ServiceRepository
from infiniti_cms.db.repositories.user_repository import UserRepository
from infiniti_cms.models.currency import Currency
from infiniti_cms.models.service import Service, ServiceType
from infiniti_cms.schemas.service import (
    ServiceCreate,
    ServiceUpdate,
    ServiceResponse,
    ServiceStats,
)

logger = get_logger(__name__)


def build_service_stats(services: List[Service]) -> ServiceStats:
    """Totals for a list of services; monthly revenue counts recurring monthly services only."""
    return ServiceStats(
        total=len(services),
        recurring=sum(1 for s in services if s.is_recurring),
        monthly_revenue=float(sum(
            s.amount for s in services
            if s.is_recurring and s.billing_cycle and "monthly" in s.billing_cycle
        )),
        annual_revenue=float(sum(s.amount for s in services)),
    )


class ServiceRecordService(BaseService):
    """Service for billing service operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.service_repo = ServiceRepository(session)
        self.client_repo = ClientRepository(session)
        self.user_repo = UserRepository(session)

    async def _to_response(self, service: Service, clients=None, users=None) -> ServiceResponse:
        if clients is not None:
            client = clients.get(service.client_id)
        else:
            client = await self.client_repo.get(service.client_id)
        csm = None
        if service.assigned_csm_id:
            if users is not None:
                csm = users.get(service.assigned_csm_id)
            else:
                csm = await self.user_repo.get(service.assigned_csm_id)

        response = ServiceResponse.model_validate(service)
        response.client_name = client.name if client else "Unknown"
        response.csm_name = csm.full_name if csm else None
        return response

    async def create_service(self, service_data: ServiceCreate) -> ServiceResponse:
        """Create a new service for an existing client."""
        if not await self.client_repo.get(service_data.client_id):
            raise ValueError("Client not found")

        service_dict = service_data.model_dump()
        if service_dict.get("billing_cycle") is not None:
            service_dict["billing_cycle"] = service_dict["billing_cycle"].value
        service_dict["status"] = service_dict["status"].value
        async with self.unique_write("Service could not be created"):
            service = await self.service_repo.create(**service_dict)
        await self.session.refresh(service)
        logger.info("Service created", extra={"service_id": str(service.id), "client_id": str(service.client_id)})
        return await self._to_response(service)

    async def get_service(self, service_id: UUID) -> Optional[ServiceResponse]:
        service = await self.service_repo.get(service_id)
        if not service:
            return None
        return await self._to_response(service)

    async def list_services(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        service_type: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> tuple[List[ServiceResponse], ServiceStats]:
        """List services with client/CSM names and aggregate stats."""
        try:
            type_enum = ServiceType(service_type) if service_type and service_type != "all" else None
            currency_enum = Currency(currency) if currency and currency != "all" else None
        except ValueError:
            return [], build_service_stats([])

        services = await self.service_repo.search(
            search=search,
            client_id=client_id,
            service_type=type_enum,
            currency=currency_enum,
        )
        clients = index_by_id(await self.client_repo.search())
        users = index_by_id(await self.user_repo.list_all())
        items = [await self._to_response(s, clients, users) for s in services]
        return items, build_service_stats(services)

    async def update_service(self, service_id: UUID, service_data: ServiceUpdate) -> Optional[ServiceResponse]:
        service = await self.service_repo.get(service_id)
        if not service:
            return None

        update_dict = service_data.model_dump(exclude_unset=True)
        if update_dict.get("client_id") and not await self.client_repo.get(update_dict["client_id"]):
            raise ValueError("Client not found")
        if update_dict.get("billing_cycle") is not None:
            update_dict["billing_cycle"] = update_dict["billing_cycle"].value
        if update_dict.get("status") is not None:
            update_dict["status"] = update_dict["status"].value
        updated = await self.service_repo.update(service_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        return await self._to_response(updated)

    async def delete_service(self, service_id: UUID) -> bool:
        deleted = await self.service_repo.delete(service_id)
        await self.session.commit()
        return deleted
