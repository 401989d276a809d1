"""
Agreement controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.services.agreement_service import AgreementService
from infiniti_cms.schemas.agreement import (
    AgreementCreate,
    AgreementUpdate,
    AgreementResponse,
    AgreementListResponse,
)


class AgreementController(BaseController):
    """Controller for agreement operations."""

    def __init__(self, session: AsyncSession):
        self.agreement_service = AgreementService(session)

    async def create_agreement(self, agreement_data: AgreementCreate) -> AgreementResponse:
        return await self.agreement_service.create_agreement(agreement_data)

    async def get_agreement(self, agreement_id: UUID) -> Optional[AgreementResponse]:
        return await self.agreement_service.get_agreement(agreement_id)

    async def list_agreements(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
    ) -> AgreementListResponse:
        items, stats = await self.agreement_service.list_agreements(
            search=search,
            client_id=client_id,
            status=status,
        )
        return AgreementListResponse(items=items, total=len(items), stats=stats)

    async def update_agreement(self, agreement_id: UUID, agreement_data: AgreementUpdate) -> Optional[AgreementResponse]:
        return await self.agreement_service.update_agreement(agreement_id, agreement_data)

    async def delete_agreement(self, agreement_id: UUID) -> bool:
        return await self.agreement_service.delete_agreement(agreement_id)
