"""
Agreement service with business logic.
Creating an agreement notifies the client's CSM and every finance/admin user.
"""

from datetime import date, timedelta
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.core.logging import get_logger
from infiniti_cms.services.base_service import BaseService, index_by_id
from infiniti_cms.db.repositories.agreement_repository import AgreementRepository
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.notification_repository import NotificationRepository
from infiniti_cms.db.repositories.service_repository import ServiceRepository
from infiniti_cms.db.repositories.user_repository import UserRepository
from infiniti_cms.models.agreement import Agreement, AgreementStatus
from infiniti_cms.models.client import Client
from infiniti_cms.models.notification import NotificationType
from infiniti_cms.models.user import UserRole
from infiniti_cms.schemas.agreement import (
    AgreementCreate,
    AgreementUpdate,
    AgreementResponse,
    AgreementStats,
)

logger = get_logger(__name__)

RENEWAL_WINDOW_DAYS = 90


def build_agreement_stats(agreements: List[Agreement], today: date) -> AgreementStats:
    window_end = today + timedelta(days=RENEWAL_WINDOW_DAYS)
    return AgreementStats(
        total=len(agreements),
        expiring_soon=sum(1 for a in agreements if today < a.end_date <= window_end),
        total_value=float(sum(a.value or 0 for a in agreements)),
    )


def _format_value(agreement: Agreement) -> str:
    currency = agreement.currency.value if agreement.currency else ""
    return f"{currency} {agreement.value}" if agreement.value is not None else f"{currency} N/A"


class AgreementService(BaseService):
    """Service for agreement operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.agreement_repo = AgreementRepository(session)
        self.client_repo = ClientRepository(session)
        self.service_repo = ServiceRepository(session)
        self.user_repo = UserRepository(session)
        self.notification_repo = NotificationRepository(session)

    @staticmethod
    def _to_response(agreement: Agreement, client: Optional[Client]) -> AgreementResponse:
        response = AgreementResponse.model_validate(agreement)
        response.client_name = client.name if client else "Unknown"
        return response

    async def _notify_created(self, agreement: Agreement, client: Client) -> int:
        """Queue creation notices. Returns the number of notifications created."""
        created = 0
        if client.assigned_csm_id:
            await self.notification_repo.create(
                user_id=client.assigned_csm_id,
                client_id=agreement.client_id,
                type=NotificationType.AGREEMENT_RENEWAL,
                title="New Agreement Created",
                message=(
                    f'New agreement "{agreement.agreement_name}" has been created for {client.name}. '
                    f"Contract expires on {agreement.end_date.isoformat()}."
                ),
                related_entity_id=str(agreement.id),
            )
            created += 1

        for user in await self.user_repo.list_by_roles([UserRole.FINANCE, UserRole.ADMIN]):
            await self.notification_repo.create(
                user_id=user.id,
                client_id=agreement.client_id,
                type=NotificationType.AGREEMENT_RENEWAL,
                title="New Agreement Created",
                message=(
                    f'New agreement "{agreement.agreement_name}" created for {client.name}. '
                    f"Total value: {_format_value(agreement)}. "
                    f"Payment terms: {agreement.payment_terms or 'N/A'}."
                ),
                related_entity_id=str(agreement.id),
            )
            created += 1
        return created

    async def create_agreement(self, agreement_data: AgreementCreate) -> AgreementResponse:
        """Create a new agreement and notify the people who follow it."""
        client = await self.client_repo.get(agreement_data.client_id)
        if not client:
            raise ValueError("Client not found")
        if agreement_data.service_id and not await self.service_repo.get(agreement_data.service_id):
            raise ValueError("Service not found")

        async with self.unique_write("Agreement could not be created"):
            agreement = await self.agreement_repo.create(**agreement_data.model_dump())
            notified = await self._notify_created(agreement, client)
        await self.session.refresh(agreement)
        logger.info(
            "Agreement created",
            extra={"agreement_id": str(agreement.id), "client_id": str(client.id), "notified": notified},
        )
        return self._to_response(agreement, client)

    async def get_agreement(self, agreement_id: UUID) -> Optional[AgreementResponse]:
        agreement = await self.agreement_repo.get(agreement_id)
        if not agreement:
            return None
        return self._to_response(agreement, await self.client_repo.get(agreement.client_id))

    async def list_agreements(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
        today: Optional[date] = None,
    ) -> tuple[List[AgreementResponse], AgreementStats]:
        """List agreements with client names and renewal stats."""
        today = today or date.today()
        try:
            status_enum = AgreementStatus(status) if status and status != "all" else None
        except ValueError:
            return [], build_agreement_stats([], today)

        agreements = await self.agreement_repo.search(search=search, client_id=client_id, status=status_enum)
        clients = index_by_id(await self.client_repo.search())
        items = [self._to_response(a, clients.get(a.client_id)) for a in agreements]
        return items, build_agreement_stats(agreements, today)

    async def update_agreement(
        self,
        agreement_id: UUID,
        agreement_data: AgreementUpdate,
    ) -> Optional[AgreementResponse]:
        agreement = await self.agreement_repo.get(agreement_id)
        if not agreement:
            return None

        update_dict = agreement_data.model_dump(exclude_unset=True)
        start = update_dict.get("start_date", agreement.start_date)
        end = update_dict.get("end_date", agreement.end_date)
        if end <= start:
            raise ValueError("End date must be after start date")

        updated = await self.agreement_repo.update(agreement_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        return self._to_response(updated, await self.client_repo.get(updated.client_id))

    async def delete_agreement(self, agreement_id: UUID) -> bool:
        deleted = await self.agreement_repo.delete(agreement_id)
        await self.session.commit()
        return deleted
