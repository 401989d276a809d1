"""
Notification service: per-user inbox plus the urgent-case feed.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.services.base_service import BaseService, index_by_id
from infiniti_cms.db.repositories.agreement_repository import AgreementRepository
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.invoice_repository import InvoiceRepository
from infiniti_cms.db.repositories.notification_repository import NotificationRepository
from infiniti_cms.models.invoice import InvoiceStatus
from infiniti_cms.schemas.notification import NotificationResponse, UrgentCase

SEVERITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}


def overdue_severity(days_overdue: int) -> Optional[str]:
    """Severity of an overdue invoice, or None if it is not yet urgent."""
    if days_overdue >= 45:
        return "critical"
    if days_overdue >= 30:
        return "high"
    if days_overdue >= 15:
        return "medium"
    return None


def expiry_severity(days_until_expiry: int) -> Optional[str]:
    """Severity of an agreement expiring in 1..60 days, or None otherwise."""
    if days_until_expiry <= 0 or days_until_expiry > 60:
        return None
    if days_until_expiry <= 14:
        return "high"
    if days_until_expiry <= 30:
        return "medium"
    return "low"


class NotificationService(BaseService):
    """Service for notification operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.notification_repo = NotificationRepository(session)
        self.invoice_repo = InvoiceRepository(session)
        self.agreement_repo = AgreementRepository(session)
        self.client_repo = ClientRepository(session)

    async def list_notifications(self, user_id: UUID, unread_only: bool = False) -> tuple[List[NotificationResponse], int]:
        """Return the user's notifications and their unread count."""
        notifications = await self.notification_repo.list_for_user(user_id, unread_only=unread_only)
        unread = sum(1 for n in notifications if not n.is_read)
        return [NotificationResponse.model_validate(n) for n in notifications], unread

    async def mark_read(self, notification_id: UUID, user_id: UUID) -> Optional[NotificationResponse]:
        notification = await self.notification_repo.get(notification_id)
        if not notification or notification.user_id != user_id:
            return None
        updated = await self.notification_repo.mark_read(notification_id)
        await self.session.commit()
        return NotificationResponse.model_validate(updated)

    async def mark_all_read(self, user_id: UUID) -> None:
        await self.notification_repo.mark_all_read(user_id)
        await self.session.commit()

    async def get_urgent_cases(self, today: Optional[date] = None) -> List[UrgentCase]:
        """
        Overdue invoices (15+ days past due) and agreements expiring within
        60 days, most severe first.
        """
        today = today or date.today()
        clients = index_by_id(await self.client_repo.search())
        cases: List[UrgentCase] = []

        for invoice in await self.invoice_repo.search(status=InvoiceStatus.OVERDUE):
            days_overdue = (today - invoice.due_date).days
            severity = overdue_severity(days_overdue)
            if severity is None:
                continue
            client = clients.get(invoice.client_id)
            client_name = client.name if client else "Unknown"
            cases.append(UrgentCase(
                id=f"invoice-{invoice.id}",
                type="overdue_payment",
                severity=severity,
                title=f"Invoice {invoice.invoice_number} Overdue",
                message=(
                    f"{client_name} - {days_overdue} days overdue - "
                    f"{invoice.currency.value} {invoice.amount}"
                ),
                client_id=invoice.client_id,
                client_name=client_name,
                related_id=invoice.id,
                days=days_overdue,
                amount=float(invoice.amount),
                currency=invoice.currency.value,
                due_date=invoice.due_date,
            ))

        for agreement in await self.agreement_repo.search():
            days_left = (agreement.end_date - today).days
            severity = expiry_severity(days_left)
            if severity is None:
                continue
            client = clients.get(agreement.client_id)
            client_name = client.name if client else "Unknown"
            cases.append(UrgentCase(
                id=f"agreement-{agreement.id}",
                type="agreement_renewal",
                severity=severity,
                title="Agreement Renewal Due Soon",
                message=f"{client_name} - {agreement.agreement_name} expires in {days_left} days",
                client_id=agreement.client_id,
                client_name=client_name,
                related_id=agreement.id,
                days=days_left,
                due_date=agreement.end_date,
            ))

        cases.sort(key=lambda case: SEVERITY_ORDER[case.severity])
        return cases
