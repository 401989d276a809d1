"""
Dashboard aggregates.
"""

import calendar
from datetime import date, timedelta
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.services.base_service import BaseService, index_by_id, round_half_up
from infiniti_cms.db.repositories.agreement_repository import AgreementRepository
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.invoice_repository import InvoiceRepository
from infiniti_cms.models.agreement import AgreementStatus
from infiniti_cms.models.invoice import InvoiceStatus
from infiniti_cms.schemas.dashboard import (
    DashboardStats,
    RevenueTrendPoint,
    DistributionSlice,
    UpcomingRenewal,
)

FORECAST_MULTIPLIER = 1.15
AT_RISK_RATIO = 0.08
TREND_MONTHS = 6
RENEWAL_WINDOW_DAYS = 90


def industry_label(industry: str) -> str:
    """'travel_agency' -> 'Travel Agency'."""
    return " ".join(word[:1].upper() + word[1:] for word in industry.replace("_", " ").split(" "))


class DashboardService(BaseService):
    """Service for dashboard figures, optionally scoped to a single client."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.agreement_repo = AgreementRepository(session)
        self.invoice_repo = InvoiceRepository(session)

    async def _clients(self, client_id: Optional[UUID]):
        if client_id:
            client = await self.client_repo.get(client_id)
            return [client] if client else []
        return await self.client_repo.search()

    async def get_stats(self, client_id: Optional[UUID] = None, today: Optional[date] = None) -> DashboardStats:
        today = today or date.today()
        clients = await self._clients(client_id)
        active_agreements = await self.agreement_repo.search(client_id=client_id, status=AgreementStatus.ACTIVE)
        invoices = await self.invoice_repo.search(client_id=client_id)

        month_start = today.replace(day=1)
        monthly_revenue = sum(
            i.amount for i in invoices
            if i.issue_date >= month_start and i.status == InvoiceStatus.PAID
        )
        outstanding = sum(
            i.amount for i in invoices
            if i.status in (InvoiceStatus.PENDING, InvoiceStatus.OVERDUE)
        )

        return DashboardStats(
            total_clients=len(clients),
            active_agreements=len(active_agreements),
            monthly_revenue=round_half_up(monthly_revenue),
            outstanding=round_half_up(outstanding),
            forecasted_revenue=round_half_up(float(monthly_revenue) * FORECAST_MULTIPLIER),
            at_risk_clients=int(len(clients) * AT_RISK_RATIO),
        )

    async def get_revenue_trends(self, client_id: Optional[UUID] = None, today: Optional[date] = None) -> List[RevenueTrendPoint]:
        """Paid revenue per month for the last six months, oldest first."""
        today = today or date.today()
        current_index = today.year * 12 + today.month - 1
        revenue = {current_index - offset: 0 for offset in range(TREND_MONTHS - 1, -1, -1)}

        for invoice in await self.invoice_repo.search(client_id=client_id, status=InvoiceStatus.PAID):
            if not invoice.paid_date:
                continue
            index = invoice.paid_date.year * 12 + invoice.paid_date.month - 1
            if index in revenue:
                revenue[index] += invoice.amount

        return [
            RevenueTrendPoint(month=calendar.month_abbr[index % 12 + 1], revenue=round_half_up(amount))
            for index, amount in revenue.items()
        ]

    async def get_client_distribution(self, client_id: Optional[UUID] = None) -> List[DistributionSlice]:
        counts = {}
        for client in await self._clients(client_id):
            label = industry_label(client.industry.value)
            counts[label] = counts.get(label, 0) + 1
        return [DistributionSlice(name=name, value=value) for name, value in counts.items()]

    async def get_upcoming_renewals(self, client_id: Optional[UUID] = None, today: Optional[date] = None) -> List[UpcomingRenewal]:
        """Agreements ending within the next 90 days, soonest first."""
        today = today or date.today()
        agreements = await self.agreement_repo.list_ending_between(
            today, today + timedelta(days=RENEWAL_WINDOW_DAYS), client_id=client_id
        )
        clients = index_by_id(await self.client_repo.search())

        renewals = []
        for agreement in agreements:
            client = clients.get(agreement.client_id)
            renewals.append(UpcomingRenewal(
                id=agreement.id,
                client_name=client.name if client else "Unknown",
                agreement_name=agreement.agreement_name,
                days_left=(agreement.end_date - today).days,
                value=f"{agreement.currency.value} {agreement.value}" if agreement.value is not None else "N/A",
            ))
        renewals.sort(key=lambda r: r.days_left)
        return renewals
