"""
Financial reports: outstanding receivables and revenue breakdown.
"""

from datetime import date
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.services.base_service import BaseService, index_by_id, round_half_up
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.invoice_repository import InvoiceRepository
from infiniti_cms.db.repositories.service_repository import ServiceRepository
from infiniti_cms.models.currency import Currency
from infiniti_cms.models.invoice import InvoiceStatus
from infiniti_cms.schemas.invoice import InvoiceResponse
from infiniti_cms.schemas.report import (
    OutstandingInvoice,
    OutstandingReport,
    ServiceTypeRevenue,
    ClientRevenue,
    RevenueReport,
)

GROWTH_RATE = 12
TOP_CLIENTS = 5


def _currency(value: Optional[str]) -> Optional[Currency]:
    if not value or value == "all":
        return None
    try:
        return Currency(value.upper())
    except ValueError:
        raise ValueError(f"Invalid currency: {value}")


class ReportService(BaseService):
    """Service for report operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.invoice_repo = InvoiceRepository(session)
        self.service_repo = ServiceRepository(session)
        self.client_repo = ClientRepository(session)

    async def outstanding(
        self,
        currency: Optional[str] = None,
        period: Optional[str] = None,
        today: Optional[date] = None,
    ) -> OutstandingReport:
        """
        Pending invoices (filtered by currency and period) plus every overdue
        invoice, with aging measured from the due date.
        """
        today = today or date.today()
        pending = await self.invoice_repo.search(
            status=InvoiceStatus.PENDING,
            currency=_currency(currency),
            period=period,
            today=today,
        )
        overdue = await self.invoice_repo.search(status=InvoiceStatus.OVERDUE)
        clients = index_by_id(await self.client_repo.search())

        invoices = []
        for invoice in pending + overdue:
            client = clients.get(invoice.client_id)
            fields = InvoiceResponse.model_validate(invoice).model_dump()
            fields["client_name"] = client.name if client else "Unknown"
            invoices.append(OutstandingInvoice(**fields, aging_days=(today - invoice.due_date).days))

        avg_aging = sum(i.aging_days for i in invoices) / len(invoices) if invoices else 0
        return OutstandingReport(
            invoices=invoices,
            total=float(sum(i.amount for i in invoices)),
            overdue=float(sum(i.amount for i in overdue)),
            overdue_count=len(overdue),
            avg_aging_days=round_half_up(avg_aging),
        )

    async def revenue(
        self,
        currency: Optional[str] = None,
        period: Optional[str] = None,
        today: Optional[date] = None,
    ) -> RevenueReport:
        """Paid revenue, service-type mix and the top five clients."""
        paid = await self.invoice_repo.search(
            status=InvoiceStatus.PAID,
            currency=_currency(currency),
            period=period,
            today=today,
        )
        services = await self.service_repo.search()
        clients = await self.client_repo.search()

        total_revenue = float(sum(i.amount for i in paid))

        by_type = {}
        for service in services:
            entry = by_type.setdefault(service.service_type.value, {"revenue": 0.0, "count": 0})
            entry["revenue"] += float(service.amount)
            entry["count"] += 1
        by_service_type = [
            ServiceTypeRevenue(
                type=service_type,
                revenue=entry["revenue"],
                count=entry["count"],
                percentage=(entry["revenue"] / total_revenue * 100) if total_revenue > 0 else 0,
            )
            for service_type, entry in by_type.items()
        ]

        client_revenue = [
            ClientRevenue(
                id=client.id,
                name=client.name,
                industry=client.industry.value,
                revenue=float(sum(i.amount for i in paid if i.client_id == client.id)),
            )
            for client in clients
        ]
        client_revenue.sort(key=lambda c: c.revenue, reverse=True)

        return RevenueReport(
            total=round_half_up(total_revenue),
            growth_rate=GROWTH_RATE,
            avg_deal_size=round_half_up(total_revenue / len(clients)) if clients else 0,
            by_service_type=by_service_type,
            top_clients=client_revenue[:TOP_CLIENTS],
        )
