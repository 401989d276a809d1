"""
Invoice and CR invoice repositories.
"""

from typing import Optional, List
from datetime import date
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, or_

from infiniti_cms.db.repositories.base_repository import BaseRepository
from infiniti_cms.models.invoice import Invoice, CrInvoice


def _shift_months(day: date, months: int) -> date:
    """First day of the month that is `months` away from day's month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def period_condition(period: Optional[str], today: date):
    """
    Translate a reporting period name into an issue_date condition.

    Supported periods: current_month, last_month, last_quarter, last_year, ytd.
    Unknown or empty periods return None (no restriction).
    """
    if not period or period == "all":
        return None

    current_month = today.replace(day=1)
    if period == "current_month":
        return Invoice.issue_date >= current_month
    if period == "last_month":
        return and_(
            Invoice.issue_date >= _shift_months(today, -1),
            Invoice.issue_date < current_month,
        )
    if period == "last_quarter":
        return Invoice.issue_date >= _shift_months(today, -3)
    if period == "last_year":
        return Invoice.issue_date >= _shift_months(today, -12)
    if period == "ytd":
        return Invoice.issue_date >= date(today.year, 1, 1)
    return None


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for invoice operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Invoice, session)

    async def search(
        self,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
        currency: Optional[str] = None,
        period: Optional[str] = None,
        today: Optional[date] = None,
    ) -> List[Invoice]:
        """List invoices matching filters, most recently issued first."""
        query = select(Invoice)

        if client_id:
            query = query.where(Invoice.client_id == client_id)
        if status and status != "all":
            query = query.where(Invoice.status == status)
        if currency and currency != "all":
            query = query.where(Invoice.currency == currency)
        condition = period_condition(period, today or date.today())
        if condition is not None:
            query = query.where(condition)

        query = query.order_by(Invoice.issue_date.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())


class CrInvoiceRepository(BaseRepository[CrInvoice]):
    """Repository for CR invoice operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(CrInvoice, session)

    async def search(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
    ) -> List[CrInvoice]:
        """List CR invoices matching CR number / employee search and filters."""
        query = select(CrInvoice)

        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    CrInvoice.cr_no.ilike(pattern),
                    CrInvoice.employee_name.ilike(pattern),
                )
            )
        if client_id:
            query = query.where(CrInvoice.client_id == client_id)
        if status and status != "all":
            query = query.where(CrInvoice.status == status)

        query = query.order_by(CrInvoice.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())
