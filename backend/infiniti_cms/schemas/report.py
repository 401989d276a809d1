"""
Financial report schemas.
"""

from pydantic import BaseModel
from typing import List
from uuid import UUID

from infiniti_cms.schemas.invoice import InvoiceResponse


class OutstandingInvoice(InvoiceResponse):
    """Unpaid invoice with days past its due date."""
    aging_days: int


class OutstandingReport(BaseModel):
    """Pending and overdue invoices with aging figures."""
    invoices: List[OutstandingInvoice]
    total: float
    overdue: float
    overdue_count: int
    avg_aging_days: int


class ServiceTypeRevenue(BaseModel):
    type: str
    revenue: float
    count: int
    percentage: float


class ClientRevenue(BaseModel):
    id: UUID
    name: str
    industry: str
    revenue: float


class RevenueReport(BaseModel):
    """Paid revenue broken down by service type and top clients."""
    total: int
    growth_rate: int
    avg_deal_size: int
    by_service_type: List[ServiceTypeRevenue]
    top_clients: List[ClientRevenue]
