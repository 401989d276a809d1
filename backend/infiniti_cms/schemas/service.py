"""
Service Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from infiniti_cms.models.currency import Currency
from infiniti_cms.models.service import ServiceType, ServiceStatus, BillingCycle


class ServiceBase(BaseModel):
    """Base service schema with common fields."""
    client_id: UUID
    service_type: ServiceType
    description: Optional[str] = None
    amount: Decimal = Field(..., ge=0)
    currency: Currency = Currency.USD
    start_date: Optional[date] = None
    go_live_date: Optional[date] = None
    billing_cycle: Optional[BillingCycle] = None
    is_recurring: bool = False
    assigned_csm_id: Optional[UUID] = None
    invoice_number: Optional[str] = Field(None, max_length=100)
    invoice_date: Optional[date] = None
    status: ServiceStatus = ServiceStatus.PENDING


class ServiceCreate(ServiceBase):
    """Schema for creating a service."""
    pass


class ServiceUpdate(BaseModel):
    """Schema for updating a service (all fields optional)."""
    client_id: Optional[UUID] = None
    service_type: Optional[ServiceType] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[Currency] = None
    start_date: Optional[date] = None
    go_live_date: Optional[date] = None
    billing_cycle: Optional[BillingCycle] = None
    is_recurring: Optional[bool] = None
    assigned_csm_id: Optional[UUID] = None
    invoice_number: Optional[str] = Field(None, max_length=100)
    invoice_date: Optional[date] = None
    status: Optional[ServiceStatus] = None


class ServiceResponse(BaseModel):
    """Schema for service response, flattened with client and CSM names."""
    id: UUID
    client_id: UUID
    client_name: Optional[str] = None
    service_type: ServiceType
    description: Optional[str] = None
    amount: float
    currency: Currency
    start_date: Optional[date] = None
    go_live_date: Optional[date] = None
    billing_cycle: Optional[str] = None
    is_recurring: bool
    assigned_csm_id: Optional[UUID] = None
    csm_name: Optional[str] = None
    invoice_number: Optional[str] = None
    invoice_date: Optional[date] = None
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ServiceStats(BaseModel):
    """Aggregate figures shown above the service list."""
    total: int
    recurring: int
    monthly_revenue: float
    annual_revenue: float


class ServiceListResponse(BaseModel):
    """Schema for service list response."""
    items: List[ServiceResponse]
    total: int
    stats: ServiceStats
