"""
Invoice and CR invoice Pydantic schemas.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from infiniti_cms.models.currency import Currency
from infiniti_cms.models.invoice import InvoiceStatus, CrInvoiceStatus


class InvoiceBase(BaseModel):
    """Base invoice schema with common fields."""
    client_id: UUID
    service_id: Optional[UUID] = None
    invoice_number: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., ge=0)
    currency: Currency = Currency.USD
    issue_date: date
    due_date: date
    paid_date: Optional[date] = None
    status: InvoiceStatus = InvoiceStatus.PENDING
    notes: Optional[str] = None


class InvoiceCreate(InvoiceBase):
    """Schema for creating an invoice."""
    pass


class InvoiceUpdate(BaseModel):
    """Schema for updating an invoice (all fields optional)."""
    service_id: Optional[UUID] = None
    invoice_number: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[Currency] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    paid_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    notes: Optional[str] = None


class InvoiceResponse(BaseModel):
    """Schema for invoice response."""
    id: UUID
    client_id: UUID
    client_name: Optional[str] = None
    service_id: Optional[UUID] = None
    invoice_number: str
    amount: float
    currency: Currency
    issue_date: date
    due_date: date
    paid_date: Optional[date] = None
    status: InvoiceStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    """Schema for invoice list response."""
    items: List[InvoiceResponse]
    total: int


class CrInvoiceBase(BaseModel):
    """Base CR invoice schema with common fields."""
    client_id: UUID
    employee_name: str = Field(..., min_length=1, max_length=255)
    cr_no: str = Field(..., min_length=1, max_length=100)
    cr_currency: Currency = Currency.INR
    amount: Decimal = Field(..., ge=0)
    start_date: date
    end_date: date
    status: CrInvoiceStatus = CrInvoiceStatus.INITIATED

    @model_validator(mode='after')
    def validate_dates(self) -> 'CrInvoiceBase':
        """Validate that end_date is not before start_date."""
        if self.end_date < self.start_date:
            raise ValueError('End date cannot be before start date')
        return self


class CrInvoiceCreate(CrInvoiceBase):
    """Schema for creating a CR invoice."""
    pass


class CrInvoiceUpdate(BaseModel):
    """Schema for updating a CR invoice (all fields optional)."""
    employee_name: Optional[str] = Field(None, min_length=1, max_length=255)
    cr_no: Optional[str] = Field(None, min_length=1, max_length=100)
    cr_currency: Optional[Currency] = None
    amount: Optional[Decimal] = Field(None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[CrInvoiceStatus] = None


class CrInvoiceResponse(BaseModel):
    """Schema for CR invoice response."""
    id: UUID
    client_id: UUID
    client_name: Optional[str] = None
    employee_name: str
    cr_no: str
    cr_currency: Currency
    amount: float
    start_date: date
    end_date: date
    status: CrInvoiceStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CrInvoiceListResponse(BaseModel):
    """Schema for CR invoice list response."""
    items: List[CrInvoiceResponse]
    total: int
