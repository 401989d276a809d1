"""
Agreement Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from infiniti_cms.models.agreement import AgreementStatus
from infiniti_cms.models.currency import Currency


class AgreementBase(BaseModel):
    """Base agreement schema with common fields."""
    client_id: UUID
    service_id: Optional[UUID] = None
    agreement_name: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    value: Optional[Decimal] = Field(None, ge=0)
    currency: Currency = Currency.USD
    implement_fees: Optional[Decimal] = Field(None, ge=0)
    monthly_subscription_fees: Optional[Decimal] = Field(None, ge=0)
    change_request_fees: Optional[Decimal] = Field(None, ge=0)
    payment_terms: Optional[str] = Field(None, max_length=100)
    status: AgreementStatus = AgreementStatus.ACTIVE
    auto_renewal: bool = False

    @model_validator(mode='after')
    def validate_dates(self) -> 'AgreementBase':
        """Validate that end_date is after start_date."""
        if self.end_date <= self.start_date:
            raise ValueError('End date must be after start date')
        return self


class AgreementCreate(AgreementBase):
    """Schema for creating an agreement."""
    pass


class AgreementUpdate(BaseModel):
    """Schema for updating an agreement (all fields optional)."""
    service_id: Optional[UUID] = None
    agreement_name: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    value: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[Currency] = None
    implement_fees: Optional[Decimal] = Field(None, ge=0)
    monthly_subscription_fees: Optional[Decimal] = Field(None, ge=0)
    change_request_fees: Optional[Decimal] = Field(None, ge=0)
    payment_terms: Optional[str] = Field(None, max_length=100)
    status: Optional[AgreementStatus] = None
    auto_renewal: Optional[bool] = None

    @model_validator(mode='after')
    def validate_dates(self) -> 'AgreementUpdate':
        """Validate that end_date is after start_date if both are provided in the update."""
        if self.start_date is not None and self.end_date is not None:
            if self.end_date <= self.start_date:
                raise ValueError('End date must be after start date')
        return self


class AgreementResponse(BaseModel):
    """Schema for agreement response."""
    id: UUID
    client_id: UUID
    client_name: Optional[str] = None
    service_id: Optional[UUID] = None
    agreement_name: str
    start_date: date
    end_date: date
    value: Optional[float] = None
    currency: Currency
    implement_fees: Optional[float] = None
    monthly_subscription_fees: Optional[float] = None
    change_request_fees: Optional[float] = None
    payment_terms: Optional[str] = None
    status: AgreementStatus
    auto_renewal: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AgreementStats(BaseModel):
    """Aggregate figures shown above the agreement list."""
    total: int
    expiring_soon: int
    total_value: float


class AgreementListResponse(BaseModel):
    """Schema for agreement list response."""
    items: List[AgreementResponse]
    total: int
    stats: AgreementStats
