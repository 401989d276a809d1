"""
Client Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from infiniti_cms.models.client import ClientStatus, Industry


class ClientBase(BaseModel):
    """Base client schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    employee_name: Optional[str] = Field(None, max_length=255)
    contact_person: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    gst_tax_id: Optional[str] = Field(None, max_length=100)
    industry: Industry
    region: Optional[str] = Field(None, max_length=100)
    status: ClientStatus = ClientStatus.ACTIVE
    assigned_csm_id: Optional[UUID] = None


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    pass


class ClientUpdate(BaseModel):
    """Schema for updating a client (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    employee_name: Optional[str] = Field(None, max_length=255)
    contact_person: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    gst_tax_id: Optional[str] = Field(None, max_length=100)
    industry: Optional[Industry] = None
    region: Optional[str] = Field(None, max_length=100)
    status: Optional[ClientStatus] = None
    assigned_csm_id: Optional[UUID] = None


class ClientResponse(ClientBase):
    """Schema for client response."""
    id: UUID
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ClientListResponse(BaseModel):
    """Schema for client list response."""
    items: List[ClientResponse]
    total: int
