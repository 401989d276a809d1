"""
Client model for customer management.
"""

from sqlalchemy import Column, String, Text, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from infiniti_cms.db.base import Base, TimestampMixin


class ClientStatus(str, enum.Enum):
    """Client status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Industry(str, enum.Enum):
    """Industry segment of a client."""
    AIRLINES = "airlines"
    TRAVEL_AGENCY = "travel_agency"
    GDS = "gds"
    OTA = "ota"
    AVIATION_SERVICES = "aviation_services"


class Client(TimestampMixin, Base):
    """Client model for customer management."""

    __tablename__ = "clients"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    employee_name = Column(String(255), nullable=True)
    contact_person = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    gst_tax_id = Column(String(100), nullable=True)
    industry = Column(
        SQLEnum(Industry, values_callable=lambda x: [e.value for e in Industry]),
        nullable=False,
        index=True,
    )
    region = Column(String(100), nullable=True)
    status = Column(
        SQLEnum(ClientStatus, values_callable=lambda x: [e.value for e in ClientStatus]),
        nullable=False,
        default=ClientStatus.ACTIVE,
    )
    assigned_csm_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    assigned_csm = relationship("User", back_populates="assigned_clients")
    services = relationship("Service", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
    agreements = relationship("Agreement", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
    invoices = relationship("Invoice", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
    cr_invoices = relationship("CrInvoice", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
