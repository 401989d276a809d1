"""
Invoice models: standard service invoices and change-request (CR) invoices.
"""

from sqlalchemy import Column, String, Text, Date, Numeric, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from infiniti_cms.db.base import Base, TimestampMixin
from infiniti_cms.models.currency import Currency


class InvoiceStatus(str, enum.Enum):
    """Invoice status enumeration."""
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class CrInvoiceStatus(str, enum.Enum):
    """CR invoice approval status."""
    INITIATED = "initiated"
    PENDING = "pending"
    APPROVED = "approved"


class Invoice(TimestampMixin, Base):
    """Standard invoice issued against a client (optionally a service)."""

    __tablename__ = "invoices"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    service_id = Column(UUID(as_uuid=True), ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    invoice_number = Column(String(100), nullable=False, unique=True)
    amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(
        SQLEnum(Currency, values_callable=lambda x: [e.value for e in Currency]),
        nullable=False,
        default=Currency.USD,
    )
    issue_date = Column(Date, nullable=False, index=True)
    due_date = Column(Date, nullable=False)
    paid_date = Column(Date, nullable=True)
    status = Column(
        SQLEnum(InvoiceStatus, values_callable=lambda x: [e.value for e in InvoiceStatus]),
        nullable=False,
        default=InvoiceStatus.PENDING,
        index=True,
    )
    notes = Column(Text, nullable=True)

    # Relationships
    client = relationship("Client", back_populates="invoices")
    service = relationship("Service")


class CrInvoice(TimestampMixin, Base):
    """Change-request invoice, billed separately from service invoices."""

    __tablename__ = "cr_invoices"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    employee_name = Column(String(255), nullable=False)
    cr_no = Column(String(100), nullable=False, unique=True)
    cr_currency = Column(
        SQLEnum(Currency, values_callable=lambda x: [e.value for e in Currency]),
        nullable=False,
        default=Currency.INR,
    )
    amount = Column(Numeric(12, 2), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(
        SQLEnum(CrInvoiceStatus, values_callable=lambda x: [e.value for e in CrInvoiceStatus]),
        nullable=False,
        default=CrInvoiceStatus.INITIATED,
    )

    # Relationships
    client = relationship("Client", back_populates="cr_invoices")
