"""
Service (billing line item) model.
"""

from sqlalchemy import Column, String, Text, Boolean, Date, Numeric, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from infiniti_cms.db.base import Base, TimestampMixin
from infiniti_cms.models.currency import Currency


class ServiceType(str, enum.Enum):
    """Service type enumeration."""
    IMPLEMENTATION = "implementation"
    CR = "cr"
    SUBSCRIPTION = "subscription"
    HOSTING = "hosting"
    OTHERS = "others"


class ServiceStatus(str, enum.Enum):
    """Billing status of a service."""
    PENDING = "pending"
    PAID = "paid"


class BillingCycle(str, enum.Enum):
    """Billing cycle of a service."""
    ONE_TIME = "one-time"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUAL = "semi-annual"
    ANNUAL = "annual"


class Service(TimestampMixin, Base):
    """A billable service delivered to a client."""

    __tablename__ = "services"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    service_type = Column(
        SQLEnum(ServiceType, values_callable=lambda x: [e.value for e in ServiceType]),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(
        SQLEnum(Currency, values_callable=lambda x: [e.value for e in Currency]),
        nullable=False,
        default=Currency.USD,
    )
    start_date = Column(Date, nullable=True)
    go_live_date = Column(Date, nullable=True)
    billing_cycle = Column(String(50), nullable=True)
    is_recurring = Column(Boolean, default=False, nullable=False)
    assigned_csm_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    invoice_number = Column(String(100), nullable=True)
    invoice_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default=ServiceStatus.PENDING.value)

    # Relationships
    client = relationship("Client", back_populates="services")
    assigned_csm = relationship("User")
