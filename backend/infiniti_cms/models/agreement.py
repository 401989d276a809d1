"""
Agreement (contract) model.
"""

from sqlalchemy import Column, String, Boolean, Date, Numeric, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from infiniti_cms.db.base import Base, TimestampMixin
from infiniti_cms.models.currency import Currency


class AgreementStatus(str, enum.Enum):
    """Agreement lifecycle status."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRING_SOON = "expiring_soon"
    EXPIRED = "expired"
    RENEWED = "renewed"


class Agreement(TimestampMixin, Base):
    """Dated contract with a monetary value and renewal lifecycle."""

    __tablename__ = "agreements"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    service_id = Column(UUID(as_uuid=True), ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    agreement_name = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False, index=True)
    value = Column(Numeric(12, 2), nullable=True)
    currency = Column(
        SQLEnum(Currency, values_callable=lambda x: [e.value for e in Currency]),
        nullable=False,
        default=Currency.USD,
    )
    implement_fees = Column(Numeric(12, 2), nullable=True)
    monthly_subscription_fees = Column(Numeric(12, 2), nullable=True)
    change_request_fees = Column(Numeric(12, 2), nullable=True)
    payment_terms = Column(String(100), nullable=True)
    status = Column(
        SQLEnum(AgreementStatus, values_callable=lambda x: [e.value for e in AgreementStatus]),
        nullable=False,
        default=AgreementStatus.ACTIVE,
    )
    auto_renewal = Column(Boolean, default=False, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="agreements")
    service = relationship("Service")
