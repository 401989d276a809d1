"""
In-app notification model.
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
import enum

from infiniti_cms.db.base import Base


class NotificationType(str, enum.Enum):
    """Notification type enumeration."""
    PAYMENT_REMINDER = "payment_reminder"
    AGREEMENT_RENEWAL = "agreement_renewal"
    OVERDUE_PAYMENT = "overdue_payment"
    SYSTEM = "system"


class Notification(Base):
    """Notification addressed to a user, optionally about a client."""

    __tablename__ = "notifications"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=True, index=True)
    type = Column(
        SQLEnum(NotificationType, values_callable=lambda x: [e.value for e in NotificationType]),
        nullable=False,
    )
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    related_entity_id = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="notifications")
