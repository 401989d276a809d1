"""
User model. Role drives permission checks.
"""

from sqlalchemy import Column, String, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from infiniti_cms.db.base import Base, TimestampMixin


class UserRole(str, enum.Enum):
    """User role enumeration."""
    ADMIN = "admin"
    FINANCE = "finance"
    CSM = "csm"
    VIEWER = "viewer"


class UserStatus(str, enum.Enum):
    """User status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class User(TimestampMixin, Base):
    """Application user (staff member)."""

    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(100), unique=True, nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    department = Column(String(100), nullable=True)
    role = Column(
        SQLEnum(UserRole, values_callable=lambda x: [e.value for e in UserRole]),
        nullable=False,
        default=UserRole.VIEWER,
    )
    status = Column(
        SQLEnum(UserStatus, values_callable=lambda x: [e.value for e in UserStatus]),
        nullable=False,
        default=UserStatus.ACTIVE,
    )

    # Relationships
    assigned_clients = relationship("Client", back_populates="assigned_csm")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
