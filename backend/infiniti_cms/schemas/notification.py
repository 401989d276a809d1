"""
Notification and urgent-case schemas.
"""

from pydantic import BaseModel
from typing import Optional, List
from datetime import date, datetime
from uuid import UUID

from infiniti_cms.models.notification import NotificationType


class NotificationResponse(BaseModel):
    """Schema for notification response."""
    id: UUID
    user_id: Optional[UUID] = None
    client_id: Optional[UUID] = None
    type: NotificationType
    title: str
    message: str
    is_read: bool
    related_entity_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NotificationListResponse(BaseModel):
    """Schema for notification list response."""
    items: List[NotificationResponse]
    total: int
    unread: int


class UrgentCase(BaseModel):
    """An overdue invoice or an agreement close to expiry."""
    id: str
    type: str
    severity: str
    title: str
    message: str
    client_id: UUID
    client_name: str
    related_id: UUID
    days: int
    amount: Optional[float] = None
    currency: Optional[str] = None
    due_date: Optional[date] = None


class UrgentCaseListResponse(BaseModel):
    """Urgent cases ordered from most to least severe."""
    items: List[UrgentCase]
    total: int
