"""
Notification controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.services.notification_service import NotificationService
from infiniti_cms.schemas.notification import (
    NotificationListResponse,
    NotificationResponse,
    UrgentCaseListResponse,
)


class NotificationController(BaseController):
    """Controller for notification operations."""

    def __init__(self, session: AsyncSession):
        self.notification_service = NotificationService(session)

    async def list_notifications(self, user_id: UUID, unread_only: bool = False) -> NotificationListResponse:
        items, unread = await self.notification_service.list_notifications(user_id, unread_only)
        return NotificationListResponse(items=items, total=len(items), unread=unread)

    async def mark_read(self, notification_id: UUID, user_id: UUID) -> Optional[NotificationResponse]:
        return await self.notification_service.mark_read(notification_id, user_id)

    async def mark_all_read(self, user_id: UUID) -> None:
        await self.notification_service.mark_all_read(user_id)

    async def get_urgent_cases(self) -> UrgentCaseListResponse:
        items = await self.notification_service.get_urgent_cases()
        return UrgentCaseListResponse(items=items, total=len(items))
