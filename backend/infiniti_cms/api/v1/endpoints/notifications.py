"""
Notification endpoints for the current user, plus the urgent-case feed.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from infiniti_cms.api.v1.middleware import require_authentication
from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.notification_controller import NotificationController
from infiniti_cms.models.user import User
from infiniti_cms.schemas.notification import (
    NotificationResponse,
    NotificationListResponse,
    UrgentCaseListResponse,
)

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    unread_only: bool = Query(False),
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> NotificationListResponse:
    """List the current user's notifications, newest first."""
    controller = NotificationController(db)
    return await controller.list_notifications(current_user.id, unread_only)


@router.get("/urgent", response_model=UrgentCaseListResponse)
async def get_urgent_cases(
    db: AsyncSession = Depends(get_db),
) -> UrgentCaseListResponse:
    """Overdue invoices and agreements nearing expiry, most severe first."""
    controller = NotificationController(db)
    return await controller.get_urgent_cases()


@router.post("/mark-all-read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_all_notifications_read(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> None:
    """Mark every notification of the current user as read."""
    controller = NotificationController(db)
    await controller.mark_all_read(current_user.id)


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> NotificationResponse:
    """Mark one notification as read."""
    controller = NotificationController(db)
    notification = await controller.mark_read(notification_id, current_user.id)
    if not notification:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )
    return notification
