"""
User controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.models.user import UserRole
from infiniti_cms.services.user_service import UserService
from infiniti_cms.schemas.user import UserCreate, UserUpdate, UserResponse, UserListResponse


class UserController(BaseController):
    """Controller for user operations."""

    def __init__(self, session: AsyncSession):
        self.user_service = UserService(session)

    async def create_user(self, user_data: UserCreate) -> UserResponse:
        return await self.user_service.create_user(user_data)

    async def get_user(self, user_id: UUID) -> Optional[UserResponse]:
        return await self.user_service.get_user(user_id)

    async def list_users(self) -> UserListResponse:
        users, total = await self.user_service.list_users()
        return UserListResponse(items=users, total=total)

    async def update_user(self, user_id: UUID, user_data: UserUpdate) -> Optional[UserResponse]:
        return await self.user_service.update_user(user_id, user_data)

    async def update_role(self, user_id: UUID, role: UserRole) -> Optional[UserResponse]:
        return await self.user_service.update_role(user_id, role)
