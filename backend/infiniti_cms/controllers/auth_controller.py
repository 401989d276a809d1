"""
Authentication controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.models.user import User
from infiniti_cms.services.auth_service import AuthService
from infiniti_cms.schemas.user import CurrentUserResponse, LoginResponse


class AuthController(BaseController):
    """Controller for authentication operations."""

    def __init__(self, session: AsyncSession):
        self.auth_service = AuthService(session)

    async def login(self, email: str) -> LoginResponse:
        return await self.auth_service.login(email)

    def current_user(self, user: User) -> CurrentUserResponse:
        return self.auth_service.describe(user)
