"""
Authentication service.
Issues bearer tokens for active users.
"""

from datetime import timedelta
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.core.config import settings
from infiniti_cms.core.logging import get_logger
from infiniti_cms.core.permissions import get_role_permissions
from infiniti_cms.core.security import create_access_token
from infiniti_cms.db.repositories.user_repository import UserRepository
from infiniti_cms.models.user import User, UserStatus
from infiniti_cms.services.base_service import BaseService
from infiniti_cms.schemas.user import (
    CurrentUserResponse,
    LoginResponse,
    TokenResponse,
    UserResponse,
)

logger = get_logger(__name__)


class AuthService(BaseService):
    """Service for login and current-user lookups."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def login(self, email: str) -> LoginResponse:
        """
        Issue a token for the user with this email.

        Raises:
            ValueError: If the user does not exist or is not active
        """
        user = await self.user_repo.get_by_email(email)
        if not user:
            logger.warning("Login attempt for unknown user", extra={"email": email})
            raise ValueError("Invalid credentials")
        if user.status != UserStatus.ACTIVE:
            raise ValueError(f"User account is not active. Status: {user.status.value}")

        expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = create_access_token(
            {"sub": str(user.id), "email": user.email, "role": user.role.value},
            expires_delta=expires,
        )
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return LoginResponse(
            token=TokenResponse(access_token=token, expires_in=int(expires.total_seconds())),
            user=UserResponse.model_validate(user),
            permissions=sorted(get_role_permissions(user.role)),
        )

    @staticmethod
    def describe(user: User) -> CurrentUserResponse:
        response = CurrentUserResponse.model_validate(user)
        response.permissions = sorted(get_role_permissions(user.role))
        return response
