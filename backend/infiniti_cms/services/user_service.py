"""
User service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.core.logging import get_logger
from infiniti_cms.services.base_service import BaseService
from infiniti_cms.db.repositories.user_repository import UserRepository
from infiniti_cms.models.user import UserRole
from infiniti_cms.schemas.user import UserCreate, UserUpdate, UserResponse

logger = get_logger(__name__)


class UserService(BaseService):
    """Service for user operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def create_user(self, user_data: UserCreate) -> UserResponse:
        """Create a new user. Email and username must be unique."""
        if await self.user_repo.get_by_email(user_data.email):
            raise ValueError("User with this email already exists")

        user_dict = user_data.model_dump()
        user_dict["email"] = user_dict["email"].lower()
        async with self.unique_write("User with this email or username already exists"):
            user = await self.user_repo.create(**user_dict)
        await self.session.refresh(user)
        logger.info("User created", extra={"user_id": str(user.id), "role": user.role.value})
        return UserResponse.model_validate(user)

    async def get_user(self, user_id: UUID) -> Optional[UserResponse]:
        user = await self.user_repo.get(user_id)
        if not user:
            return None
        return UserResponse.model_validate(user)

    async def list_users(self) -> tuple[List[UserResponse], int]:
        users = await self.user_repo.list_all()
        return [UserResponse.model_validate(user) for user in users], len(users)

    async def update_user(self, user_id: UUID, user_data: UserUpdate) -> Optional[UserResponse]:
        user = await self.user_repo.get(user_id)
        if not user:
            return None
        async with self.unique_write("User with this username already exists"):
            updated = await self.user_repo.update(user_id, **user_data.model_dump(exclude_unset=True))
        await self.session.refresh(updated)
        return UserResponse.model_validate(updated)

    async def update_role(self, user_id: UUID, role: UserRole) -> Optional[UserResponse]:
        """Change a user's role."""
        user = await self.user_repo.get(user_id)
        if not user:
            return None
        updated = await self.user_repo.update(user_id, role=role)
        await self.session.commit()
        await self.session.refresh(updated)
        logger.info("User role changed", extra={"user_id": str(user_id), "role": role.value})
        return UserResponse.model_validate(updated)
