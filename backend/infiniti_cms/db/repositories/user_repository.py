"""
User repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from infiniti_cms.db.repositories.base_repository import BaseRepository
from infiniti_cms.models.user import User, UserRole


class UserRepository(BaseRepository[User]):
    """Repository for user operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[User]:
        """List all users ordered by email."""
        result = await self.session.execute(select(User).order_by(User.email))
        return list(result.scalars().all())

    async def list_by_roles(self, roles: List[UserRole]) -> List[User]:
        """List users holding any of the given roles."""
        result = await self.session.execute(
            select(User).where(User.role.in_(roles)).order_by(User.email)
        )
        return list(result.scalars().all())
