"""
Database initialization and bootstrapping.
"""

from sqlalchemy import select

from infiniti_cms.db.base import Base
from infiniti_cms.db import session as db_session
from infiniti_cms.core.config import settings
from infiniti_cms.core.logging import get_logger

logger = get_logger(__name__)


async def create_tables() -> None:
    """
    Create all database tables.
    Only used when AUTO_CREATE_TABLES is set (local development and demos).
    """
    import infiniti_cms.models  # noqa: F401  registers every model with Base

    async with db_session.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized")


async def seed_initial_data() -> None:
    """
    Ensure a bootstrap admin exists so the first login is possible.
    """
    from infiniti_cms.models.user import User, UserRole, UserStatus

    async with db_session.get_session_maker()() as session:
        result = await session.execute(
            select(User).where(User.email == settings.BOOTSTRAP_ADMIN_EMAIL)
        )
        if result.scalar_one_or_none():
            logger.info("Bootstrap admin already present")
            return

        session.add(
            User(
                email=settings.BOOTSTRAP_ADMIN_EMAIL,
                first_name="Admin",
                last_name="User",
                role=UserRole.ADMIN,
                status=UserStatus.ACTIVE,
            )
        )
        await session.commit()
        logger.info("Bootstrap admin created", extra={"email": settings.BOOTSTRAP_ADMIN_EMAIL})
