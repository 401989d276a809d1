"""
Agreement repository for database operations.
"""

from typing import Optional, List
from datetime import date
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from infiniti_cms.db.repositories.base_repository import BaseRepository
from infiniti_cms.models.agreement import Agreement


class AgreementRepository(BaseRepository[Agreement]):
    """Repository for agreement operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Agreement, session)

    async def search(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
    ) -> List[Agreement]:
        """List agreements matching name search and filters, newest first."""
        query = select(Agreement)

        if search:
            query = query.where(Agreement.agreement_name.ilike(f"%{search}%"))
        if client_id:
            query = query.where(Agreement.client_id == client_id)
        if status:
            query = query.where(Agreement.status == status)

        query = query.order_by(Agreement.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_ending_between(
        self,
        after: date,
        until: date,
        client_id: Optional[UUID] = None,
    ) -> List[Agreement]:
        """Agreements with after < end_date <= until, soonest first."""
        query = select(Agreement).where(
            Agreement.end_date > after,
            Agreement.end_date <= until,
        )
        if client_id:
            query = query.where(Agreement.client_id == client_id)
        query = query.order_by(Agreement.end_date)
        result = await self.session.execute(query)
        return list(result.scalars().all())
