"""
Service repository for database operations.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from infiniti_cms.db.repositories.base_repository import BaseRepository
from infiniti_cms.models.service import Service


class ServiceRepository(BaseRepository[Service]):
    """Repository for service operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Service, session)

    async def search(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        service_type: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> List[Service]:
        """List services matching description search and filters, newest first."""
        query = select(Service)

        if search:
            query = query.where(Service.description.ilike(f"%{search}%"))
        if client_id:
            query = query.where(Service.client_id == client_id)
        if service_type:
            query = query.where(Service.service_type == service_type)
        if currency:
            query = query.where(Service.currency == currency)

        query = query.order_by(Service.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())
