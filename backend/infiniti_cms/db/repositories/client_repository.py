"""
Client repository for database operations.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func, or_

from infiniti_cms.db.repositories.base_repository import BaseRepository
from infiniti_cms.models.client import Client
from infiniti_cms.models.service import Service
from infiniti_cms.models.agreement import Agreement
from infiniti_cms.models.invoice import Invoice, CrInvoice
from infiniti_cms.models.notification import Notification


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def get_by_name(self, name: str) -> Optional[Client]:
        """Get client by name (case-insensitive)."""
        result = await self.session.execute(
            select(Client).where(func.lower(Client.name) == name.strip().lower())
        )
        return result.scalars().first()

    async def search(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        industry: Optional[str] = None,
        assigned_csm_id: Optional[UUID] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Client]:
        """List clients matching free-text search and filters, newest first. No limit by default."""
        query = select(Client)

        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    Client.name.ilike(pattern),
                    Client.email.ilike(pattern),
                    Client.contact_person.ilike(pattern),
                )
            )
        if status:
            query = query.where(Client.status == status)
        if industry:
            query = query.where(Client.industry == industry)
        if assigned_csm_id:
            query = query.where(Client.assigned_csm_id == assigned_csm_id)

        query = query.order_by(Client.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete(self, id: UUID) -> bool:
        """
        Delete a client together with its services, agreements, invoices,
        CR invoices and notifications.
        """
        for model in (Notification, CrInvoice, Invoice, Agreement, Service):
            await self.session.execute(delete(model).where(model.client_id == id))
        return await super().delete(id)
