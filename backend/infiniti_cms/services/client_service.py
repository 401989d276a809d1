"""
Client service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.core.logging import get_logger
from infiniti_cms.services.base_service import BaseService
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.user_repository import UserRepository
from infiniti_cms.models.client import ClientStatus, Industry
from infiniti_cms.schemas.client import ClientCreate, ClientUpdate, ClientResponse

logger = get_logger(__name__)


class ClientService(BaseService):
    """Service for client operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.user_repo = UserRepository(session)

    async def _check_csm(self, csm_id: Optional[UUID]) -> None:
        if csm_id and not await self.user_repo.get(csm_id):
            raise ValueError("Assigned CSM not found")

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        await self._check_csm(client_data.assigned_csm_id)
        async with self.unique_write("Client already exists"):
            client = await self.client_repo.create(**client_data.model_dump())
        await self.session.refresh(client)
        logger.info("Client created", extra={"client_id": str(client.id), "client_name": client.name})
        return ClientResponse.model_validate(client)

    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None
        return ClientResponse.model_validate(client)

    async def list_clients(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        industry: Optional[str] = None,
        skip: int = 0,
        limit: int = 1000,
    ) -> tuple[List[ClientResponse], int]:
        """List clients with optional filters."""
        try:
            status_enum = ClientStatus(status) if status and status != "all" else None
            industry_enum = Industry(industry) if industry and industry != "all" else None
        except ValueError:
            return [], 0

        clients = await self.client_repo.search(
            search=search,
            status=status_enum,
            industry=industry_enum,
            skip=skip,
            limit=limit,
        )
        return [ClientResponse.model_validate(client) for client in clients], len(clients)

    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None

        update_dict = client_data.model_dump(exclude_unset=True)
        await self._check_csm(update_dict.get("assigned_csm_id"))
        async with self.unique_write("Client already exists"):
            updated = await self.client_repo.update(client_id, **update_dict)
        await self.session.refresh(updated)
        return ClientResponse.model_validate(updated)

    async def delete_client(self, client_id: UUID) -> bool:
        """Delete a client and everything that belongs to it."""
        deleted = await self.client_repo.delete(client_id)
        await self.session.commit()
        if deleted:
            logger.info("Client deleted", extra={"client_id": str(client_id)})
        return deleted
