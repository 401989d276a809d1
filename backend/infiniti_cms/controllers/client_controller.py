"""
Client controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.services.client_service import ClientService
from infiniti_cms.schemas.client import ClientCreate, ClientUpdate, ClientResponse, ClientListResponse


class ClientController(BaseController):
    """Controller for client operations."""

    def __init__(self, session: AsyncSession):
        self.client_service = ClientService(session)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        return await self.client_service.create_client(client_data)

    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        return await self.client_service.get_client(client_id)

    async def list_clients(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        industry: Optional[str] = None,
        skip: int = 0,
        limit: int = 1000,
    ) -> ClientListResponse:
        """List clients with optional filters."""
        clients, total = await self.client_service.list_clients(
            search=search,
            status=status,
            industry=industry,
            skip=skip,
            limit=limit,
        )
        return ClientListResponse(items=clients, total=total)

    async def update_client(self, client_id: UUID, client_data: ClientUpdate) -> Optional[ClientResponse]:
        return await self.client_service.update_client(client_id, client_data)

    async def delete_client(self, client_id: UUID) -> bool:
        return await self.client_service.delete_client(client_id)
