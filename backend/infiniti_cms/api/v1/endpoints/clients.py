"""
Client API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from infiniti_cms.api.v1.middleware import require_permission
from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.client_controller import ClientController
from infiniti_cms.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientListResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission("clients:write"))],
)
async def create_client(
    client_data: ClientCreate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Create a new client."""
    try:
        controller = ClientController(db)
        return await controller.create_client(client_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "",
    response_model=ClientListResponse,
    dependencies=[Depends(require_permission("clients:read"))],
)
async def list_clients(
    search: str = Query(None),
    status: str = Query(None),
    industry: str = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(1000, ge=1, le=10000),
    db: AsyncSession = Depends(get_db),
) -> ClientListResponse:
    """List clients with optional search and filters."""
    controller = ClientController(db)
    return await controller.list_clients(
        search=search,
        status=status,
        industry=industry,
        skip=skip,
        limit=limit,
    )


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    dependencies=[Depends(require_permission("clients:read"))],
)
async def get_client(
    client_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Get client by ID."""
    controller = ClientController(db)
    client = await controller.get_client(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
    return client


@router.patch(
    "/{client_id}",
    response_model=ClientResponse,
    dependencies=[Depends(require_permission("clients:write"))],
)
async def update_client(
    client_id: UUID,
    client_data: ClientUpdate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Update a client."""
    try:
        controller = ClientController(db)
        client = await controller.update_client(client_id, client_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
    return client


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("clients:delete"))],
)
async def delete_client(
    client_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete a client and everything recorded against it."""
    controller = ClientController(db)
    deleted = await controller.delete_client(client_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
