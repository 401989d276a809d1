"""
Service record API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from infiniti_cms.api.v1.middleware import require_permission
from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.service_record_controller import ServiceRecordController
from infiniti_cms.schemas.service import (
    ServiceCreate,
    ServiceUpdate,
    ServiceResponse,
    ServiceListResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=ServiceResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission("services:write"))],
)
async def create_service(
    service_data: ServiceCreate,
    db: AsyncSession = Depends(get_db),
) -> ServiceResponse:
    """Create a new service record."""
    try:
        controller = ServiceRecordController(db)
        return await controller.create_service(service_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "",
    response_model=ServiceListResponse,
    dependencies=[Depends(require_permission("services:read"))],
)
async def list_services(
    search: str = Query(None),
    client_id: UUID = Query(None),
    service_type: str = Query(None),
    currency: str = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ServiceListResponse:
    """List services with summary stats."""
    controller = ServiceRecordController(db)
    return await controller.list_services(
        search=search,
        client_id=client_id,
        service_type=service_type,
        currency=currency,
    )


@router.get(
    "/{service_id}",
    response_model=ServiceResponse,
    dependencies=[Depends(require_permission("services:read"))],
)
async def get_service(
    service_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ServiceResponse:
    """Get service by ID."""
    controller = ServiceRecordController(db)
    service = await controller.get_service(service_id)
    if not service:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found",
        )
    return service


@router.patch(
    "/{service_id}",
    response_model=ServiceResponse,
    dependencies=[Depends(require_permission("services:write"))],
)
async def update_service(
    service_id: UUID,
    service_data: ServiceUpdate,
    db: AsyncSession = Depends(get_db),
) -> ServiceResponse:
    """Update a service record."""
    try:
        controller = ServiceRecordController(db)
        service = await controller.update_service(service_id, service_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not service:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found",
        )
    return service


@router.delete(
    "/{service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("services:delete"))],
)
async def delete_service(
    service_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete a service record."""
    controller = ServiceRecordController(db)
    deleted = await controller.delete_service(service_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found",
        )
