"""
Agreement API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from infiniti_cms.api.v1.middleware import require_permission
from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.agreement_controller import AgreementController
from infiniti_cms.schemas.agreement import (
    AgreementCreate,
    AgreementUpdate,
    AgreementResponse,
    AgreementListResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=AgreementResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission("agreements:write"))],
)
async def create_agreement(
    agreement_data: AgreementCreate,
    db: AsyncSession = Depends(get_db),
) -> AgreementResponse:
    """Create an agreement and notify the account's CSM, finance and admins."""
    try:
        controller = AgreementController(db)
        return await controller.create_agreement(agreement_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "",
    response_model=AgreementListResponse,
    dependencies=[Depends(require_permission("agreements:read"))],
)
async def list_agreements(
    search: str = Query(None),
    client_id: UUID = Query(None),
    status: str = Query(None),
    db: AsyncSession = Depends(get_db),
) -> AgreementListResponse:
    """List agreements with renewal stats."""
    controller = AgreementController(db)
    return await controller.list_agreements(
        search=search,
        client_id=client_id,
        status=status,
    )


@router.get(
    "/{agreement_id}",
    response_model=AgreementResponse,
    dependencies=[Depends(require_permission("agreements:read"))],
)
async def get_agreement(
    agreement_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> AgreementResponse:
    """Get agreement by ID."""
    controller = AgreementController(db)
    agreement = await controller.get_agreement(agreement_id)
    if not agreement:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Agreement not found",
        )
    return agreement


@router.put(
    "/{agreement_id}",
    response_model=AgreementResponse,
    dependencies=[Depends(require_permission("agreements:write"))],
)
async def update_agreement(
    agreement_id: UUID,
    agreement_data: AgreementUpdate,
    db: AsyncSession = Depends(get_db),
) -> AgreementResponse:
    """Update an agreement."""
    try:
        controller = AgreementController(db)
        agreement = await controller.update_agreement(agreement_id, agreement_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not agreement:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Agreement not found",
        )
    return agreement


@router.delete(
    "/{agreement_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("agreements:delete"))],
)
async def delete_agreement(
    agreement_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete an agreement."""
    controller = AgreementController(db)
    deleted = await controller.delete_agreement(agreement_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Agreement not found",
        )
