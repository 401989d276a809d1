"""
Change-request invoice API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from infiniti_cms.api.v1.middleware import require_permission
from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.invoice_controller import CrInvoiceController
from infiniti_cms.schemas.invoice import (
    CrInvoiceCreate,
    CrInvoiceUpdate,
    CrInvoiceResponse,
    CrInvoiceListResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=CrInvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission("invoices:write"))],
)
async def create_cr_invoice(
    data: CrInvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> CrInvoiceResponse:
    """Create a CR invoice; CR numbers are unique."""
    try:
        controller = CrInvoiceController(db)
        return await controller.create_cr_invoice(data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "",
    response_model=CrInvoiceListResponse,
    dependencies=[Depends(require_permission("invoices:read"))],
)
async def list_cr_invoices(
    search: str = Query(None),
    client_id: UUID = Query(None),
    status: str = Query(None),
    db: AsyncSession = Depends(get_db),
) -> CrInvoiceListResponse:
    """List CR invoices with optional filters."""
    controller = CrInvoiceController(db)
    return await controller.list_cr_invoices(
        search=search,
        client_id=client_id,
        status=status,
    )


@router.get(
    "/{cr_invoice_id}",
    response_model=CrInvoiceResponse,
    dependencies=[Depends(require_permission("invoices:read"))],
)
async def get_cr_invoice(
    cr_invoice_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> CrInvoiceResponse:
    """Get CR invoice by ID."""
    controller = CrInvoiceController(db)
    cr_invoice = await controller.get_cr_invoice(cr_invoice_id)
    if not cr_invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="CR invoice not found",
        )
    return cr_invoice


@router.patch(
    "/{cr_invoice_id}",
    response_model=CrInvoiceResponse,
    dependencies=[Depends(require_permission("invoices:write"))],
)
async def update_cr_invoice(
    cr_invoice_id: UUID,
    data: CrInvoiceUpdate,
    db: AsyncSession = Depends(get_db),
) -> CrInvoiceResponse:
    """Update a CR invoice."""
    try:
        controller = CrInvoiceController(db)
        cr_invoice = await controller.update_cr_invoice(cr_invoice_id, data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not cr_invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="CR invoice not found",
        )
    return cr_invoice


@router.delete(
    "/{cr_invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("invoices:delete"))],
)
async def delete_cr_invoice(
    cr_invoice_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete a CR invoice."""
    controller = CrInvoiceController(db)
    deleted = await controller.delete_cr_invoice(cr_invoice_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="CR invoice not found",
        )
