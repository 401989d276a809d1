"""
Invoice and CR invoice controllers.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.services.invoice_service import InvoiceService, CrInvoiceService
from infiniti_cms.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    InvoiceListResponse,
    CrInvoiceCreate,
    CrInvoiceUpdate,
    CrInvoiceResponse,
    CrInvoiceListResponse,
)


class InvoiceController(BaseController):
    """Controller for invoice operations."""

    def __init__(self, session: AsyncSession):
        self.invoice_service = InvoiceService(session)

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        return await self.invoice_service.create_invoice(invoice_data)

    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        return await self.invoice_service.get_invoice(invoice_id)

    async def list_invoices(
        self,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
        currency: Optional[str] = None,
        period: Optional[str] = None,
    ) -> InvoiceListResponse:
        items, total = await self.invoice_service.list_invoices(
            client_id=client_id,
            status=status,
            currency=currency,
            period=period,
        )
        return InvoiceListResponse(items=items, total=total)

    async def update_invoice(self, invoice_id: UUID, invoice_data: InvoiceUpdate) -> Optional[InvoiceResponse]:
        return await self.invoice_service.update_invoice(invoice_id, invoice_data)

    async def delete_invoice(self, invoice_id: UUID) -> bool:
        return await self.invoice_service.delete_invoice(invoice_id)


class CrInvoiceController(BaseController):
    """Controller for CR invoice operations."""

    def __init__(self, session: AsyncSession):
        self.cr_invoice_service = CrInvoiceService(session)

    async def create_cr_invoice(self, data: CrInvoiceCreate) -> CrInvoiceResponse:
        return await self.cr_invoice_service.create_cr_invoice(data)

    async def get_cr_invoice(self, cr_invoice_id: UUID) -> Optional[CrInvoiceResponse]:
        return await self.cr_invoice_service.get_cr_invoice(cr_invoice_id)

    async def list_cr_invoices(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
    ) -> CrInvoiceListResponse:
        items, total = await self.cr_invoice_service.list_cr_invoices(
            search=search,
            client_id=client_id,
            status=status,
        )
        return CrInvoiceListResponse(items=items, total=total)

    async def update_cr_invoice(self, cr_invoice_id: UUID, data: CrInvoiceUpdate) -> Optional[CrInvoiceResponse]:
        return await self.cr_invoice_service.update_cr_invoice(cr_invoice_id, data)

    async def delete_cr_invoice(self, cr_invoice_id: UUID) -> bool:
        return await self.cr_invoice_service.delete_cr_invoice(cr_invoice_id)
