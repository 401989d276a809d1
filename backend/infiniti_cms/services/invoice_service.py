"""
Invoice and CR invoice services.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.core.logging import get_logger
from infiniti_cms.services.base_service import BaseService, index_by_id
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.invoice_repository import InvoiceRepository, CrInvoiceRepository
from infiniti_cms.models.currency import Currency
from infiniti_cms.models.invoice import InvoiceStatus, CrInvoiceStatus
from infiniti_cms.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    CrInvoiceCreate,
    CrInvoiceUpdate,
    CrInvoiceResponse,
)

logger = get_logger(__name__)


class InvoiceService(BaseService):
    """Service for standard invoice operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.invoice_repo = InvoiceRepository(session)
        self.client_repo = ClientRepository(session)

    async def _with_client_name(self, invoice, clients=None) -> InvoiceResponse:
        client = clients.get(invoice.client_id) if clients is not None else await self.client_repo.get(invoice.client_id)
        response = InvoiceResponse.model_validate(invoice)
        response.client_name = client.name if client else "Unknown"
        return response

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        if not await self.client_repo.get(invoice_data.client_id):
            raise ValueError("Client not found")
        async with self.unique_write("Invoice number already exists"):
            invoice = await self.invoice_repo.create(**invoice_data.model_dump())
        await self.session.refresh(invoice)
        logger.info("Invoice created", extra={"invoice_id": str(invoice.id), "invoice_number": invoice.invoice_number})
        return await self._with_client_name(invoice)

    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None
        return await self._with_client_name(invoice)

    async def list_invoices(
        self,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
        currency: Optional[str] = None,
        period: Optional[str] = None,
    ) -> tuple[List[InvoiceResponse], int]:
        try:
            status_enum = InvoiceStatus(status) if status and status != "all" else None
            currency_enum = Currency(currency) if currency and currency != "all" else None
        except ValueError:
            return [], 0

        invoices = await self.invoice_repo.search(
            client_id=client_id,
            status=status_enum,
            currency=currency_enum,
            period=period,
        )
        clients = index_by_id(await self.client_repo.search())
        items = [await self._with_client_name(i, clients) for i in invoices]
        return items, len(items)

    async def update_invoice(self, invoice_id: UUID, invoice_data: InvoiceUpdate) -> Optional[InvoiceResponse]:
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None
        async with self.unique_write("Invoice number already exists"):
            updated = await self.invoice_repo.update(invoice_id, **invoice_data.model_dump(exclude_unset=True))
        await self.session.refresh(updated)
        return await self._with_client_name(updated)

    async def delete_invoice(self, invoice_id: UUID) -> bool:
        deleted = await self.invoice_repo.delete(invoice_id)
        await self.session.commit()
        return deleted


class CrInvoiceService(BaseService):
    """Service for change-request invoice operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.cr_invoice_repo = CrInvoiceRepository(session)
        self.client_repo = ClientRepository(session)

    async def _with_client_name(self, cr_invoice, clients=None) -> CrInvoiceResponse:
        client = clients.get(cr_invoice.client_id) if clients is not None else await self.client_repo.get(cr_invoice.client_id)
        response = CrInvoiceResponse.model_validate(cr_invoice)
        response.client_name = client.name if client else "Unknown"
        return response

    async def create_cr_invoice(self, data: CrInvoiceCreate) -> CrInvoiceResponse:
        """Create a CR invoice. CR numbers are unique."""
        if not await self.client_repo.get(data.client_id):
            raise ValueError("Client not found")
        async with self.unique_write(f"CR number {data.cr_no} already exists"):
            cr_invoice = await self.cr_invoice_repo.create(**data.model_dump())
        await self.session.refresh(cr_invoice)
        logger.info("CR invoice created", extra={"cr_invoice_id": str(cr_invoice.id), "cr_no": cr_invoice.cr_no})
        return await self._with_client_name(cr_invoice)

    async def get_cr_invoice(self, cr_invoice_id: UUID) -> Optional[CrInvoiceResponse]:
        cr_invoice = await self.cr_invoice_repo.get(cr_invoice_id)
        if not cr_invoice:
            return None
        return await self._with_client_name(cr_invoice)

    async def list_cr_invoices(
        self,
        search: Optional[str] = None,
        client_id: Optional[UUID] = None,
        status: Optional[str] = None,
    ) -> tuple[List[CrInvoiceResponse], int]:
        try:
            status_enum = CrInvoiceStatus(status) if status and status != "all" else None
        except ValueError:
            return [], 0

        cr_invoices = await self.cr_invoice_repo.search(search=search, client_id=client_id, status=status_enum)
        clients = index_by_id(await self.client_repo.search())
        items = [await self._with_client_name(c, clients) for c in cr_invoices]
        return items, len(items)

    async def update_cr_invoice(self, cr_invoice_id: UUID, data: CrInvoiceUpdate) -> Optional[CrInvoiceResponse]:
        cr_invoice = await self.cr_invoice_repo.get(cr_invoice_id)
        if not cr_invoice:
            return None
        update_dict = data.model_dump(exclude_unset=True)
        start = update_dict.get("start_date", cr_invoice.start_date)
        end = update_dict.get("end_date", cr_invoice.end_date)
        if end < start:
            raise ValueError("End date cannot be before start date")
        async with self.unique_write("CR number already exists"):
            updated = await self.cr_invoice_repo.update(cr_invoice_id, **update_dict)
        await self.session.refresh(updated)
        return await self._with_client_name(updated)

    async def delete_cr_invoice(self, cr_invoice_id: UUID) -> bool:
        deleted = await self.cr_invoice_repo.delete(cr_invoice_id)
        await self.session.commit()
        return deleted
