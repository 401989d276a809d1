"""
Gateways that create imported entities.

ServiceGateway calls the service layer in-process (upload endpoint);
HttpGateway posts to a running API (import CLI). Both turn every rejection
into SubmissionError carrying the message shown to the user.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.core.exceptions import summarize_validation_errors
from infiniti_cms.core.integrations.http.http_client import HttpClient, HttpClientError
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.user_repository import UserRepository
from infiniti_cms.imports.errors import SubmissionError
from infiniti_cms.imports.mappers import ReferenceData
from infiniti_cms.imports.registry import ImportKind, get_handler
from infiniti_cms.schemas.agreement import AgreementCreate
from infiniti_cms.schemas.client import ClientCreate
from infiniti_cms.schemas.invoice import CrInvoiceCreate
from infiniti_cms.schemas.service import ServiceCreate
from infiniti_cms.schemas.user import UserCreate
from infiniti_cms.services.agreement_service import AgreementService
from infiniti_cms.services.client_service import ClientService
from infiniti_cms.services.invoice_service import CrInvoiceService
from infiniti_cms.services.service_record_service import ServiceRecordService
from infiniti_cms.services.user_service import UserService

logger = logging.getLogger(__name__)

CLIENT_PAGE_SIZE = 10000


def error_message(body: Any, fallback: str) -> str:
    """Message from an API error body: error.message, error, message or detail."""
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if body.get("message"):
            return str(body["message"])
        if isinstance(body.get("detail"), str):
            return body["detail"]
    return fallback


class EntityGateway(ABC):
    """Creates one entity per call."""

    @abstractmethod
    async def fetch_references(self) -> ReferenceData:
        """Clients and users used to resolve names in the file."""

    @abstractmethod
    async def create(self, kind: ImportKind, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create one entity; raises SubmissionError when it is rejected."""


class ServiceGateway(EntityGateway):
    """In-process gateway; every create commits on its own."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._creators = {
            ImportKind.CLIENTS: (ClientCreate, ClientService(session).create_client),
            ImportKind.SERVICES: (ServiceCreate, ServiceRecordService(session).create_service),
            ImportKind.AGREEMENTS: (AgreementCreate, AgreementService(session).create_agreement),
            ImportKind.USERS: (UserCreate, UserService(session).create_user),
            ImportKind.CR_INVOICES: (CrInvoiceCreate, CrInvoiceService(session).create_cr_invoice),
        }

    async def fetch_references(self) -> ReferenceData:
        clients = await ClientRepository(self.session).search(limit=None)
        users = await UserRepository(self.session).list_all()
        return ReferenceData.from_models(clients, users)

    async def create(self, kind: ImportKind, payload: Dict[str, Any]) -> Dict[str, Any]:
        handler = get_handler(kind)
        schema, create = self._creators[handler.kind]
        try:
            created = await create(schema.model_validate(payload))
        except ValidationError as e:
            raise SubmissionError(summarize_validation_errors(e.errors()))
        except ValueError as e:
            raise SubmissionError(str(e) or f"Failed to create {handler.entity}")
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error creating {handler.entity}: {e}")
            raise SubmissionError(f"Failed to create {handler.entity}")
        return created.model_dump(mode="json")


class HttpGateway(EntityGateway):
    """Gateway that posts to the Infiniti CMS API."""

    def __init__(self, client: HttpClient):
        self.client = client

    async def fetch_references(self) -> ReferenceData:
        try:
            clients = await self.client.get("/clients", params={"limit": CLIENT_PAGE_SIZE})
        except HttpClientError as e:
            raise SubmissionError(error_message(e.body, f"Failed to load clients: {e.message}"))

        try:
            users = await self.client.get("/users")
        except HttpClientError as e:
            # Listing users needs users:read; CSM emails then stay unresolved.
            logger.warning(f"Could not load users, CSM emails will not be resolved: {e.message}")
            users = {"items": []}

        return ReferenceData.from_api(clients.get("items", []), users.get("items", []))

    async def create(self, kind: ImportKind, payload: Dict[str, Any]) -> Dict[str, Any]:
        handler = get_handler(kind)
        fallback = f"Failed to create {handler.entity}"
        try:
            return await self.client.post(handler.api_path, json=payload)
        except HttpClientError as e:
            if e.status is None:
                raise SubmissionError(e.message or fallback)
            raise SubmissionError(error_message(e.body, fallback))
