"""
Bulk import controller.
"""

import io
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.imports.gateways import ServiceGateway
from infiniti_cms.imports.registry import ImportKind
from infiniti_cms.imports.session import ImportSession
from infiniti_cms.imports.submitter import import_file
from infiniti_cms.imports.templates import build_template, template_filename
from infiniti_cms.schemas.imports import ImportReportResponse


class ImportController(BaseController):
    """Controller for spreadsheet imports and their templates."""

    def __init__(self, session: AsyncSession):
        self.gateway = ServiceGateway(session)

    async def import_file(self, kind: ImportKind, filename: str, content: bytes) -> ImportReportResponse:
        session = ImportSession(kind=kind)
        report = await import_file(session, filename, content, self.gateway)
        return ImportReportResponse.model_validate(report)

    def template(self, kind: ImportKind) -> tuple[io.BytesIO, str]:
        return build_template(kind), template_filename(kind)
