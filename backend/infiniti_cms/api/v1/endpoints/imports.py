"""
Bulk import endpoints: spreadsheet upload and sample templates.
"""

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.api.v1.middleware import require_authentication
from infiniti_cms.core.exceptions import PermissionDeniedError
from infiniti_cms.core.permissions import has_permission
from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.import_controller import ImportController
from infiniti_cms.imports.registry import ImportKind
from infiniti_cms.models.user import User
from infiniti_cms.schemas.imports import ImportReportResponse

router = APIRouter()

# Permission needed to create each kind
WRITE_PERMISSIONS = {
    ImportKind.CLIENTS: "clients:write",
    ImportKind.SERVICES: "services:write",
    ImportKind.AGREEMENTS: "agreements:write",
    ImportKind.USERS: "users:write",
    ImportKind.CR_INVOICES: "invoices:write",
}


@router.post("/{kind}", response_model=ImportReportResponse)
async def import_records(
    kind: ImportKind,
    file: UploadFile = File(...),
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ImportReportResponse:
    """
    Import a CSV or Excel file, one create per row in file order.

    Row failures are reported in the response; only an unreadable file or an
    unsupported format fails the request.
    """
    permission = WRITE_PERMISSIONS[kind]
    if not has_permission(current_user.role, permission):
        raise PermissionDeniedError(permission)

    content = await file.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty",
        )

    controller = ImportController(db)
    return await controller.import_file(kind, file.filename, content)


@router.get("/{kind}/template")
async def download_template(
    kind: ImportKind,
    db: AsyncSession = Depends(get_db),
):
    """Sample workbook with the expected columns for a kind."""
    controller = ImportController(db)
    output, filename = controller.template(kind)
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={
            "Content-Disposition": f"attachment; filename={filename}"
        },
    )
