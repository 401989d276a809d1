"""
Bulk import report schemas.
"""

from pydantic import BaseModel
from typing import List, Optional

from infiniti_cms.imports.registry import ImportKind


class ImportRowResultResponse(BaseModel):
    """Outcome of one file row."""
    row: int
    label: str
    success: bool
    error: Optional[str] = None

    class Config:
        from_attributes = True


class ImportReportResponse(BaseModel):
    """Summary of a completed import run."""
    kind: ImportKind
    filename: Optional[str] = None
    total: int
    success_count: int
    failure_count: int
    results: List[ImportRowResultResponse]

    class Config:
        from_attributes = True
