"""
Bulk import exceptions.
"""

from fastapi import status

from infiniti_cms.core.exceptions import AppException


class BulkImportError(AppException):
    """Base class for import failures."""
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST, details=None):
        super().__init__(message, status_code=status_code, details=details)


class FileParseError(BulkImportError):
    """The uploaded file could not be read. Aborts the whole run."""


class UnsupportedFileFormatError(FileParseError):
    def __init__(self, filename: str = None):
        super().__init__(
            "Unsupported file format. Please upload CSV or Excel file.",
            details=filename,
        )


class RowMappingError(BulkImportError):
    """A validated row could not be turned into a create payload."""


class SubmissionError(BulkImportError):
    """The create request for a row was rejected."""
