"""
Spreadsheet and CSV parsing for bulk imports.

Every format is reduced to the same shape: a list of rows keyed by the header
cells of the first row, with every value normalised to a stripped string.
"""

import csv
import io
import logging
import zipfile
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional, Sequence

import xlrd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from infiniti_cms.core.config import settings
from infiniti_cms.imports.errors import FileParseError, UnsupportedFileFormatError

logger = logging.getLogger(__name__)

Row = Dict[str, str]

SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xls")


def normalize_cell(value: Any) -> str:
    """Render a cell value the way a user typed it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def rows_from_matrix(matrix: Iterable[Sequence[Any]]) -> List[Row]:
    """
    Build keyed rows from a header row followed by data rows.
    Blank rows are dropped; short rows are padded with empty strings.
    """
    iterator = iter(matrix)
    header_cells = next(iterator, None)
    if header_cells is None:
        return []
    headers = [normalize_cell(cell) for cell in header_cells]

    rows: List[Row] = []
    for cells in iterator:
        values = [normalize_cell(cell) for cell in cells]
        if not any(values):
            continue
        row = {}
        for position, header in enumerate(headers):
            if not header:
                continue
            row[header] = values[position] if position < len(values) else ""
        rows.append(row)
    return rows


def _extension(filename: str) -> str:
    name = (filename or "").lower()
    for extension in SUPPORTED_EXTENSIONS:
        if name.endswith(extension):
            return extension
    return ""


def _parse_csv(content: bytes) -> List[Row]:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileParseError("Failed to parse CSV file: file is not UTF-8 encoded", details=str(e))
    try:
        return rows_from_matrix(csv.reader(io.StringIO(text)))
    except csv.Error as e:
        raise FileParseError(f"Failed to parse CSV file: {e}")


def _parse_xlsx(content: bytes) -> List[Row]:
    try:
        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
        raise FileParseError(f"Failed to parse Excel file: {e}")
    try:
        if not workbook.worksheets:
            return []
        sheet = workbook.worksheets[0]
        return rows_from_matrix(sheet.iter_rows(values_only=True))
    finally:
        workbook.close()


def _xls_cell(cell, datemode: int) -> Any:
    if cell.ctype == xlrd.XL_CELL_DATE:
        return xlrd.xldate_as_datetime(cell.value, datemode)
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
        return None
    return cell.value


def _parse_xls(content: bytes) -> List[Row]:
    try:
        book = xlrd.open_workbook(file_contents=content)
    except (xlrd.XLRDError, ValueError, OSError) as e:
        raise FileParseError(f"Failed to parse Excel file: {e}")
    if book.nsheets == 0:
        return []
    sheet = book.sheet_by_index(0)
    matrix = (
        [_xls_cell(cell, book.datemode) for cell in sheet.row(index)]
        for index in range(sheet.nrows)
    )
    return rows_from_matrix(matrix)


def parse_file(filename: str, content: bytes, max_rows: Optional[int] = None) -> List[Row]:
    """
    Parse an uploaded file into keyed string rows.

    Raises:
        UnsupportedFileFormatError: extension is not .csv, .xlsx or .xls
        FileParseError: content is unreadable or has too many rows
    """
    extension = _extension(filename)
    if extension == ".csv":
        rows = _parse_csv(content)
    elif extension == ".xlsx":
        rows = _parse_xlsx(content)
    elif extension == ".xls":
        rows = _parse_xls(content)
    else:
        raise UnsupportedFileFormatError(filename)

    limit = max_rows if max_rows is not None else settings.IMPORT_MAX_ROWS
    if len(rows) > limit:
        raise FileParseError(f"File has {len(rows)} rows; at most {limit} can be imported at once")

    logger.info(f"Parsed {len(rows)} rows from {filename}", extra={"filename": filename, "rows": len(rows)})
    return rows
