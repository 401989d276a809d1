"""
File parser tests: CSV and Excel inputs reduce to the same keyed string rows.
"""

import io
from datetime import date, datetime

import pytest
from openpyxl import Workbook

from infiniti_cms.imports.errors import FileParseError, UnsupportedFileFormatError
from infiniti_cms.imports.parser import normalize_cell, parse_file


def _xlsx_bytes(rows) -> bytes:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    output = io.BytesIO()
    wb.save(output)
    return output.getvalue()


def test_csv_rows_are_keyed_by_header():
    content = b"name,industry,status\nSample Airlines Ltd,airlines,active\nDemo Travel Agency,travel_agency,\n"

    rows = parse_file("clients.csv", content)

    assert rows == [
        {"name": "Sample Airlines Ltd", "industry": "airlines", "status": "active"},
        {"name": "Demo Travel Agency", "industry": "travel_agency", "status": ""},
    ]


def test_csv_skips_blank_rows_and_strips_bom():
    content = "\ufeffname,industry\nAcme,ota\n\n,\nGlobex,gds\n".encode("utf-8")

    rows = parse_file("clients.CSV", content)

    assert [row["name"] for row in rows] == ["Acme", "Globex"]


def test_csv_quoted_commas_are_preserved():
    content = b'name,address\n"Acme","1 Road, City"\n'

    rows = parse_file("clients.csv", content)

    assert rows[0]["address"] == "1 Road, City"


def test_csv_with_only_a_header_yields_no_rows():
    assert parse_file("clients.csv", b"name,industry\n") == []


def test_xlsx_first_sheet_is_parsed_and_values_normalised():
    content = _xlsx_bytes([
        ["clientName", "amount", "startDate", "isRecurring"],
        ["Sample Airlines Ltd", 50000.0, datetime(2024, 1, 1), False],
        [None, None, None, None],
        ["Demo Travel Agency", 1200.5, date(2024, 2, 1), True],
    ])

    rows = parse_file("services.xlsx", content)

    assert rows == [
        {"clientName": "Sample Airlines Ltd", "amount": "50000", "startDate": "2024-01-01", "isRecurring": "false"},
        {"clientName": "Demo Travel Agency", "amount": "1200.5", "startDate": "2024-02-01", "isRecurring": "true"},
    ]


def test_unsupported_extension_is_rejected():
    with pytest.raises(UnsupportedFileFormatError) as exc_info:
        parse_file("clients.txt", b"name\nAcme\n")

    assert exc_info.value.message == "Unsupported file format. Please upload CSV or Excel file."
    assert exc_info.value.status_code == 400


def test_corrupt_xlsx_raises_parse_error():
    with pytest.raises(FileParseError):
        parse_file("clients.xlsx", b"definitely not a zip file")


def test_corrupt_xls_raises_parse_error():
    with pytest.raises(FileParseError):
        parse_file("clients.xls", b"definitely not a workbook")


def test_non_utf8_csv_raises_parse_error():
    with pytest.raises(FileParseError):
        parse_file("clients.csv", b"name\n\xff\xfe\xfa\n")


def test_row_limit_is_enforced():
    content = b"name\n" + b"".join(f"Client {i}\n".encode() for i in range(5))

    with pytest.raises(FileParseError) as exc_info:
        parse_file("clients.csv", content, max_rows=4)

    assert "5 rows" in exc_info.value.message


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (True, "true"),
        (3.0, "3"),
        (2.25, "2.25"),
        (7, "7"),
        (datetime(2024, 5, 6, 0, 0), "2024-05-06"),
        (datetime(2024, 5, 6, 13, 30), "2024-05-06T13:30:00"),
        ("  padded  ", "padded"),
    ],
)
def test_normalize_cell(value, expected):
    assert normalize_cell(value) == expected
