"""
Sample template tests: generated workbooks re-parse into valid rows.
"""

import pytest
from openpyxl import load_workbook

from infiniti_cms.imports.parser import parse_file
from infiniti_cms.imports.registry import HANDLERS, ImportKind
from infiniti_cms.imports.templates import build_template, template_filename


@pytest.mark.parametrize("kind", list(ImportKind))
def test_template_rows_pass_validation(kind):
    handler = HANDLERS[kind]
    content = build_template(kind).getvalue()

    rows = parse_file(template_filename(kind), content)

    assert len(rows) == len(handler.sample_rows)
    assert list(rows[0].keys()) == list(handler.columns)
    for index, row in enumerate(rows):
        assert handler.validate(row, rows, index) is None


def test_template_header_is_styled():
    workbook = load_workbook(build_template("clients"))
    sheet = workbook.active

    assert sheet.title == "clients"
    assert sheet["A1"].value == "name"
    assert sheet["A1"].font.bold is True
    assert sheet["A2"].value == "Sample Airlines Ltd"


def test_template_filename():
    assert template_filename(ImportKind.CR_INVOICES) == "cr_invoices_import_template.xlsx"


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        build_template("invoices")
