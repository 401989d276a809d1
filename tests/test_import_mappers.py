"""
Row to payload mapping tests.
"""

import pytest

from infiniti_cms.imports.errors import RowMappingError
from infiniti_cms.imports.mappers import (
    ClientRef,
    ReferenceData,
    UserRef,
    map_agreement_row,
    map_client_row,
    map_cr_invoice_row,
    map_service_row,
    map_user_row,
)


@pytest.fixture
def refs() -> ReferenceData:
    return ReferenceData(
        clients=[
            ClientRef(id="c-1", name="Sample Airlines Ltd", employee_name="John Doe", assigned_csm_id="u-1"),
            ClientRef(id="c-2", name="Demo Travel Agency", employee_name=None, assigned_csm_id="u-1"),
            ClientRef(id="c-3", name="Orphan Tours", employee_name=None, assigned_csm_id=None),
        ],
        users=[UserRef(id="u-1", email="Casey.Manager@example.com", full_name="Casey Manager")],
    )


def test_client_row_is_trimmed_and_defaults_status():
    row = {
        "name": "  Sample Airlines Ltd ",
        "employeeName": "",
        "contactPerson": "Jane Smith",
        "email": "contact@sampleairlines.com",
        "phone": "",
        "address": "123 Airport Road",
        "gstTaxId": "GST123456789",
        "industry": "airlines",
        "region": "North America",
        "status": "",
    }

    assert map_client_row(row) == {
        "name": "Sample Airlines Ltd",
        "employee_name": None,
        "contact_person": "Jane Smith",
        "email": "contact@sampleairlines.com",
        "phone": None,
        "address": "123 Airport Road",
        "gst_tax_id": "GST123456789",
        "industry": "airlines",
        "region": "North America",
        "status": "active",
    }


def test_service_row_resolves_client_and_csm(refs):
    row = {
        "clientName": "sample airlines ltd",
        "serviceType": "Implementation",
        "description": "",
        "amount": "50000",
        "currency": "usd",
        "startDate": "2024-01-01",
        "goLiveDate": "",
        "billingCycle": "One-Time",
        "isRecurring": "TRUE",
        "assignedCsmEmail": "casey.manager@EXAMPLE.com",
        "invoiceNumber": "INV-2024-001",
        "invoiceDate": "01/15/2024",
        "status": "",
    }

    payload = map_service_row(row, refs)

    assert payload["client_id"] == "c-1"
    assert payload["service_type"] == "implementation"
    assert payload["description"] is None
    assert payload["amount"] == "50000"
    assert payload["currency"] == "USD"
    assert payload["start_date"] == "2024-01-01"
    assert payload["go_live_date"] is None
    assert payload["billing_cycle"] == "one-time"
    assert payload["is_recurring"] is True
    assert payload["assigned_csm_id"] == "u-1"
    assert payload["invoice_date"] == "2024-01-15"
    assert payload["status"] == "pending"


def test_unknown_csm_email_is_not_a_failure(refs):
    row = {"clientName": "Demo Travel Agency", "serviceType": "cr", "amount": "10", "currency": "INR",
           "assignedCsmEmail": "nobody@example.com"}

    assert map_service_row(row, refs)["assigned_csm_id"] is None


def test_unknown_client_fails_the_row(refs):
    row = {"clientName": "Ghost Airways", "serviceType": "cr", "amount": "10", "currency": "INR"}

    with pytest.raises(RowMappingError) as exc_info:
        map_service_row(row, refs)

    assert exc_info.value.message == "Client not found"


def test_unparseable_date_fails_the_row(refs):
    row = {"clientName": "Demo Travel Agency", "serviceType": "cr", "amount": "10", "currency": "INR",
           "startDate": "next tuesday"}

    with pytest.raises(RowMappingError) as exc_info:
        map_service_row(row, refs)

    assert exc_info.value.message == "Invalid startDate: next tuesday"


def test_agreement_row_maps_year_one_fee_to_value(refs):
    row = {
        "clientName": "Sample Airlines Ltd",
        "agreementName": "Annual Service Agreement 2024",
        "startDate": "2024-01-01",
        "endDate": "2024-12-31",
        "paymentTerms": "Net 30",
        "implementFees": "50000",
        "monthlySubscriptionFees": "",
        "changeRequestFees": "2000",
        "year1Fee": "120000",
        "currency": "usd",
        "status": "Active",
        "autoRenewal": "false",
    }

    payload = map_agreement_row(row, refs)

    assert payload["value"] == "120000"
    assert payload["implement_fees"] == "50000"
    assert payload["monthly_subscription_fees"] is None
    assert payload["status"] == "active"
    assert payload["auto_renewal"] is False
    assert payload["end_date"] == "2024-12-31"


def test_user_row_lowercases_role_and_status():
    row = {"email": " bob.wilson@example.com ", "username": "", "firstName": "Bob", "lastName": "Wilson",
           "role": "Finance", "department": "Finance", "status": "Inactive"}

    assert map_user_row(row) == {
        "email": "bob.wilson@example.com",
        "username": None,
        "first_name": "Bob",
        "last_name": "Wilson",
        "role": "finance",
        "department": "Finance",
        "status": "inactive",
    }


class TestCrInvoiceEmployeeName:
    def row(self, client_name, employee_name=""):
        return {
            "clientName": client_name,
            "crNo": "CR-2024-001",
            "employeeName": employee_name,
            "amount": "15000",
            "currency": "inr",
            "startDate": "2024-01-01",
            "endDate": "2024-01-31",
            "status": "",
        }

    def test_row_value_wins(self, refs):
        payload = map_cr_invoice_row(self.row("Sample Airlines Ltd", "Priya Nair"), refs)

        assert payload["employee_name"] == "Priya Nair"
        assert payload["cr_currency"] == "INR"
        assert payload["status"] == "initiated"

    def test_falls_back_to_client_employee_name(self, refs):
        payload = map_cr_invoice_row(self.row("Sample Airlines Ltd"), refs)

        assert payload["employee_name"] == "John Doe"

    def test_falls_back_to_assigned_csm(self, refs):
        payload = map_cr_invoice_row(self.row("Demo Travel Agency"), refs)

        assert payload["employee_name"] == "Casey Manager"

    def test_no_fallback_fails_the_row(self, refs):
        with pytest.raises(RowMappingError) as exc_info:
            map_cr_invoice_row(self.row("Orphan Tours"), refs)

        assert exc_info.value.message == "Employee name is required"


def test_reference_data_from_api_payloads():
    refs = ReferenceData.from_api(
        [{"id": "c-9", "name": "Acme", "employee_name": None, "assigned_csm_id": "u-9"}],
        [{"id": "u-9", "email": "a@b.com", "first_name": "Ann", "last_name": "Bee"}],
    )

    assert refs.find_client(" ACME ").id == "c-9"
    assert refs.get_user("u-9").full_name == "Ann Bee"
