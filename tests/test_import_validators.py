"""
Row validator tests. Messages are shown to users verbatim.
"""

from datetime import date

import pytest

from infiniti_cms.imports.validators import (
    parse_date,
    validate_agreement_row,
    validate_client_row,
    validate_cr_invoice_row,
    validate_service_row,
    validate_user_row,
)


def client_row(**overrides):
    row = {"name": "Acme Air", "industry": "airlines", "status": "active", "email": "ops@acme.com", "gstTaxId": ""}
    row.update(overrides)
    return row


def service_row(**overrides):
    row = {
        "clientName": "Acme Air",
        "serviceType": "Implementation",
        "amount": "50000",
        "currency": "usd",
        "status": "pending",
        "billingCycle": "one-time",
        "isRecurring": "false",
    }
    row.update(overrides)
    return row


def agreement_row(**overrides):
    row = {
        "clientName": "Acme Air",
        "agreementName": "Annual Service Agreement 2024",
        "startDate": "2024-01-01",
        "endDate": "2024-12-31",
        "year1Fee": "120000",
        "currency": "USD",
        "status": "active",
        "autoRenewal": "false",
    }
    row.update(overrides)
    return row


def user_row(**overrides):
    row = {
        "email": "jane.smith@example.com",
        "username": "janesmith",
        "firstName": "Jane",
        "lastName": "Smith",
        "role": "csm",
        "status": "active",
    }
    row.update(overrides)
    return row


def cr_row(**overrides):
    row = {
        "clientName": "Acme Air",
        "crNo": "CR-2024-001",
        "amount": "15000",
        "currency": "INR",
        "startDate": "2024-01-01",
        "endDate": "2024-01-31",
        "status": "initiated",
    }
    row.update(overrides)
    return row


class TestClientRows:
    def test_valid_row(self):
        assert validate_client_row(client_row()) is None

    def test_missing_industry(self):
        assert validate_client_row(client_row(industry="")) == "Industry is required"

    def test_name_is_checked_first(self):
        assert validate_client_row(client_row(name="  ", industry="")) == "Client name is required"

    def test_industry_is_case_sensitive(self):
        assert validate_client_row(client_row(industry="Airlines")) == (
            "Invalid industry. Must be one of: airlines, travel_agency, gds, ota, aviation_services"
        )

    def test_status_is_case_sensitive(self):
        assert validate_client_row(client_row(status="Active")) == (
            "Invalid status. Must be one of: active, inactive"
        )

    def test_invalid_email(self):
        assert validate_client_row(client_row(email="not-an-email")) == "Invalid email format"

    def test_duplicate_email_reports_other_row_number(self):
        rows = [
            client_row(name="Acme Air", email="ops@acme.com"),
            client_row(name="Globex", email=" OPS@acme.com "),
        ]

        assert validate_client_row(rows[1], rows, 1) == "Duplicate email found in row 2"
        assert validate_client_row(rows[0], rows, 0) == "Duplicate email found in row 3"

    def test_duplicate_name_is_case_insensitive(self):
        rows = [client_row(name="Acme Air", email=""), client_row(name="acme air", email="")]

        assert validate_client_row(rows[1], rows, 1) == "Duplicate name found in row 2"

    def test_duplicate_gst_is_case_sensitive(self):
        rows = [
            client_row(name="A", email="", gstTaxId="GST1"),
            client_row(name="B", email="", gstTaxId="gst1"),
            client_row(name="C", email="", gstTaxId=" GST1 "),
        ]

        assert validate_client_row(rows[1], rows, 1) is None
        assert validate_client_row(rows[2], rows, 2) == "Duplicate GST/Tax ID found in row 2"

    def test_duplicates_ignored_without_context(self):
        assert validate_client_row(client_row()) is None


class TestServiceRows:
    def test_valid_row_with_mixed_case_enums(self):
        assert validate_service_row(service_row()) is None

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"clientName": ""}, "Client name is required"),
            ({"serviceType": ""}, "Service type is required"),
            (
                {"serviceType": "consulting"},
                "Invalid service type. Must be one of: implementation, cr, subscription, hosting, others",
            ),
            ({"amount": ""}, "Valid amount is required"),
            ({"amount": "12abc"}, "Valid amount is required"),
            ({"currency": ""}, "Currency is required"),
            ({"currency": "GBP"}, "Invalid currency. Must be one of: INR, USD, EUR"),
            ({"status": "overdue"}, "Invalid status. Must be one of: pending, paid"),
            (
                {"billingCycle": "weekly"},
                "Invalid billing cycle. Must be one of: one-time, monthly, quarterly, semi-annual, annual",
            ),
            ({"isRecurring": "yes"}, "isRecurring must be true or false"),
        ],
    )
    def test_rule_messages(self, overrides, message):
        assert validate_service_row(service_row(**overrides)) == message

    def test_optional_fields_may_be_blank(self):
        assert validate_service_row(service_row(status="", billingCycle="", isRecurring="")) is None


class TestAgreementRows:
    def test_valid_row(self):
        assert validate_agreement_row(agreement_row()) is None

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"agreementName": ""}, "Agreement name is required"),
            ({"startDate": ""}, "Start date is required"),
            ({"endDate": ""}, "End date is required"),
            ({"year1Fee": "n/a"}, "Valid Year 1 fee is required"),
            ({"status": "expired"}, "Invalid status. Must be one of: active, inactive"),
            ({"autoRenewal": "maybe"}, "autoRenewal must be true or false"),
            ({"implementFees": "lots"}, "Invalid implement fees: lots"),
            ({"startDate": "sometime"}, "Invalid startDate: sometime"),
        ],
    )
    def test_rule_messages(self, overrides, message):
        assert validate_agreement_row(agreement_row(**overrides)) == message

    def test_end_date_must_follow_start_date(self):
        row = agreement_row(startDate="2024-12-31", endDate="2024-01-01")

        assert validate_agreement_row(row) == "End date must be after start date"

    def test_us_style_dates_are_accepted(self):
        assert validate_agreement_row(agreement_row(startDate="01/01/2024", endDate="12/31/2024")) is None

    def test_utc_timestamps_are_accepted(self):
        row = agreement_row(startDate="2024-01-01T00:00:00Z", endDate="2024-12-31T23:59:59z")

        assert validate_agreement_row(row) is None


class TestUserRows:
    def test_valid_row(self):
        assert validate_user_row(user_row()) is None

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"email": ""}, "Email is required"),
            ({"email": "jane@"}, "Invalid email format"),
            ({"firstName": ""}, "First name is required"),
            ({"lastName": ""}, "Last name is required"),
            ({"role": ""}, "Role is required"),
            ({"role": "owner"}, "Invalid role. Must be one of: admin, csm, finance, viewer"),
            ({"status": "banned"}, "Invalid status. Must be one of: active, inactive, pending"),
        ],
    )
    def test_rule_messages(self, overrides, message):
        assert validate_user_row(user_row(**overrides)) == message

    def test_role_is_case_insensitive(self):
        assert validate_user_row(user_row(role="Finance")) is None

    def test_duplicate_username(self):
        rows = [user_row(), user_row(email="other@example.com", username="JaneSmith")]

        assert validate_user_row(rows[1], rows, 1) == "Duplicate username found in row 2"


class TestCrInvoiceRows:
    def test_valid_row(self):
        assert validate_cr_invoice_row(cr_row()) is None

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"crNo": ""}, "CR number is required"),
            ({"amount": "-"}, "Valid amount is required"),
            ({"currency": "JPY"}, "Invalid currency. Must be one of: INR, USD, EUR"),
            ({"startDate": ""}, "Start date is required"),
            ({"endDate": ""}, "End date is required"),
            ({"status": "paid"}, "Invalid status. Must be one of: initiated, pending, approved"),
        ],
    )
    def test_rule_messages(self, overrides, message):
        assert validate_cr_invoice_row(cr_row(**overrides)) == message


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-03-05", date(2024, 3, 5)),
        ("2024-03-05T10:30:00", date(2024, 3, 5)),
        ("2024-03-05T10:30:00Z", date(2024, 3, 5)),
        ("2024-03-05T10:30:00.250Z", date(2024, 3, 5)),
        ("2024-03-05 10:30:00+05:30", date(2024, 3, 5)),
        ("03/05/2024", date(2024, 3, 5)),
        ("05-Mar-2024", date(2024, 3, 5)),
        ("  ", None),
        ("Z", None),
        ("next week", None),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected
