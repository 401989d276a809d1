"""
Row validators for bulk imports.

Each validator returns the first failing rule's message, or None when the row
is acceptable. Rows are keyed by the template's camelCase column names.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Mapping, Optional, Sequence

from infiniti_cms.models.client import ClientStatus, Industry
from infiniti_cms.models.currency import Currency
from infiniti_cms.models.invoice import CrInvoiceStatus
from infiniti_cms.models.service import BillingCycle, ServiceStatus, ServiceType
from infiniti_cms.models.user import UserStatus

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%Y/%m/%d", "%d-%b-%Y")
BOOLEAN_VALUES = ("true", "false")

AGREEMENT_STATUSES = ("active", "inactive")
USER_ROLES = ("admin", "csm", "finance", "viewer")
OPTIONAL_FEE_COLUMNS = (
    ("implementFees", "implement fees"),
    ("monthlySubscriptionFees", "monthly subscription fees"),
    ("changeRequestFees", "change request fees"),
)


def text(row: Mapping[str, object], key: str) -> str:
    value = row.get(key)
    if value is None:
        return ""
    return str(value).strip()


def parse_number(value: str) -> Optional[Decimal]:
    """Decimal value of a numeric cell, or None when it is not a finite number."""
    try:
        number = Decimal(value)
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def parse_date(value: str) -> Optional[date]:
    """Accepts ISO dates (with or without time) and a few common spreadsheet formats."""
    value = value.strip()
    if not value:
        return None
    if value[-1] in "Zz":
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def _values(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def _one_of(values: Sequence[str]) -> str:
    return ", ".join(values)


def _duplicate_row(
    all_rows: Optional[Sequence[Mapping[str, object]]],
    row_index: Optional[int],
    key: str,
    value: str,
    normalize: Callable[[str], str],
) -> Optional[int]:
    """Row number (index + 2) of the first other row sharing the value."""
    if not all_rows or row_index is None or not value:
        return None
    target = normalize(value)
    for index, other in enumerate(all_rows):
        if index == row_index:
            continue
        other_value = text(other, key)
        if other_value and normalize(other_value) == target:
            return index + 2
    return None


def validate_client_row(row, all_rows=None, row_index=None) -> Optional[str]:
    name = text(row, "name")
    if not name:
        return "Client name is required"

    industry = text(row, "industry")
    if not industry:
        return "Industry is required"
    if industry not in _values(Industry):
        return f"Invalid industry. Must be one of: {_one_of(_values(Industry))}"

    status = text(row, "status")
    if status and status not in _values(ClientStatus):
        return f"Invalid status. Must be one of: {_one_of(_values(ClientStatus))}"

    email = text(row, "email")
    if email and not EMAIL_PATTERN.match(email):
        return "Invalid email format"

    duplicate = _duplicate_row(all_rows, row_index, "name", name, str.lower)
    if duplicate:
        return f"Duplicate name found in row {duplicate}"

    duplicate = _duplicate_row(all_rows, row_index, "email", email, str.lower)
    if duplicate:
        return f"Duplicate email found in row {duplicate}"

    duplicate = _duplicate_row(all_rows, row_index, "gstTaxId", text(row, "gstTaxId"), str)
    if duplicate:
        return f"Duplicate GST/Tax ID found in row {duplicate}"

    return None


def _check_currency(row) -> Optional[str]:
    currency = text(row, "currency")
    if not currency:
        return "Currency is required"
    if currency.upper() not in _values(Currency):
        return f"Invalid currency. Must be one of: {_one_of(_values(Currency))}"
    return None


def _check_boolean(row, key: str) -> Optional[str]:
    value = text(row, key)
    if value and value.lower() not in BOOLEAN_VALUES:
        return f"{key} must be true or false"
    return None


def validate_service_row(row, all_rows=None, row_index=None) -> Optional[str]:
    if not text(row, "clientName"):
        return "Client name is required"

    service_type = text(row, "serviceType")
    if not service_type:
        return "Service type is required"
    if service_type.lower() not in _values(ServiceType):
        return f"Invalid service type. Must be one of: {_one_of(_values(ServiceType))}"

    amount = text(row, "amount")
    if not amount or parse_number(amount) is None:
        return "Valid amount is required"

    error = _check_currency(row)
    if error:
        return error

    status = text(row, "status")
    if status and status.lower() not in _values(ServiceStatus):
        return f"Invalid status. Must be one of: {_one_of(_values(ServiceStatus))}"

    billing_cycle = text(row, "billingCycle")
    if billing_cycle and billing_cycle.lower() not in _values(BillingCycle):
        return f"Invalid billing cycle. Must be one of: {_one_of(_values(BillingCycle))}"

    return _check_boolean(row, "isRecurring")


def validate_agreement_row(row, all_rows=None, row_index=None) -> Optional[str]:
    if not text(row, "clientName"):
        return "Client name is required"
    if not text(row, "agreementName"):
        return "Agreement name is required"

    start = text(row, "startDate")
    if not start:
        return "Start date is required"
    end = text(row, "endDate")
    if not end:
        return "End date is required"

    year1_fee = text(row, "year1Fee")
    if not year1_fee or parse_number(year1_fee) is None:
        return "Valid Year 1 fee is required"

    error = _check_currency(row)
    if error:
        return error

    status = text(row, "status")
    if status and status.lower() not in AGREEMENT_STATUSES:
        return f"Invalid status. Must be one of: {_one_of(AGREEMENT_STATUSES)}"

    error = _check_boolean(row, "autoRenewal")
    if error:
        return error

    for key, label in OPTIONAL_FEE_COLUMNS:
        value = text(row, key)
        if value and parse_number(value) is None:
            return f"Invalid {label}: {value}"

    start_date = parse_date(start)
    if start_date is None:
        return f"Invalid startDate: {start}"
    end_date = parse_date(end)
    if end_date is None:
        return f"Invalid endDate: {end}"
    if end_date <= start_date:
        return "End date must be after start date"

    return None


def validate_user_row(row, all_rows=None, row_index=None) -> Optional[str]:
    email = text(row, "email")
    if not email:
        return "Email is required"
    if not EMAIL_PATTERN.match(email):
        return "Invalid email format"

    if not text(row, "firstName"):
        return "First name is required"
    if not text(row, "lastName"):
        return "Last name is required"

    role = text(row, "role")
    if not role:
        return "Role is required"
    if role.lower() not in USER_ROLES:
        return f"Invalid role. Must be one of: {_one_of(USER_ROLES)}"

    status = text(row, "status")
    if status and status.lower() not in _values(UserStatus):
        return f"Invalid status. Must be one of: {_one_of(_values(UserStatus))}"

    duplicate = _duplicate_row(all_rows, row_index, "email", email, str.lower)
    if duplicate:
        return f"Duplicate email found in row {duplicate}"

    duplicate = _duplicate_row(all_rows, row_index, "username", text(row, "username"), str.lower)
    if duplicate:
        return f"Duplicate username found in row {duplicate}"

    return None


def validate_cr_invoice_row(row, all_rows=None, row_index=None) -> Optional[str]:
    if not text(row, "clientName"):
        return "Client name is required"
    if not text(row, "crNo"):
        return "CR number is required"

    amount = text(row, "amount")
    if not amount or parse_number(amount) is None:
        return "Valid amount is required"

    error = _check_currency(row)
    if error:
        return error

    if not text(row, "startDate"):
        return "Start date is required"
    if not text(row, "endDate"):
        return "End date is required"

    status = text(row, "status")
    if status and status.lower() not in _values(CrInvoiceStatus):
        return f"Invalid status. Must be one of: {_one_of(_values(CrInvoiceStatus))}"

    return None
