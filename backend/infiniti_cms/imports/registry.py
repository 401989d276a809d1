"""
Import kinds and the validator/mapper pair registered for each.
"""

import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from infiniti_cms.imports import mappers, validators
from infiniti_cms.imports.validators import text


class ImportKind(str, enum.Enum):
    """Entity kinds that can be bulk imported."""
    CLIENTS = "clients"
    SERVICES = "services"
    AGREEMENTS = "agreements"
    USERS = "users"
    CR_INVOICES = "cr_invoices"


Validator = Callable[..., Optional[str]]
Mapper = Callable[..., Dict[str, Any]]


@dataclass(frozen=True)
class ImportHandler:
    kind: ImportKind
    entity: str
    api_path: str
    columns: Tuple[str, ...]
    sample_rows: Tuple[Tuple[str, ...], ...]
    validate: Validator
    map: Mapper
    label_columns: Tuple[str, ...]
    needs_references: bool = False

    def label(self, row: Mapping[str, Any]) -> str:
        """Human readable name of a row for the result list."""
        parts = [text(row, column) or "Unknown" for column in self.label_columns]
        return " - ".join(parts)

    def sample_dicts(self) -> List[Dict[str, str]]:
        return [dict(zip(self.columns, values)) for values in self.sample_rows]


HANDLERS: Dict[ImportKind, ImportHandler] = {
    ImportKind.CLIENTS: ImportHandler(
        kind=ImportKind.CLIENTS,
        entity="client",
        api_path="/clients",
        columns=(
            "name", "employeeName", "contactPerson", "email", "phone",
            "address", "gstTaxId", "industry", "region", "status",
        ),
        sample_rows=(
            (
                "Sample Airlines Ltd", "John Doe", "Jane Smith", "contact@sampleairlines.com",
                "+1-234-567-8900", "123 Airport Road, City, Country", "GST123456789",
                "airlines", "North America", "active",
            ),
            (
                "Demo Travel Agency", "Alice Johnson", "Bob Williams", "info@demotravel.com",
                "+1-234-567-8901", "456 Main Street, City, Country", "GST987654321",
                "travel_agency", "Europe", "active",
            ),
        ),
        validate=validators.validate_client_row,
        map=mappers.map_client_row,
        label_columns=("name",),
    ),
    ImportKind.SERVICES: ImportHandler(
        kind=ImportKind.SERVICES,
        entity="service",
        api_path="/services",
        columns=(
            "clientName", "serviceType", "description", "amount", "currency",
            "startDate", "goLiveDate", "billingCycle", "isRecurring",
            "assignedCsmEmail", "invoiceNumber", "invoiceDate", "status",
        ),
        sample_rows=(
            (
                "Sample Airlines Ltd", "implementation", "Booking engine implementation", "50000", "USD",
                "2024-01-01", "2024-03-01", "one-time", "false",
                "admin@example.com", "INV-2024-001", "2024-01-15", "paid",
            ),
            (
                "Demo Travel Agency", "subscription", "Monthly platform subscription", "1200", "USD",
                "2024-02-01", "2024-02-01", "monthly", "true",
                "", "", "", "pending",
            ),
        ),
        validate=validators.validate_service_row,
        map=mappers.map_service_row,
        label_columns=("clientName", "serviceType"),
        needs_references=True,
    ),
    ImportKind.AGREEMENTS: ImportHandler(
        kind=ImportKind.AGREEMENTS,
        entity="agreement",
        api_path="/agreements",
        columns=(
            "clientName", "agreementName", "startDate", "endDate", "paymentTerms",
            "implementFees", "monthlySubscriptionFees", "changeRequestFees",
            "year1Fee", "year2Fee", "year3Fee", "currency", "status", "autoRenewal",
        ),
        sample_rows=(
            (
                "Sample Airlines Ltd", "Annual Service Agreement 2024", "2024-01-01", "2024-12-31", "Net 30",
                "50000", "5000", "2000",
                "120000", "130000", "140000", "USD", "active", "false",
            ),
            (
                "Demo Travel Agency", "Platform Subscription Agreement", "2024-06-01", "2025-05-31", "Net 45",
                "25000", "3000", "1500",
                "60000", "", "", "USD", "active", "true",
            ),
        ),
        validate=validators.validate_agreement_row,
        map=mappers.map_agreement_row,
        label_columns=("clientName", "agreementName"),
        needs_references=True,
    ),
    ImportKind.USERS: ImportHandler(
        kind=ImportKind.USERS,
        entity="user",
        api_path="/users",
        columns=("email", "username", "firstName", "lastName", "role", "department", "status"),
        sample_rows=(
            ("john.doe@example.com", "johndoe", "John", "Doe", "viewer", "Sales", "active"),
            ("jane.smith@example.com", "janesmith", "Jane", "Smith", "csm", "Customer Success", "active"),
            ("bob.wilson@example.com", "bobwilson", "Bob", "Wilson", "finance", "Finance", "active"),
        ),
        validate=validators.validate_user_row,
        map=mappers.map_user_row,
        label_columns=("email",),
    ),
    ImportKind.CR_INVOICES: ImportHandler(
        kind=ImportKind.CR_INVOICES,
        entity="CR invoice",
        api_path="/cr-invoices",
        columns=("clientName", "crNo", "employeeName", "amount", "currency", "startDate", "endDate", "status"),
        sample_rows=(
            ("Sample Airlines Ltd", "CR-2024-001", "John Doe", "15000", "INR", "2024-01-01", "2024-01-31", "initiated"),
            ("Demo Travel Agency", "CR-2024-002", "", "8500", "USD", "2024-02-01", "2024-02-29", "pending"),
        ),
        validate=validators.validate_cr_invoice_row,
        map=mappers.map_cr_invoice_row,
        label_columns=("clientName", "crNo"),
        needs_references=True,
    ),
}


def get_handler(kind) -> ImportHandler:
    """Handler for an ImportKind or its string value."""
    try:
        return HANDLERS[ImportKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown import kind: {kind}. Must be one of: {', '.join(k.value for k in ImportKind)}")


def import_kinds() -> Sequence[str]:
    return [kind.value for kind in ImportKind]
