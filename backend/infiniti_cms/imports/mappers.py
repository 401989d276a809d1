"""
Row to create-payload mappers for bulk imports.

Payloads use the snake_case keys of the Create schemas and contain only JSON
types, so the same dict can be validated in-process or posted over HTTP.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from infiniti_cms.imports.errors import RowMappingError
from infiniti_cms.imports.validators import parse_date, parse_number, text


@dataclass(frozen=True)
class ClientRef:
    id: str
    name: str
    employee_name: Optional[str] = None
    assigned_csm_id: Optional[str] = None


@dataclass(frozen=True)
class UserRef:
    id: str
    email: str
    full_name: Optional[str] = None


@dataclass
class ReferenceData:
    """Clients and users known before the import loop starts."""
    clients: List[ClientRef] = field(default_factory=list)
    users: List[UserRef] = field(default_factory=list)

    @classmethod
    def from_models(cls, clients: Iterable[Any], users: Iterable[Any]) -> "ReferenceData":
        return cls(
            clients=[
                ClientRef(
                    id=str(client.id),
                    name=client.name,
                    employee_name=client.employee_name,
                    assigned_csm_id=str(client.assigned_csm_id) if client.assigned_csm_id else None,
                )
                for client in clients
            ],
            users=[UserRef(id=str(user.id), email=user.email, full_name=user.full_name) for user in users],
        )

    @classmethod
    def from_api(cls, clients: Iterable[Dict[str, Any]], users: Iterable[Dict[str, Any]]) -> "ReferenceData":
        """Build from the `items` of the client and user list endpoints."""
        user_refs = []
        for user in users:
            name = " ".join(part for part in (user.get("first_name"), user.get("last_name")) if part)
            user_refs.append(UserRef(id=str(user["id"]), email=user["email"], full_name=name or None))
        return cls(
            clients=[
                ClientRef(
                    id=str(client["id"]),
                    name=client["name"],
                    employee_name=client.get("employee_name"),
                    assigned_csm_id=client.get("assigned_csm_id"),
                )
                for client in clients
            ],
            users=user_refs,
        )

    def find_client(self, name: str) -> Optional[ClientRef]:
        target = name.strip().lower()
        for client in self.clients:
            if client.name.strip().lower() == target:
                return client
        return None

    def find_user_by_email(self, email: str) -> Optional[UserRef]:
        target = email.strip().lower()
        for user in self.users:
            if user.email and user.email.lower() == target:
                return user
        return None

    def get_user(self, user_id: Optional[str]) -> Optional[UserRef]:
        if not user_id:
            return None
        for user in self.users:
            if user.id == str(user_id):
                return user
        return None


def _optional(row, key: str) -> Optional[str]:
    return text(row, key) or None


def _lower(row, key: str, default: Optional[str] = None) -> Optional[str]:
    value = text(row, key)
    return value.lower() if value else default


def _boolean(row, key: str) -> bool:
    return text(row, key).lower() == "true"


def _number(row, key: str) -> Optional[str]:
    value = text(row, key)
    if not value:
        return None
    number = parse_number(value)
    if number is None:
        raise RowMappingError(f"Invalid {key}: {value}")
    return str(number)


def _date(row, key: str) -> Optional[str]:
    value = text(row, key)
    if not value:
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise RowMappingError(f"Invalid {key}: {value}")
    return parsed.isoformat()


def _client(row, refs: ReferenceData) -> ClientRef:
    client = refs.find_client(text(row, "clientName"))
    if client is None:
        raise RowMappingError("Client not found")
    return client


def map_client_row(row, refs: Optional[ReferenceData] = None) -> Dict[str, Any]:
    return {
        "name": text(row, "name"),
        "employee_name": _optional(row, "employeeName"),
        "contact_person": _optional(row, "contactPerson"),
        "email": _optional(row, "email"),
        "phone": _optional(row, "phone"),
        "address": _optional(row, "address"),
        "gst_tax_id": _optional(row, "gstTaxId"),
        "industry": text(row, "industry"),
        "region": _optional(row, "region"),
        "status": text(row, "status") or "active",
    }


def map_service_row(row, refs: ReferenceData) -> Dict[str, Any]:
    client = _client(row, refs)

    assigned_csm_id = None
    csm_email = text(row, "assignedCsmEmail")
    if csm_email:
        csm = refs.find_user_by_email(csm_email)
        if csm:
            assigned_csm_id = csm.id

    return {
        "client_id": client.id,
        "service_type": text(row, "serviceType").lower(),
        "description": _optional(row, "description"),
        "amount": _number(row, "amount"),
        "currency": text(row, "currency").upper(),
        "start_date": _date(row, "startDate"),
        "go_live_date": _date(row, "goLiveDate"),
        "billing_cycle": _lower(row, "billingCycle"),
        "is_recurring": _boolean(row, "isRecurring"),
        "assigned_csm_id": assigned_csm_id,
        "invoice_number": _optional(row, "invoiceNumber"),
        "invoice_date": _date(row, "invoiceDate"),
        "status": _lower(row, "status", "pending"),
    }


def map_agreement_row(row, refs: ReferenceData) -> Dict[str, Any]:
    client = _client(row, refs)
    return {
        "client_id": client.id,
        "agreement_name": text(row, "agreementName"),
        "start_date": _date(row, "startDate"),
        "end_date": _date(row, "endDate"),
        "value": _number(row, "year1Fee"),
        "currency": text(row, "currency").upper(),
        "implement_fees": _number(row, "implementFees"),
        "monthly_subscription_fees": _number(row, "monthlySubscriptionFees"),
        "change_request_fees": _number(row, "changeRequestFees"),
        "payment_terms": _optional(row, "paymentTerms"),
        "status": _lower(row, "status", "active"),
        "auto_renewal": _boolean(row, "autoRenewal"),
    }


def map_user_row(row, refs: Optional[ReferenceData] = None) -> Dict[str, Any]:
    return {
        "email": text(row, "email"),
        "username": _optional(row, "username"),
        "first_name": text(row, "firstName"),
        "last_name": text(row, "lastName"),
        "role": text(row, "role").lower(),
        "department": _optional(row, "department"),
        "status": _lower(row, "status", "active"),
    }


def map_cr_invoice_row(row, refs: ReferenceData) -> Dict[str, Any]:
    client = _client(row, refs)

    employee_name = text(row, "employeeName") or client.employee_name
    if not employee_name:
        csm = refs.get_user(client.assigned_csm_id)
        employee_name = csm.full_name if csm else None
    if not employee_name:
        raise RowMappingError("Employee name is required")

    return {
        "client_id": client.id,
        "employee_name": employee_name,
        "cr_no": text(row, "crNo"),
        "cr_currency": text(row, "currency").upper(),
        "amount": _number(row, "amount"),
        "start_date": _date(row, "startDate"),
        "end_date": _date(row, "endDate"),
        "status": _lower(row, "status", "initiated"),
    }
