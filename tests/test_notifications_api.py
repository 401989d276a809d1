"""
Urgent case feed tests: severity bands for overdue invoices and expiring agreements.
"""

from datetime import date, timedelta

import pytest

from infiniti_cms.models.agreement import Agreement
from infiniti_cms.models.currency import Currency
from infiniti_cms.models.invoice import Invoice, InvoiceStatus
from infiniti_cms.services.notification_service import (
    NotificationService,
    expiry_severity,
    overdue_severity,
)

TODAY = date(2024, 6, 1)


@pytest.mark.parametrize(
    "days, severity",
    [
        (14, None),
        (15, "medium"),
        (29, "medium"),
        (30, "high"),
        (44, "high"),
        (45, "critical"),
    ],
)
def test_overdue_severity_bands(days, severity):
    assert overdue_severity(days) == severity


@pytest.mark.parametrize(
    "days, severity",
    [
        (0, None),
        (1, "high"),
        (14, "high"),
        (15, "medium"),
        (30, "medium"),
        (31, "low"),
        (60, "low"),
        (61, None),
    ],
)
def test_expiry_severity_bands(days, severity):
    assert expiry_severity(days) == severity


def add_overdue_invoice(session, client, days_overdue):
    session.add(Invoice(
        client_id=client.id,
        invoice_number=f"INV-{days_overdue}",
        amount=500,
        currency=Currency.INR,
        issue_date=TODAY - timedelta(days=days_overdue + 30),
        due_date=TODAY - timedelta(days=days_overdue),
        status=InvoiceStatus.OVERDUE,
    ))


def add_agreement(session, client, days_left):
    session.add(Agreement(
        client_id=client.id,
        agreement_name=f"Agreement {days_left}",
        start_date=TODAY - timedelta(days=365),
        end_date=TODAY + timedelta(days=days_left),
    ))


async def test_urgent_cases_at_band_edges_sorted_by_severity(test_db_session, sample_client):
    for days in (14, 15, 29, 30, 44, 45):
        add_overdue_invoice(test_db_session, sample_client, days)
    for days in (0, 1, 14, 15, 30, 31, 60, 61):
        add_agreement(test_db_session, sample_client, days)
    await test_db_session.commit()

    cases = await NotificationService(test_db_session).get_urgent_cases(today=TODAY)

    found = {(case.type, case.days): case.severity for case in cases}
    assert found == {
        ("overdue_payment", 15): "medium",
        ("overdue_payment", 29): "medium",
        ("overdue_payment", 30): "high",
        ("overdue_payment", 44): "high",
        ("overdue_payment", 45): "critical",
        ("agreement_renewal", 1): "high",
        ("agreement_renewal", 14): "high",
        ("agreement_renewal", 15): "medium",
        ("agreement_renewal", 30): "medium",
        ("agreement_renewal", 31): "low",
        ("agreement_renewal", 60): "low",
    }
    assert [case.severity for case in cases] == (
        ["critical"] + ["high"] * 4 + ["medium"] * 4 + ["low"] * 2
    )


async def test_urgent_case_messages(test_db_session, sample_client):
    add_overdue_invoice(test_db_session, sample_client, 30)
    add_agreement(test_db_session, sample_client, 10)
    await test_db_session.commit()

    cases = await NotificationService(test_db_session).get_urgent_cases(today=TODAY)

    invoice_case, agreement_case = cases
    assert invoice_case.title == "Invoice INV-30 Overdue"
    assert invoice_case.amount == 500
    assert invoice_case.currency == "INR"
    assert agreement_case.title == "Agreement Renewal Due Soon"
    assert agreement_case.message == "Sample Airlines Ltd - Agreement 10 expires in 10 days"


async def test_urgent_endpoint_skips_cases_below_threshold(test_client, test_db_session, sample_client, today):
    test_db_session.add(Invoice(
        client_id=sample_client.id,
        invoice_number="INV-FRESH",
        amount=100,
        currency=Currency.USD,
        issue_date=today - timedelta(days=40),
        due_date=today - timedelta(days=14),
        status=InvoiceStatus.OVERDUE,
    ))
    test_db_session.add(Agreement(
        client_id=sample_client.id,
        agreement_name="Expires in 31 days",
        start_date=today - timedelta(days=300),
        end_date=today + timedelta(days=31),
    ))
    await test_db_session.commit()

    response = await test_client.get("/api/v1/notifications/urgent")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["items"][0]["type"] == "agreement_renewal"
    assert body["items"][0]["severity"] == "low"
    assert body["items"][0]["days"] == 31
