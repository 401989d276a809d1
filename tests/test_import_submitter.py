"""
Sequential submitter tests against an in-memory gateway.
"""

import pytest

from infiniti_cms.imports.errors import SubmissionError, UnsupportedFileFormatError
from infiniti_cms.imports.gateways import EntityGateway
from infiniti_cms.imports.mappers import ClientRef, ReferenceData
from infiniti_cms.imports.registry import ImportKind
from infiniti_cms.imports.session import ImportSession, ImportState
from infiniti_cms.imports.submitter import import_file, run_import


class FakeGateway(EntityGateway):
    """Records creates in order; rejects payloads whose key value is listed in `reject`."""

    def __init__(self, refs=None, reject=None, key="cr_no"):
        self.refs = refs or ReferenceData()
        self.reject = reject or {}
        self.key = key
        self.created = []
        self.reference_fetches = 0

    async def fetch_references(self):
        self.reference_fetches += 1
        return self.refs

    async def create(self, kind, payload):
        value = payload.get(self.key)
        if value in self.reject:
            raise SubmissionError(self.reject[value])
        self.created.append(payload)
        return {"id": str(len(self.created)), **payload}


@pytest.fixture
def refs():
    return ReferenceData(clients=[ClientRef(id="c-1", name="Acme Air", employee_name="John Doe")])


def cr_rows(count):
    return [
        {
            "clientName": "Acme Air",
            "crNo": f"CR-{number}",
            "employeeName": "",
            "amount": "100",
            "currency": "INR",
            "startDate": "2024-01-01",
            "endDate": "2024-01-31",
            "status": "initiated",
        }
        for number in range(1, count + 1)
    ]


async def test_one_server_side_failure_does_not_stop_the_run(refs):
    gateway = FakeGateway(refs=refs, reject={"CR-5": "CR number CR-5 already exists"})
    progress = []
    session = ImportSession(kind=ImportKind.CR_INVOICES, on_progress=lambda s: progress.append(s.progress))

    report = await run_import(session, cr_rows(10), gateway)

    assert report.total == 10
    assert report.success_count == 9
    assert report.failure_count == 1
    failed = [r for r in report.results if not r.success]
    assert [(r.row, r.error) for r in failed] == [(6, "CR number CR-5 already exists")]
    assert [p["cr_no"] for p in gateway.created] == [f"CR-{n}" for n in range(1, 11) if n != 5]
    assert progress == [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    assert session.state == ImportState.COMPLETE
    assert session.progress == 100


async def test_invalid_rows_never_reach_the_gateway():
    gateway = FakeGateway(key="name")
    rows = [
        {"name": "", "industry": "airlines"},
        {"name": "Acme", "industry": "airlines", "status": "active"},
    ]
    session = ImportSession(kind=ImportKind.CLIENTS)

    report = await run_import(session, rows, gateway)

    assert report.results[0].error == "Client name is required"
    assert report.results[0].label == "Unknown"
    assert report.results[1].success is True
    assert [p["name"] for p in gateway.created] == ["Acme"]
    assert gateway.created[0]["employee_name"] is None
    assert gateway.reference_fetches == 0


async def test_duplicate_emails_fail_without_requests():
    gateway = FakeGateway(key="name")
    rows = [
        {"name": "Acme", "industry": "airlines", "email": "ops@acme.com"},
        {"name": "Globex", "industry": "gds", "email": "ops@acme.com"},
    ]
    session = ImportSession(kind=ImportKind.CLIENTS)

    report = await run_import(session, rows, gateway)

    assert [r.error for r in report.results] == [
        "Duplicate email found in row 3",
        "Duplicate email found in row 2",
    ]
    assert gateway.created == []


async def test_unknown_client_is_a_row_failure(refs):
    gateway = FakeGateway(refs=refs, key="client_id")
    rows = [
        {"clientName": "Ghost Airways", "serviceType": "cr", "amount": "10", "currency": "USD"},
        {"clientName": "acme air", "serviceType": "cr", "amount": "10", "currency": "USD"},
    ]
    session = ImportSession(kind=ImportKind.SERVICES)

    report = await run_import(session, rows, gateway)

    assert report.results[0].error == "Client not found"
    assert report.results[0].label == "Ghost Airways - cr"
    assert report.results[1].success is True
    assert len(gateway.created) == 1
    assert gateway.reference_fetches == 1


async def test_on_complete_hook_receives_report(refs):
    seen = []

    async def refresh(report):
        seen.append(report.success_count)

    session = ImportSession(kind=ImportKind.CR_INVOICES, on_complete=refresh)

    await run_import(session, cr_rows(2), FakeGateway(refs=refs))

    assert seen == [2]


async def test_empty_file_completes_immediately():
    session = ImportSession(kind=ImportKind.USERS)

    report = await run_import(session, [], FakeGateway())

    assert report.total == 0
    assert session.state == ImportState.COMPLETE
    assert session.progress == 100


async def test_parse_failure_aborts_before_any_row():
    gateway = FakeGateway()
    session = ImportSession(kind=ImportKind.CLIENTS)

    with pytest.raises(UnsupportedFileFormatError):
        await import_file(session, "clients.pdf", b"%PDF", gateway)

    assert session.state == ImportState.PARSING
    assert session.results == []
    assert gateway.created == []


async def test_import_file_parses_csv(refs):
    content = b"clientName,crNo,amount,currency,startDate,endDate\nAcme Air,CR-77,250,usd,2024-03-01,2024-03-31\n"
    gateway = FakeGateway(refs=refs)
    session = ImportSession(kind=ImportKind.CR_INVOICES)

    report = await import_file(session, "cr.csv", content, gateway)

    assert report.filename == "cr.csv"
    assert report.success_count == 1
    assert gateway.created[0]["cr_currency"] == "USD"
    assert gateway.created[0]["employee_name"] == "John Doe"


def test_session_cannot_be_reused():
    session = ImportSession(kind=ImportKind.CLIENTS)
    session.start_parsing()

    with pytest.raises(RuntimeError):
        session.start_parsing()
