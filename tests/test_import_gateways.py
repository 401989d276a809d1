"""
Gateway tests: API error bodies and in-process service rejections become row errors.
"""

import pytest

from infiniti_cms.core.integrations.http.http_client import HttpClientError
from infiniti_cms.imports.errors import SubmissionError
from infiniti_cms.imports.gateways import HttpGateway, ServiceGateway, error_message
from infiniti_cms.imports.registry import ImportKind


class StubHttpClient:
    """Answers GETs from `responses`; POSTs raise `post_error` when set."""

    def __init__(self, responses=None, post_error=None):
        self.responses = responses or {}
        self.post_error = post_error
        self.posted = []

    async def get(self, endpoint, params=None):
        response = self.responses[endpoint]
        if isinstance(response, Exception):
            raise response
        return response

    async def post(self, endpoint, json=None):
        if self.post_error:
            raise self.post_error
        self.posted.append((endpoint, json))
        return {"id": "new", **json}


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"error": {"message": "CR number CR-5 already exists"}}, "CR number CR-5 already exists"),
        ({"error": "Bad things"}, "Bad things"),
        ({"message": "Nope"}, "Nope"),
        ({"detail": "Client not found"}, "Client not found"),
        ("<html>502</html>", "fallback"),
        (None, "fallback"),
    ],
)
def test_error_message(body, expected):
    assert error_message(body, "fallback") == expected


async def test_http_gateway_posts_to_kind_path():
    client = StubHttpClient()
    gateway = HttpGateway(client)

    await gateway.create(ImportKind.CR_INVOICES, {"cr_no": "CR-1"})

    assert client.posted == [("/cr-invoices", {"cr_no": "CR-1"})]


async def test_http_gateway_surfaces_api_error_message():
    error = HttpClientError("HTTP 400", status=400, body={"error": {"message": "Invoice number already exists"}})
    gateway = HttpGateway(StubHttpClient(post_error=error))

    with pytest.raises(SubmissionError) as exc_info:
        await gateway.create(ImportKind.SERVICES, {})

    assert exc_info.value.message == "Invoice number already exists"


async def test_http_gateway_falls_back_to_entity_message():
    error = HttpClientError("HTTP 500", status=500, body="Internal Server Error")
    gateway = HttpGateway(StubHttpClient(post_error=error))

    with pytest.raises(SubmissionError) as exc_info:
        await gateway.create(ImportKind.CR_INVOICES, {})

    assert exc_info.value.message == "Failed to create CR invoice"


async def test_http_gateway_tolerates_forbidden_user_listing():
    client = StubHttpClient(responses={
        "/clients": {"items": [{"id": "c-1", "name": "Acme", "employee_name": None, "assigned_csm_id": "u-1"}]},
        "/users": HttpClientError("HTTP 403", status=403, body={"error": {"message": "Forbidden"}}),
    })

    refs = await HttpGateway(client).fetch_references()

    assert refs.find_client("acme").id == "c-1"
    assert refs.users == []


async def test_service_gateway_reports_schema_rejections(test_db_session, sample_client):
    gateway = ServiceGateway(test_db_session)
    payload = {
        "client_id": str(sample_client.id),
        "employee_name": "John Doe",
        "cr_no": "CR-9",
        "cr_currency": "INR",
        "amount": "10",
        "start_date": "2024-02-01",
        "end_date": "2024-01-01",
        "status": "initiated",
    }

    with pytest.raises(SubmissionError) as exc_info:
        await gateway.create(ImportKind.CR_INVOICES, payload)

    assert "End date cannot be before start date" in exc_info.value.message


async def test_service_gateway_creates_and_serialises(test_db_session, sample_client):
    gateway = ServiceGateway(test_db_session)

    created = await gateway.create(ImportKind.CLIENTS, {"name": "Acme", "industry": "ota", "status": "active"})

    assert created["name"] == "Acme"
    assert isinstance(created["id"], str)

    refs = await gateway.fetch_references()
    assert {c.name for c in refs.clients} == {"Acme", "Sample Airlines Ltd"}
    assert refs.find_client("sample airlines ltd").assigned_csm_id == str(sample_client.assigned_csm_id)
