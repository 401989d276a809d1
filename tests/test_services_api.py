"""
Service endpoint tests: listing, filters and summary stats.
"""


def service_payload(client_id, **overrides):
    payload = {
        "client_id": str(client_id),
        "service_type": "subscription",
        "amount": "1000",
        "currency": "USD",
    }
    payload.update(overrides)
    return payload


async def create_services(test_client, client_id):
    for overrides in (
        {"billing_cycle": "monthly", "is_recurring": True, "amount": "1000"},
        {"billing_cycle": "monthly", "is_recurring": False, "amount": "300"},
        {"billing_cycle": "annual", "is_recurring": True, "amount": "12000", "service_type": "hosting"},
        {"service_type": "implementation", "amount": "5000", "currency": "INR"},
    ):
        response = await test_client.post("/api/v1/services", json=service_payload(client_id, **overrides))
        assert response.status_code == 201


async def test_list_services_stats(test_client, sample_client):
    await create_services(test_client, sample_client.id)

    response = await test_client.get("/api/v1/services")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 4
    assert body["stats"] == {
        "total": 4,
        "recurring": 2,
        "monthly_revenue": 1000,
        "annual_revenue": 18300,
    }
    assert {item["client_name"] for item in body["items"]} == {"Sample Airlines Ltd"}
    assert {item["csm_name"] for item in body["items"]} == {None}


async def test_list_services_filters_recompute_stats(test_client, sample_client):
    await create_services(test_client, sample_client.id)

    response = await test_client.get("/api/v1/services", params={"service_type": "hosting"})

    stats = response.json()["stats"]
    assert stats["total"] == 1
    assert stats["recurring"] == 1
    assert stats["monthly_revenue"] == 0
    assert stats["annual_revenue"] == 12000


async def test_unknown_service_type_filter_is_empty(test_client, sample_client):
    await create_services(test_client, sample_client.id)

    response = await test_client.get("/api/v1/services", params={"service_type": "consulting"})

    body = response.json()
    assert body["items"] == []
    assert body["stats"]["total"] == 0


async def test_service_for_missing_client_is_400(test_client):
    response = await test_client.post(
        "/api/v1/services",
        json=service_payload("00000000-0000-0000-0000-000000000000"),
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Client not found"
