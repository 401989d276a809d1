"""
Login, bearer-token authentication and user management tests.
"""

from infiniti_cms.api.v1.middleware import require_authentication
from infiniti_cms.main import app


async def test_login_issues_token_accepted_by_protected_routes(test_client, admin_user):
    response = await test_client.post("/api/v1/auth/login", json={"email": "admin@example.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["token"]["token_type"] == "bearer"
    assert body["user"]["email"] == "admin@example.com"
    assert "insights:read" in body["permissions"]

    app.dependency_overrides.pop(require_authentication)
    token = body["token"]["access_token"]
    response = await test_client.get("/api/v1/auth/user", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["id"] == str(admin_user.id)
    assert response.json()["role"] == "admin"


async def test_login_unknown_user_is_401(test_client):
    response = await test_client.post("/api/v1/auth/login", json={"email": "nobody@example.com"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid credentials"


async def test_garbage_token_is_401(test_client):
    app.dependency_overrides.pop(require_authentication)

    response = await test_client.get("/api/v1/clients", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid authentication token"


async def test_current_user_lists_role_permissions(test_client, finance_user, login_as):
    login_as(finance_user)

    response = await test_client.get("/api/v1/auth/user")

    assert response.status_code == 200
    assert response.json()["permissions"] == [
        "clients:read",
        "invoices:read",
        "invoices:write",
        "reports:read",
        "services:read",
    ]


async def test_create_user_and_change_role(test_client):
    response = await test_client.post(
        "/api/v1/users",
        json={"email": "jane.smith@example.com", "first_name": "Jane", "last_name": "Smith", "role": "csm"},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = await test_client.patch(f"/api/v1/users/{user_id}/role", json={"role": "finance"})

    assert response.status_code == 200
    assert response.json()["role"] == "finance"


async def test_duplicate_user_email_is_400(test_client, csm_user):
    response = await test_client.post(
        "/api/v1/users",
        json={"email": "csm@example.com", "first_name": "Other", "last_name": "Person"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "User with this email already exists"


async def test_csm_cannot_manage_users(test_client, csm_user, login_as):
    login_as(csm_user)

    response = await test_client.get("/api/v1/users")

    assert response.status_code == 403


async def test_list_users_ordered_by_email(test_client, csm_user, finance_user):
    response = await test_client.get("/api/v1/users")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert [u["email"] for u in body["items"]] == [
        "admin@example.com",
        "csm@example.com",
        "finance@example.com",
    ]


async def test_created_user_defaults_to_viewer(test_client):
    response = await test_client.post(
        "/api/v1/users",
        json={"email": "new.hire@example.com", "first_name": "New", "last_name": "Hire"},
    )

    assert response.status_code == 201
    assert response.json()["role"] == "viewer"


async def test_only_admin_can_change_roles(test_client, finance_user, csm_user, login_as):
    login_as(finance_user)

    response = await test_client.patch(f"/api/v1/users/{csm_user.id}/role", json={"role": "admin"})

    assert response.status_code == 403
    assert response.json()["error"]["details"] == "Permission 'users:write' required"


async def test_change_role_of_missing_user_is_404(test_client):
    response = await test_client.patch(
        "/api/v1/users/00000000-0000-0000-0000-000000000000/role",
        json={"role": "csm"},
    )

    assert response.status_code == 404
