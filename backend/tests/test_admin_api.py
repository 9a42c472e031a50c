"""Sign in, staff directory and developer tenant portal."""

import pytest

pytestmark = pytest.mark.asyncio


async def test_login_defaults_identity_from_role(client):
    response = await client.post("/v1/auth/login", json={"role": "BUSINESS_ADMIN"})
    body = response.json()

    assert body["token_type"] == "bearer"
    assert body["user"]["name"] == "Business admin"
    assert body["user"]["email"] == "business_admin@innflow.com"
    assert body["user"]["property_id"] is not None

    me = await client.get("/v1/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.json()["role"] == "BUSINESS_ADMIN"


async def test_developer_is_not_bound_to_property(client):
    body = (await client.post("/v1/auth/login", json={"role": "DEVELOPER", "name": "Ops"})).json()
    assert body["user"]["property_id"] is None
    assert body["user"]["name"] == "Ops"


async def test_logout_invalidates_token(client, staff_headers):
    assert (await client.post("/v1/auth/logout", headers=staff_headers)).status_code == 204
    assert (await client.get("/v1/auth/me", headers=staff_headers)).status_code == 401


async def test_unknown_role_is_rejected(client):
    response = await client.post("/v1/auth/login", json={"role": "ROOT"})
    assert response.status_code == 422


async def test_staff_lifecycle_is_audited(client, admin_headers):
    created = await client.post(
        "/v1/staff",
        json={"name": "John Doe", "email": "john@oceanwhisper.com", "access": ["Bookings", "Calendar"]},
        headers=admin_headers,
    )
    assert created.status_code == 201, created.text
    member = created.json()
    assert member["role"] == "STAFF"
    assert member["last_login"] is None

    updated = await client.patch(f"/v1/staff/{member['id']}", json={"role": "BUSINESS_ADMIN"}, headers=admin_headers)
    assert updated.json()["role"] == "BUSINESS_ADMIN"

    assert (await client.delete(f"/v1/staff/{member['id']}", headers=admin_headers)).status_code == 204
    assert (await client.get("/v1/staff", headers=admin_headers)).json() == []

    logs = (await client.get("/v1/audit-logs", headers=admin_headers)).json()
    assert [log["details"] for log in logs[:3]] == [
        "Revoked access for user: John Doe",
        "Updated details for John Doe",
        "Invited new staff member: John Doe",
    ]


async def test_staff_email_must_be_valid(client, admin_headers):
    response = await client.post("/v1/staff", json={"name": "X", "email": "not-an-email"}, headers=admin_headers)
    assert response.status_code == 422


async def test_tenants_are_developer_only(client, developer_headers, admin_headers):
    assert (await client.get("/v1/tenants", headers=admin_headers)).status_code == 403

    created = await client.post(
        "/v1/tenants", json={"name": "Karoo Rest", "plan": "PROFESSIONAL"}, headers=developer_headers,
    )
    assert created.status_code == 201, created.text
    tenant = created.json()
    assert tenant["status"] == "ACTIVE"

    updated = await client.patch(
        f"/v1/tenants/{tenant['id']}", json={"status": "SUSPENDED"}, headers=developer_headers,
    )
    assert updated.json()["status"] == "SUSPENDED"

    logs = (await client.get("/v1/audit-logs", headers=admin_headers)).json()
    assert logs[0]["details"] == "Updated configuration for tenant Karoo Rest"
    assert logs[1]["details"] == "Created new tenant guesthouse: Karoo Rest"


async def test_health(client):
    assert (await client.get("/health")).json()["status"] == "healthy"
