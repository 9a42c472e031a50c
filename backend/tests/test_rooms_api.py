"""Room inventory endpoints."""

import pytest

pytestmark = pytest.mark.asyncio


async def add_room(client, headers, number, room_type="Standard Room", **extra):
    body = {"room_number": number, "room_type": room_type, "price_per_night": "850", **extra}
    response = await client.post("/v1/rooms", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_list_filters_and_counts(client, admin_headers):
    await add_room(client, admin_headers, "101", "Deluxe Suite")
    await add_room(client, admin_headers, "102")
    await add_room(client, admin_headers, "201", "Executive King", status="BLOCKED")

    listing = (await client.get("/v1/rooms", params={"status": "ACTIVE"}, headers=admin_headers)).json()
    assert [r["room_number"] for r in listing["rooms"]] == ["101", "102"]
    assert listing["counts"] == {"ALL": 3, "ACTIVE": 2, "MAINTENANCE": 0, "BLOCKED": 1}

    search = (await client.get("/v1/rooms", params={"q": "deluxe"}, headers=admin_headers)).json()
    assert [r["room_number"] for r in search["rooms"]] == ["101"]


async def test_toggle_maintenance_round_trip(client, admin_headers):
    room = await add_room(client, admin_headers, "101")
    url = f"/v1/rooms/{room['id']}/toggle-maintenance"

    assert (await client.post(url, headers=admin_headers)).json()["status"] == "MAINTENANCE"
    assert (await client.post(url, headers=admin_headers)).json()["status"] == "ACTIVE"


async def test_price_change_does_not_touch_existing_bookings(client, admin_headers):
    room = await add_room(client, admin_headers, "101", price_per_night="100")
    booking = (await client.post(
        "/v1/bookings",
        json={
            "room_id": room["id"], "guest_name": "Thandi Nkosi",
            "check_in_date": "2024-05-01", "check_out_date": "2024-05-03",
        },
        headers=admin_headers,
    )).json()

    await client.patch(f"/v1/rooms/{room['id']}", json={"price_per_night": "500"}, headers=admin_headers)

    refreshed = (await client.get(f"/v1/bookings/{booking['id']}", headers=admin_headers)).json()
    assert refreshed["total_amount"] == 200


async def test_invalid_room_is_rejected(client, admin_headers):
    response = await client.post(
        "/v1/rooms",
        json={"room_number": "101", "room_type": "Standard", "price_per_night": "-5"},
        headers=admin_headers,
    )
    assert response.status_code == 422


async def test_staff_can_read_but_not_edit(client, admin_headers, staff_headers):
    room = await add_room(client, admin_headers, "101")

    assert (await client.get(f"/v1/rooms/{room['id']}", headers=staff_headers)).status_code == 200
    response = await client.patch(f"/v1/rooms/{room['id']}", json={"capacity": 3}, headers=staff_headers)
    assert response.status_code == 403


@pytest.mark.parametrize("field", ["price_per_night", "room_number", "status", "capacity"])
async def test_room_fields_cannot_be_nulled(client, admin_headers, field):
    room = await add_room(client, admin_headers, "101")

    response = await client.patch(f"/v1/rooms/{room['id']}", json={field: None}, headers=admin_headers)
    assert response.status_code == 422

    unchanged = (await client.get(f"/v1/rooms/{room['id']}", headers=admin_headers)).json()
    assert unchanged["price_per_night"] == room["price_per_night"]
