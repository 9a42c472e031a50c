"""Booking endpoints: creation, conflicts, lifecycle and deletion."""

from datetime import date

import pytest

pytestmark = pytest.mark.asyncio


def payload(room, check_in="2024-12-24", check_out="2024-12-27", **extra):
    body = {
        "room_id": room["id"],
        "guest_name": "Thandi Nkosi",
        "guest_email": "thandi@example.com",
        "guest_phone": "+27 82 555 0101",
        "check_in_date": check_in,
        "check_out_date": check_out,
    }
    body.update(extra)
    return body


async def create(client, headers, room, **kwargs):
    response = await client.post("/v1/bookings", json=payload(room, **kwargs), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_booking_prices_and_references(client, staff_headers, admin_headers, room):
    await client.post(
        "/v1/property/seasonal-rates",
        json={"name": "Peak", "start_date": "2024-12-20", "end_date": "2024-12-31", "multiplier": "1.4"},
        headers=admin_headers,
    )

    booking = await create(client, staff_headers, room)

    assert booking["total_amount"] == 420
    assert booking["reference"] == f"INF-{date.today().year}-0001"
    assert booking["status"] == "PROVISIONAL"
    assert booking["payment_status"] == "PENDING"
    assert booking["room_number"] == "101"


async def test_client_supplied_price_and_status_are_ignored(client, staff_headers, room):
    booking = await create(
        client, staff_headers, room,
        total_amount=1, status="CHECKED_OUT", reference="HACK-1",
    )
    assert booking["total_amount"] == 300
    assert booking["status"] == "PROVISIONAL"
    assert booking["reference"].startswith("INF-")


async def test_instant_payment_confirms(client, staff_headers, room):
    booking = await create(client, staff_headers, room, payment_method="IKHOKHA")
    assert booking["status"] == "CONFIRMED"
    assert booking["payment_status"] == "PAID"


async def test_references_increase_by_one(client, staff_headers, room):
    first = await create(client, staff_headers, room, check_in="2024-01-01", check_out="2024-01-02")
    second = await create(client, staff_headers, room, check_in="2024-01-02", check_out="2024-01-03")

    year = date.today().year
    assert first["reference"] == f"INF-{year}-0001"
    assert second["reference"] == f"INF-{year}-0002"


async def test_overlapping_booking_is_rejected(client, staff_headers, room):
    await create(client, staff_headers, room, check_in="2024-06-10", check_out="2024-06-13")

    response = await client.post(
        "/v1/bookings",
        json=payload(room, check_in="2024-06-12", check_out="2024-06-14"),
        headers=staff_headers,
    )
    assert response.status_code == 409


async def test_back_to_back_stays_are_allowed(client, staff_headers, room):
    await create(client, staff_headers, room, check_in="2024-06-10", check_out="2024-06-13")
    await create(client, staff_headers, room, check_in="2024-06-13", check_out="2024-06-15")


async def test_cancelled_booking_frees_dates(client, staff_headers, room):
    booking = await create(client, staff_headers, room, check_in="2024-06-10", check_out="2024-06-13")
    response = await client.patch(
        f"/v1/bookings/{booking['id']}/status", json={"status": "CANCELLED"}, headers=staff_headers,
    )
    assert response.status_code == 200

    await create(client, staff_headers, room, check_in="2024-06-10", check_out="2024-06-13")


async def test_check_out_must_follow_check_in(client, staff_headers, room):
    response = await client.post(
        "/v1/bookings",
        json=payload(room, check_in="2024-06-13", check_out="2024-06-13"),
        headers=staff_headers,
    )
    assert response.status_code == 422


async def test_unknown_room_is_404(client, staff_headers, room):
    bogus = {**room, "id": "00000000-0000-0000-0000-000000000000"}
    response = await client.post("/v1/bookings", json=payload(bogus), headers=staff_headers)
    assert response.status_code == 404


async def test_full_stay_lifecycle(client, staff_headers, room):
    booking = await create(client, staff_headers, room, payment_method="EFT")
    url = f"/v1/bookings/{booking['id']}"

    response = await client.patch(f"{url}/status", json={"status": "CONFIRMED"}, headers=staff_headers)
    assert response.json()["status"] == "CONFIRMED"

    response = await client.post(f"{url}/check-in", headers=staff_headers)
    assert response.json()["status"] == "CHECKED_IN"
    # Check-in does not depend on payment
    assert response.json()["payment_status"] == "PENDING"

    response = await client.post(f"{url}/check-out", headers=staff_headers)
    assert response.json()["status"] == "CHECKED_OUT"


async def test_provisional_guest_checks_in_on_arrival(client, staff_headers, room):
    booking = await create(client, staff_headers, room, payment_method="CASH_ON_ARRIVAL")
    assert booking["status"] == "PROVISIONAL"

    response = await client.post(f"/v1/bookings/{booking['id']}/check-in", headers=staff_headers)
    assert response.status_code == 200, response.text
    assert response.json()["status"] == "CHECKED_IN"
    assert response.json()["payment_status"] == "PENDING"


async def test_illegal_transition_is_400(client, staff_headers, room):
    booking = await create(client, staff_headers, room)
    response = await client.post(f"/v1/bookings/{booking['id']}/check-out", headers=staff_headers)
    assert response.status_code == 400


async def test_payment_update_leaves_status_alone(client, staff_headers, room):
    booking = await create(client, staff_headers, room, payment_method="CASH_ON_ARRIVAL")
    response = await client.patch(
        f"/v1/bookings/{booking['id']}/payment", json={"payment_status": "PAID"}, headers=staff_headers,
    )
    assert response.status_code == 200
    assert response.json()["payment_status"] == "PAID"
    assert response.json()["status"] == "PROVISIONAL"

    response = await client.patch(
        f"/v1/bookings/{booking['id']}/payment", json={"payment_status": "PENDING"}, headers=staff_headers,
    )
    assert response.status_code == 400


async def test_status_changes_are_audited(client, staff_headers, admin_headers, room):
    booking = await create(client, staff_headers, room)
    await client.patch(f"/v1/bookings/{booking['id']}/status", json={"status": "CONFIRMED"}, headers=staff_headers)
    # Same-value update is a no-op
    await client.patch(f"/v1/bookings/{booking['id']}/status", json={"status": "CONFIRMED"}, headers=staff_headers)

    logs = (await client.get("/v1/audit-logs", headers=admin_headers)).json()
    changes = [log for log in logs if log["action"] == "BOOKING_STATUS_CHANGE"]
    assert len(changes) == 1
    assert changes[0]["details"] == f"Booking {booking['reference']} status changed from PROVISIONAL to CONFIRMED"
    assert changes[0]["actor"] == "Staff <staff@innflow.com>"


async def test_delete_requires_confirmation(client, staff_headers, room):
    booking = await create(client, staff_headers, room)
    url = f"/v1/bookings/{booking['id']}"

    assert (await client.delete(url, headers=staff_headers)).status_code == 400
    assert (await client.delete(f"{url}?confirm=true", headers=staff_headers)).status_code == 204
    assert (await client.get(url, headers=staff_headers)).status_code == 404


async def test_deleted_room_renders_na(client, staff_headers, admin_headers, room):
    booking = await create(client, staff_headers, room)
    await client.delete(f"/v1/rooms/{room['id']}", headers=admin_headers)

    response = await client.get(f"/v1/bookings/{booking['id']}", headers=staff_headers)
    assert response.status_code == 200
    assert response.json()["room_number"] == "N/A"


async def test_search_by_guest_or_reference(client, staff_headers, room):
    first = await create(client, staff_headers, room, check_in="2024-01-01", check_out="2024-01-02")
    await create(
        client, staff_headers, room,
        check_in="2024-02-01", check_out="2024-02-02", guest_name="Pieter van Wyk",
    )

    by_name = (await client.get("/v1/bookings", params={"q": "pieter"}, headers=staff_headers)).json()
    assert [b["guest_name"] for b in by_name] == ["Pieter van Wyk"]

    by_ref = (await client.get("/v1/bookings", params={"q": first["reference"]}, headers=staff_headers)).json()
    assert [b["id"] for b in by_ref] == [first["id"]]


async def test_guests_cannot_use_back_office(client, guest_headers, room):
    response = await client.get("/v1/bookings", headers=guest_headers)
    assert response.status_code == 403


async def test_anonymous_requests_are_rejected(client):
    response = await client.get("/v1/bookings")
    assert response.status_code in (401, 403)
