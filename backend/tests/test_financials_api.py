"""Financial summary, ledger export and cash-ups."""

from decimal import Decimal

import pytest

pytestmark = pytest.mark.asyncio


async def book(client, headers, room, check_in, check_out, guest="Thandi Nkosi", method=None):
    body = {
        "room_id": room["id"],
        "guest_name": guest,
        "check_in_date": check_in,
        "check_out_date": check_out,
    }
    if method:
        body["payment_method"] = method
    response = await client.post("/v1/bookings", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_csv_export_is_exact(client, admin_headers, room):
    first = await book(client, admin_headers, room, "2024-03-01", "2024-03-03", method="IKHOKHA")
    second = await book(client, admin_headers, room, "2024-03-05", "2024-03-06", guest="Pieter van Wyk")

    response = await client.get("/v1/financials/export.csv", headers=admin_headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    assert response.text == "\n".join([
        "Reference,Guest Name,Room ID,Check-In,Check-Out,Total,Status,Payment Method",
        f'{first["reference"]},"Thandi Nkosi",{room["id"]},2024-03-01,2024-03-03,200,CONFIRMED,IKHOKHA',
        f'{second["reference"]},"Pieter van Wyk",{room["id"]},2024-03-05,2024-03-06,100,PROVISIONAL,N/A',
    ])

    logs = (await client.get("/v1/audit-logs", headers=admin_headers)).json()
    export = [log for log in logs if log["action"] == "FINANCIAL_EXPORT"]
    assert export[0]["details"] == "Full ledger exported to CSV"


async def test_empty_ledger_is_header_only(client, admin_headers):
    response = await client.get("/v1/financials/export.csv", headers=admin_headers)
    assert response.text == "Reference,Guest Name,Room ID,Check-In,Check-Out,Total,Status,Payment Method"


async def test_summary_excludes_cancelled_from_revenue(client, admin_headers, room):
    await book(client, admin_headers, room, "2024-03-01", "2024-03-03", method="IKHOKHA")
    await book(client, admin_headers, room, "2024-03-05", "2024-03-06", method="EFT")
    cancelled = await book(client, admin_headers, room, "2024-03-10", "2024-03-13")
    await client.patch(
        f"/v1/bookings/{cancelled['id']}/status", json={"status": "CANCELLED"}, headers=admin_headers,
    )

    summary = (await client.get("/v1/financials/summary", headers=admin_headers)).json()

    assert summary["revenue"] == 300
    assert summary["paid"] == 200
    assert summary["pending"] == 100
    mix = {entry["name"]: entry["value"] for entry in summary["payment_mix"]}
    assert mix == {"IKHOKHA": 200, "EFT": 100, "Other": 300}


async def test_cash_up_total_is_computed(client, admin_headers):
    response = await client.post(
        "/v1/financials/cash-ups",
        json={"cash": "1500.00", "card": "2200.50", "eft": "800", "notes": "Float R500", "total": "1"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    record = response.json()
    assert Decimal(record["total"]) == Decimal("4500.50")
    assert record["reconciled_by"] == "Business admin"

    logs = (await client.get("/v1/audit-logs", headers=admin_headers)).json()
    cash_up = [log for log in logs if log["action"] == "FINANCIAL_CASH_UP"][0]
    assert cash_up["details"] == f"Closed register for {record['date']}. Reconciled R4,500.50"


async def test_negative_takings_are_rejected(client, admin_headers):
    response = await client.post(
        "/v1/financials/cash-ups", json={"cash": "-1", "card": "0", "eft": "0"}, headers=admin_headers,
    )
    assert response.status_code == 422


async def test_cash_up_statement_pdf(client, admin_headers):
    record = (await client.post(
        "/v1/financials/cash-ups",
        json={"cash": "100", "card": "50", "eft": "0", "date": "2024-12-31"},
        headers=admin_headers,
    )).json()

    response = await client.get(f"/v1/financials/cash-ups/{record['id']}/pdf", headers=admin_headers)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")

    history = (await client.get("/v1/financials/cash-ups", headers=admin_headers)).json()
    assert [c["id"] for c in history] == [record["id"]]


async def test_staff_cannot_see_financials(client, staff_headers):
    response = await client.get("/v1/financials/summary", headers=staff_headers)
    assert response.status_code == 403
