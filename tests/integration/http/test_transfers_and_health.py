from __future__ import annotations

from datetime import date, timedelta


async def _create(client, headers, path, payload):
    response = await client.post(f"/api/v1/{path}", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_transfer_history(client, farm_headers):
    pen_a = await _create(client, farm_headers, "pens", {"name": "A1"})
    pen_b = await _create(client, farm_headers, "pens", {"name": "B2"})
    pig = await _create(
        client,
        farm_headers,
        "pigs",
        {"tag": "GF-001", "name": "Daisy", "gender": "female", "pen_id": pen_a["id"]},
    )

    moved = await client.post(
        f"/api/v1/pigs/{pig['id']}/transfer",
        json={
            "new_pen_id": pen_b["id"],
            "transfer_reason": "quarantine",
            "transfer_notes": "Coughing",
        },
        headers=farm_headers,
    )
    assert moved.status_code == 201, moved.text
    body = moved.json()
    assert body["pig"]["pen_id"] == pen_b["id"]
    assert body["pig"]["version"] == pig["version"] + 1
    assert body["transfer"]["from_pen_id"] == pen_a["id"]
    assert body["transfer"]["transfer_reason"] == "quarantine"
    assert body["transfer"]["transfer_notes"] == "Coughing"

    same_pen = await client.post(
        f"/api/v1/pigs/{pig['id']}/transfer",
        json={"new_pen_id": pen_b["id"], "transfer_reason": "other"},
        headers=farm_headers,
    )
    assert same_pen.status_code == 422

    stale = await client.post(
        f"/api/v1/pigs/{pig['id']}/transfer",
        json={"new_pen_id": pen_a["id"], "transfer_reason": "other", "version": 1},
        headers=farm_headers,
    )
    assert stale.status_code == 409

    back = await client.post(
        f"/api/v1/pigs/{pig['id']}/transfer",
        json={"new_pen_id": pen_a["id"], "transfer_reason": "social_grouping"},
        headers=farm_headers,
    )
    assert back.status_code == 201

    history = await client.get(f"/api/v1/pigs/{pig['id']}/transfers", headers=farm_headers)
    assert history.status_code == 200
    reasons = [item["transfer_reason"] for item in history.json()]
    assert sorted(reasons) == ["quarantine", "social_grouping"]


async def test_health_records_flow(client, farm_headers):
    pig = await _create(
        client, farm_headers, "pigs", {"tag": "GF-001", "name": "Daisy", "gender": "female"}
    )
    path = f"pigs/{pig['id']}/health"
    base = f"/api/v1/{path}"
    today = date.today()

    checkup = await _create(client, farm_headers, path, {})
    assert checkup["type"] == "checkup"
    assert checkup["status"] == "completed"
    assert checkup["completed_at"] is not None

    vaccine = await _create(
        client,
        farm_headers,
        path,
        {
            "type": "vaccination",
            "description": "Erysipelas booster",
            "date": (today - timedelta(days=30)).isoformat(),
            "next_due": (today - timedelta(days=2)).isoformat(),
            "status": "pending",
        },
    )
    assert vaccine["status"] == "overdue"

    listing = await client.get(base, headers=farm_headers)
    assert listing.status_code == 200
    assert listing.json()["health_status"] == "overdue"
    assert len(listing.json()["items"]) == 2

    overview = await client.get("/api/v1/herd-health", headers=farm_headers)
    assert [entry["pig"]["id"] for entry in overview.json()["overdue"]] == [pig["id"]]
    assert overview.json()["good_count"] == 0

    done = await client.put(
        f"{base}/{vaccine['id']}", json={"status": "completed"}, headers=farm_headers
    )
    assert done.status_code == 200, done.text
    assert done.json()["status"] == "completed"
    assert done.json()["version"] == 2

    listing = await client.get(base, headers=farm_headers)
    assert listing.json()["health_status"] == "good"

    deleted = await client.delete(f"{base}/{checkup['id']}", headers=farm_headers)
    assert deleted.status_code == 204
    missing = await client.delete(f"{base}/{checkup['id']}", headers=farm_headers)
    assert missing.status_code == 404
    listing = await client.get(base, headers=farm_headers)
    assert [item["id"] for item in listing.json()["items"]] == [vaccine["id"]]


async def test_complete_overdue_health_records(client, farm_headers):
    pig = await _create(
        client, farm_headers, "pigs", {"tag": "GF-001", "name": "Daisy", "gender": "female"}
    )
    path = f"pigs/{pig['id']}/health"
    today = date.today()
    for days in (3, 5):
        await _create(
            client,
            farm_headers,
            path,
            {
                "type": "medication",
                "date": (today - timedelta(days=10)).isoformat(),
                "next_due": (today - timedelta(days=days)).isoformat(),
                "status": "pending",
            },
        )

    response = await client.post(f"/api/v1/{path}/complete-overdue", headers=farm_headers)
    assert response.status_code == 200
    assert [item["status"] for item in response.json()] == ["completed", "completed"]


async def test_health_record_rejects_unknown_type(client, farm_headers):
    pig = await _create(
        client, farm_headers, "pigs", {"tag": "GF-001", "name": "Daisy", "gender": "female"}
    )
    response = await client.post(
        f"/api/v1/pigs/{pig['id']}/health", json={"type": "dental"}, headers=farm_headers
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"
