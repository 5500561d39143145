from __future__ import annotations

from uuid import UUID, uuid4

from sqlalchemy import select

from pigfarm.infrastructure.db.orm.pig import PigORM


async def test_health(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_farm_header_required(client):
    response = await client.get("/api/v1/pigs")
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"

    bad = await client.get("/api/v1/pigs", headers={"X-Farm-ID": "not-a-uuid"})
    assert bad.status_code == 422


async def test_pigs_crud_flow(app, client, farm_headers):
    pen_response = await client.post(
        "/api/v1/pens", json={"name": "Pen 1", "row_name": "A", "capacity": 4}, headers=farm_headers
    )
    assert pen_response.status_code == 201
    pen_id = pen_response.json()["id"]

    payload = {
        "tag": "GF-001",
        "name": "Daisy",
        "gender": "female",
        "birth_date": "2023-01-01",
        "pen_id": pen_id,
    }
    create_response = await client.post("/api/v1/pigs", json=payload, headers=farm_headers)
    assert create_response.status_code == 201
    created = create_response.json()
    pig_id = created["id"]
    assert created["is_mature"] is True
    assert created["maturity_reason"] == "Pig is mature"
    assert created["version"] == 1

    duplicate = await client.post("/api/v1/pigs", json=payload, headers=farm_headers)
    assert duplicate.status_code == 409

    list_response = await client.get("/api/v1/pigs?gender=female", headers=farm_headers)
    assert list_response.status_code == 200
    assert [p["id"] for p in list_response.json()] == [pig_id]

    next_tag = await client.get(
        "/api/v1/pigs/next-tag", params={"farm_name": "Green Fields"}, headers=farm_headers
    )
    assert next_tag.json() == {"tag": "GF-002"}

    update_response = await client.put(
        f"/api/v1/pigs/{pig_id}",
        json={"version": 1, "name": "Daisy Mae", "weight": 120.5},
        headers=farm_headers,
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["name"] == "Daisy Mae"
    assert updated["version"] == 2

    stale = await client.put(
        f"/api/v1/pigs/{pig_id}", json={"version": 1, "name": "Nope"}, headers=farm_headers
    )
    assert stale.status_code == 409

    other_farm = await client.get(f"/api/v1/pigs/{pig_id}", headers={"X-Farm-ID": str(uuid4())})
    assert other_farm.status_code == 404

    delete_response = await client.delete(f"/api/v1/pigs/{pig_id}", headers=farm_headers)
    assert delete_response.status_code == 204

    async with app.state.session_factory() as session:
        result = await session.execute(select(PigORM).where(PigORM.id == UUID(pig_id)))
        row = result.scalar_one()
        assert row.deleted_at is not None

    missing = await client.get(f"/api/v1/pigs/{pig_id}", headers=farm_headers)
    assert missing.status_code == 404

    # Deleted tags stay reserved
    next_tag = await client.get(
        "/api/v1/pigs/next-tag", params={"farm_name": "Green Fields"}, headers=farm_headers
    )
    assert next_tag.json() == {"tag": "GF-002"}


async def test_young_pig_reports_maturity_reason(client, farm_headers):
    response = await client.post(
        "/api/v1/pigs", json={"tag": "P-001", "gender": "male"}, headers=farm_headers
    )
    body = response.json()
    assert body["name"] == "P-001"
    assert body["is_mature"] is False
    assert body["maturity_reason"] == "Birth date not available"
    assert body["age_in_months"] is None


async def test_unknown_pen_is_not_found(client, farm_headers):
    response = await client.post(
        "/api/v1/pigs",
        json={"tag": "P-002", "gender": "female", "pen_id": str(uuid4())},
        headers=farm_headers,
    )
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"
