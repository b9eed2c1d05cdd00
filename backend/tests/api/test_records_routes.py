"""Record Routes — authenticated CRUD, filtering and summary over the CSV store.

Invariants:
    - Every /api/records route rejects missing tokens with 401
    - POST then GET returns the posted values under a newly assigned id
    - PUT/DELETE on unknown ids → 404 {"error": "Record not found"}, store unchanged
    - Non-numeric numbers are accepted and come back as null
"""

import pytest


async def test_records_require_token(client):
    assert (await client.get("/api/records")).status_code == 401
    assert (await client.post("/api/records", json={})).status_code == 401
    assert (await client.put("/api/records/1", json={})).status_code == 401
    assert (await client.delete("/api/records/1")).status_code == 401


async def test_post_then_get_returns_record_with_new_id(client, auth_headers):
    payload = {
        "date": "2025-03-10", "vehicleNumber": "TN01", "weightInTons": 10,
        "ratePerTon": 100, "rateWeFixed": 150, "amountSpend": 900,
        "extraSpend": 50, "totalProfit": 500,
    }
    created = await client.post("/api/records", json=payload, headers=auth_headers)
    assert created.status_code == 200
    new_id = created.json()["id"]

    res = await client.get("/api/records", headers=auth_headers)
    assert res.status_code == 200
    [record] = res.json()
    assert record["id"] == new_id
    for key, value in payload.items():
        assert record[key] == value


async def test_non_numeric_input_is_stored_and_returned_as_null(
    client, auth_headers, sample_record,
):
    res = await client.post(
        "/api/records", json={**sample_record, "weightInTons": "heavy"},
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert res.json()["weightInTons"] is None


async def test_put_replaces_record(client, auth_headers, sample_record):
    created = (await client.post("/api/records", json=sample_record, headers=auth_headers)).json()
    res = await client.put(
        f"/api/records/{created['id']}",
        json={**sample_record, "destination": "Mysore", "totalProfit": 650},
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]
    assert res.json()["destination"] == "Mysore"
    assert res.json()["totalProfit"] == 650


async def test_put_unknown_id_is_404_and_store_unchanged(
    client, auth_headers, sample_record, csv_store,
):
    await client.post("/api/records", json=sample_record, headers=auth_headers)
    before = await csv_store.list_records()
    res = await client.put("/api/records/77", json=sample_record, headers=auth_headers)
    assert res.status_code == 404
    assert res.json() == {"error": "Record not found", "code": "RECORD_NOT_FOUND"}
    assert await csv_store.list_records() == before


async def test_delete_removes_record(client, auth_headers, sample_record):
    created = (await client.post("/api/records", json=sample_record, headers=auth_headers)).json()
    res = await client.delete(f"/api/records/{created['id']}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"message": "Record deleted successfully"}
    assert (await client.get("/api/records", headers=auth_headers)).json() == []


async def test_delete_unknown_id_is_404(client, auth_headers, sample_record):
    await client.post("/api/records", json=sample_record, headers=auth_headers)
    res = await client.delete("/api/records/abc", headers=auth_headers)
    assert res.status_code == 404
    assert len((await client.get("/api/records", headers=auth_headers)).json()) == 1


async def _seed(client, headers, sample_record):
    for day, profit in [("2025-01-10", 100), ("2025-03-05", 300), ("2025-02-20", -20)]:
        await client.post(
            "/api/records", json={**sample_record, "date": day, "totalProfit": profit},
            headers=headers,
        )


async def test_list_sorted_and_windowed(client, auth_headers, sample_record):
    await _seed(client, auth_headers, sample_record)
    res = await client.get(
        "/api/records",
        params={"sort": "profit-desc", "start_date": "2025-02-01", "end_date": "2025-03-31"},
        headers=auth_headers,
    )
    assert [r["totalProfit"] for r in res.json()] == [300, -20]


@pytest.mark.parametrize("params", [{"sort": "weight-asc"}, {"start_date": "March"}, {"months": 0}])
async def test_bad_query_params_are_400(client, auth_headers, params):
    res = await client.get("/api/records", params=params, headers=auth_headers)
    assert res.status_code == 400


async def test_summary_totals_and_months(client, auth_headers, sample_record):
    await _seed(client, auth_headers, sample_record)
    res = await client.get("/api/records/summary", headers=auth_headers)
    body = res.json()
    assert res.status_code == 200
    assert body["totalLoads"] == 3
    assert body["totalProfit"] == 380
    assert body["totalInvestment"] == 2700
    assert body["totalExtraSpend"] == 150
    assert [m["month"] for m in body["monthly"]] == ["2025-01", "2025-02", "2025-03"]


async def test_row_without_id_is_listed_with_null_id(
    client, auth_headers, sample_record, csv_store,
):
    await client.post("/api/records", json=sample_record, headers=auth_headers)
    with csv_store.path.open("a", encoding="utf-8") as f:
        f.write(",2025-03-11,TN02,Madurai,Mysore,5,100,400,90,0,50\n")

    res = await client.get("/api/records", headers=auth_headers)
    assert res.status_code == 200
    assert [r["id"] for r in res.json()] == [1, None]
    assert res.json()[0]["createdAt"] is None

    created = await client.post("/api/records", json=sample_record, headers=auth_headers)
    assert created.json()["id"] == 2
