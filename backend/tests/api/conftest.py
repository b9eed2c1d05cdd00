"""API test fixtures — FastAPI test client over a temporary CSV store.

Invariants:
    - Every test gets a fresh CSV file under tmp_path
    - get_store dependency overridden; the lifespan (and its real store) never runs
    - auth_headers logs in through /api/login, exercising the real token path
"""

import pytest
from httpx import ASGITransport, AsyncClient

from freight_ledger.infrastructure.csv_store import CsvRecordStore
from freight_ledger.infrastructure.store_factory import get_store
from freight_ledger.main import app


@pytest.fixture
def csv_store(tmp_path):
    return CsvRecordStore(tmp_path / "data.csv")


@pytest.fixture
async def client(csv_store):
    """FastAPI test client with the record store overridden."""
    app.dependency_overrides[get_store] = lambda: csv_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def auth_headers(client, operator_credentials):
    res = await client.post("/api/login", json={
        "username": operator_credentials["username"],
        "password": operator_credentials["password"],
    })
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}
