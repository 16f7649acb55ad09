from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    db_path = tmp_path / "ordermap_pages.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("ORDERMAP_DB_AUTO_CREATE", "true")
    monkeypatch.setenv("ORDERMAP_GEOCODER", "fake")

    from services.api.app.main import app

    with TestClient(app) as c:
        yield c


def test_form_page_renders(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'action="/submit"' in response.text
    for field in ("name", "phone", "address", "preferred_delivery_time"):
        assert f'name="{field}"' in response.text


def test_map_page_lists_submitted_addresses(client: TestClient) -> None:
    client.post("/submit", data={"name": "A", "address": "9 Harbor Way"}, follow_redirects=False)
    client.post("/submit", data={"name": "B", "address": "10 <Quay> Rd"}, follow_redirects=False)

    response = client.get("/map")

    assert response.status_code == 200
    assert "9 Harbor Way" in response.text
    assert "10 &lt;Quay&gt; Rd" in response.text
    assert "/static/map.js" in response.text


def test_map_page_without_orders(client: TestClient) -> None:
    response = client.get("/map")
    assert response.status_code == 200
    assert "No orders yet." in response.text


def test_submit_redirect_lands_on_map(client: TestClient) -> None:
    response = client.post("/submit", data={"name": "A", "address": "11 Pier St"})

    assert response.status_code == 200
    assert str(response.url).endswith("/map")
    assert "11 Pier St" in response.text


def test_map_page_store_failure_is_500(client: TestClient) -> None:
    from services.api.app.db.deps import get_store
    from services.api.app.services.store import StoreError

    class _BrokenStore:
        def list_all(self) -> list:
            raise StoreError("order listing failed: no such table: orders")

    client.app.dependency_overrides[get_store] = lambda: _BrokenStore()
    try:
        response = client.get("/map")
    finally:
        client.app.dependency_overrides.clear()

    assert response.status_code == 500
    assert "no such table" in response.text


def test_static_assets_are_served(client: TestClient) -> None:
    response = client.get("/static/map.js")
    assert response.status_code == 200
    assert "/api/orders" in response.text


def test_missing_static_asset_is_404(client: TestClient) -> None:
    response = client.get("/static/nope.js")
    assert response.status_code == 404


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
