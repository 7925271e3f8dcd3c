import pytest
from fastapi.testclient import TestClient

from src import api, scraper
from src.config import Settings
from src.store import MemoryStore
from tests.helpers import failing_pages, fake_fetcher, sample_pages


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(api, "store", MemoryStore())
    monkeypatch.setattr(api, "settings", Settings())
    monkeypatch.setattr(scraper, "fetch_page", fake_fetcher(sample_pages()))
    return TestClient(api.app)


def test_health_and_index(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert "/api/scrape" in client.get("/").json()["endpoints"]


def test_catalog_is_not_found_before_the_first_scrape(client):
    response = client.get("/api/catalog")

    assert response.status_code == 404
    assert response.json() == {"detail": "No data yet. Trigger /api/scrape first."}


def test_scrape_then_read(client):
    scraped = client.post("/api/scrape")
    assert scraped.status_code == 200
    assert scraped.json()["message"] == "Scrape completed"

    catalog = client.get("/api/catalog").json()
    assert [entry["label"] for entry in catalog["airports"]][:2] == ["Barcelona (BCN)", "Düsseldorf (DUS)"]
    assert client.get("/api/airlines").json()["count"] == 8
    assert client.get("/api/routes").json()["count"] == 3
    assert client.get("/api/raw").json()["airport"] == "PMI"


def test_scrape_accepts_get(client):
    assert client.get("/api/scrape").status_code == 200


def test_snapshot_by_date(client):
    date_key = client.post("/api/scrape").json()["generated_at"][:10]

    assert client.get(f"/api/snapshot/{date_key}").json()["airport"] == "PMI"
    assert "routes" in client.get(f"/api/snapshot/{date_key}?raw=true").json()
    assert client.get("/api/snapshot/1999-01-01").status_code == 404
    assert client.get("/api/snapshot/not-a-date").status_code == 400


def test_failed_source_still_returns_a_result(client, monkeypatch):
    monkeypatch.setattr(scraper, "fetch_page", fake_fetcher(failing_pages()))

    body = client.post("/api/scrape").json()

    assert body["airports"] == []
    assert len(body["errors"]) == 2
    assert client.get("/api/status").json()["errors"] == body["errors"]


def test_api_key_guards_data_endpoints(client, monkeypatch):
    monkeypatch.setattr(api, "settings", Settings(api_key="secret"))

    assert client.get("/api/catalog").status_code == 401
    assert client.get("/api/catalog", headers={"X-API-Key": "wrong"}).status_code == 401
    assert client.get("/api/catalog", headers={"X-API-Key": "secret"}).status_code == 404
    assert client.get("/api/catalog?key=secret").status_code == 404
    assert client.get("/api/status").status_code == 200
    assert client.get("/health").status_code == 200


def test_status_model(client):
    body = client.get("/api/status").json()

    assert body["service"] == "aena-pmi-api"
    assert body["last_update"] is None
    assert body["airports_count"] == 0
