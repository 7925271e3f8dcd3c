from datetime import datetime, timedelta, timezone

from src import scraper
from src.config import Settings
from src.fetch import FetchError
from src.scraper import run_scrape
from src.store import MemoryStore
from tests.helpers import failing_pages, fake_fetcher, sample_pages

NOW = datetime(2024, 6, 1, 8, 30, tzinfo=timezone.utc)


def test_successful_run_stores_latest_and_dated_snapshots():
    store = MemoryStore()

    run = run_scrape(store, Settings(), fetch=fake_fetcher(sample_pages()), now=NOW)

    assert store.keys() == ["latest", "latest_raw", "snapshot:2024-06-01", "snapshot_raw:2024-06-01"]
    assert store.get("latest") == run.canonical
    assert store.get("snapshot:2024-06-01") == run.canonical
    assert store.get("latest_raw") == run.raw
    assert run.errors == []
    assert run.date_key == "2024-06-01"


def test_canonical_document_shape():
    store = MemoryStore()

    run = run_scrape(store, Settings(), fetch=fake_fetcher(sample_pages()), now=NOW)

    assert run.canonical["generated_at"] == "2024-06-01T08:30:00+00:00"
    assert run.canonical["airport"] == "PMI"
    assert [entry["iata"] for entry in run.canonical["airports"]] == ["BCN", "DUS", "LCY", "ARN"]
    assert "SAS" in run.canonical["airlines"]
    assert run.canonical["errors"] == []


def test_raw_document_keeps_published_labels():
    run = run_scrape(MemoryStore(), Settings(), fetch=fake_fetcher(sample_pages()), now=NOW)

    assert run.raw["timestamp"] == "2024-06-01T08:30:00+00:00"
    assert run.raw["destinations"][0]["raw"] == "BARCELONA-EL PRAT JOSEP TARRADELLAS (BCN)"
    assert run.raw["destinations"][0]["airlines"] == ["VUELING AIRLINES SA", "RYANAIR (RYR)", "RYANAIR DAC"]
    assert [airline["name"] for airline in run.raw["airlines"]] == ["RYANAIR (RYR)", "BRITISH AIRWAYS PLC"]
    assert len(run.raw["routes"]) == 3


def test_both_pages_are_requested_with_the_configured_agent():
    settings = Settings(user_agent="TestAgent/1.0", fetch_timeout=3.0)
    fetch = fake_fetcher(sample_pages(settings))

    run_scrape(MemoryStore(), settings, fetch=fetch, now=NOW)

    assert [url for url, _ in fetch.calls] == [settings.airlines_url, settings.destinations_url]
    assert all(kwargs == {"user_agent": "TestAgent/1.0", "timeout": 3.0} for _, kwargs in fetch.calls)


def test_failed_fetches_still_produce_and_store_a_result():
    store = MemoryStore()

    run = run_scrape(store, Settings(), fetch=fake_fetcher(failing_pages()), now=NOW)

    assert run.canonical["airports"] == []
    assert run.canonical["airlines"] == []
    assert run.errors == ["airlines: fetch failed: 503", "destinations: fetch failed: 503"]
    assert store.get("latest")["errors"] == run.errors
    assert store.get("snapshot_raw:2024-06-01")["errors"] == run.errors


def test_one_failed_page_does_not_discard_the_other():
    settings = Settings()
    pages = sample_pages(settings)
    pages[settings.airlines_url] = FetchError("fetch failed: 500")

    run = run_scrape(MemoryStore(), settings, fetch=fake_fetcher(pages), now=NOW)

    assert run.errors == ["airlines: fetch failed: 500"]
    assert len(run.canonical["airports"]) == 4
    assert run.raw["routes"] == []


def test_snapshot_date_is_the_utc_date():
    store = MemoryStore()
    late_evening = datetime(2024, 6, 1, 23, 30, tzinfo=timezone(timedelta(hours=-3)))

    run = run_scrape(store, Settings(), fetch=fake_fetcher(sample_pages()), now=late_evening)

    assert run.date_key == "2024-06-02"
    assert store.get("snapshot:2024-06-02") is not None
    assert store.get("snapshot:2024-06-01") is None


def test_default_fetcher_is_the_module_fetch_page(monkeypatch):
    fetch = fake_fetcher(sample_pages())
    monkeypatch.setattr(scraper, "fetch_page", fetch)

    run = run_scrape(MemoryStore(), Settings(), now=NOW)

    assert len(fetch.calls) == 2
    assert len(run.canonical["airports"]) == 4


def test_rerun_overwrites_the_same_day():
    store = MemoryStore()
    run_scrape(store, Settings(), fetch=fake_fetcher(sample_pages()), now=NOW)
    run_scrape(store, Settings(), fetch=fake_fetcher(failing_pages()), now=NOW + timedelta(hours=1))

    assert store.get("snapshot:2024-06-01")["airports"] == []
    assert store.get("latest")["generated_at"] == "2024-06-01T09:30:00+00:00"
