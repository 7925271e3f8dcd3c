"""Read/trigger helpers behind the HTTP entrypoints (FastAPI and Flask)."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from src.config import AIRPORT_NAME, SERVICE_NAME, Settings
from src.scraper import run_scrape
from src.store import LATEST_KEY, LATEST_RAW_KEY, KeyValueStore, raw_snapshot_key, snapshot_key

NO_DATA_MESSAGE = "No data yet. Trigger /api/scrape first."
TRUTHY = {"1", "true", "yes", "y"}

ENDPOINTS = {
    "/api/catalog": "Canonical airports with their airlines, plus the airline index",
    "/api/airlines": "Canonical airline index",
    "/api/raw": "Raw extraction (airlines page, destinations page, route pairs)",
    "/api/routes": "Airline-destination pairs as published",
    "/api/snapshot/:date": "Dated snapshot (YYYY-MM-DD); add ?raw=true for the raw extraction",
    "/api/scrape": "Run a scrape now and return the canonical result",
    "/api/status": "Service status",
}


class ServiceError(Exception):
    """Raised when a request cannot be satisfied."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


def parse_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUTHY


def _require(store: KeyValueStore, key: str, message: str = NO_DATA_MESSAGE) -> Dict[str, Any]:
    data = store.get(key)
    if data is None:
        raise ServiceError(404, message)
    return data


def describe_service() -> Dict[str, Any]:
    return {
        "service": "AENA PMI Flight Data API",
        "airport": AIRPORT_NAME,
        "endpoints": dict(ENDPOINTS),
    }


def get_catalog(store: KeyValueStore) -> Dict[str, Any]:
    return _require(store, LATEST_KEY)


def get_raw(store: KeyValueStore) -> Dict[str, Any]:
    return _require(store, LATEST_RAW_KEY)


def get_airline_index(store: KeyValueStore) -> Dict[str, Any]:
    catalog = get_catalog(store)
    airlines = catalog.get("airlines") or []
    return {"updated": catalog.get("generated_at"), "count": len(airlines), "airlines": airlines}


def get_routes(store: KeyValueStore) -> Dict[str, Any]:
    raw = get_raw(store)
    routes = raw.get("routes") or []
    return {"updated": raw.get("timestamp"), "count": len(routes), "routes": routes}


def get_snapshot(store: KeyValueStore, date_key: str, *, raw: bool = False) -> Dict[str, Any]:
    try:
        date.fromisoformat(date_key)
    except ValueError as exc:
        raise ServiceError(400, f"Invalid snapshot date '{date_key}', expected YYYY-MM-DD.") from exc
    key = raw_snapshot_key(date_key) if raw else snapshot_key(date_key)
    return _require(store, key, f"No snapshot for {date_key}")


def status_summary(store: KeyValueStore) -> Dict[str, Any]:
    catalog = store.get(LATEST_KEY) or {}
    raw = store.get(LATEST_RAW_KEY) or {}
    return {
        "service": SERVICE_NAME,
        "airport": AIRPORT_NAME,
        "last_update": catalog.get("generated_at"),
        "airports_count": len(catalog.get("airports") or []),
        "airlines_count": len(catalog.get("airlines") or []),
        "routes_count": len(raw.get("routes") or []),
        "errors": list(catalog.get("errors") or []),
    }


def trigger_scrape(store: KeyValueStore, settings: Optional[Settings] = None) -> Dict[str, Any]:
    run = run_scrape(store, settings)
    return {"message": "Scrape completed", **run.canonical}
