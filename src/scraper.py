"""One scrape run: fetch both AENA pages, extract, canonicalize, persist.

A failed fetch is recorded in `errors` and the run carries on with no records for
that page, so a broken source still produces (and stores) a result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from src.catalog import build_catalog, build_routes
from src.config import Settings
from src.extractor import extract_airline_records, extract_route_records
from src.fetch import FetchError, fetch_page
from src.store import (
    LATEST_KEY,
    LATEST_RAW_KEY,
    KeyValueStore,
    raw_snapshot_key,
    snapshot_key,
)

logger = logging.getLogger(__name__)

Fetcher = Callable[..., str]


@dataclass
class ScrapeRun:
    raw: Dict[str, Any]
    canonical: Dict[str, Any]

    @property
    def errors(self) -> List[str]:
        return list(self.canonical.get("errors", []))

    @property
    def date_key(self) -> str:
        return self.canonical["generated_at"][:10]


def _download(fetch: Fetcher, page: str, url: str, settings: Settings, errors: List[str]) -> Optional[str]:
    try:
        return fetch(url, user_agent=settings.user_agent, timeout=settings.fetch_timeout)
    except FetchError as exc:
        message = f"{page}: {exc}"
        errors.append(message)
        logger.warning("fetch failed", extra={"source": page, "error": str(exc)})
        return None


def run_scrape(
    store: KeyValueStore,
    settings: Optional[Settings] = None,
    *,
    fetch: Optional[Fetcher] = None,
    now: Optional[datetime] = None,
) -> ScrapeRun:
    settings = settings or Settings.from_env()
    fetch = fetch or fetch_page
    generated_at = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    errors: List[str] = []

    airlines_html = _download(fetch, "airlines", settings.airlines_url, settings, errors)
    airline_records = list(extract_airline_records(airlines_html)) if airlines_html is not None else []

    destinations_html = _download(fetch, "destinations", settings.destinations_url, settings, errors)
    route_records = list(extract_route_records(destinations_html)) if destinations_html is not None else []

    catalog = build_catalog(route_records, airport=settings.airport, generated_at=generated_at)
    canonical = catalog.to_dict()
    canonical["errors"] = list(errors)

    raw = {
        "timestamp": generated_at.isoformat(),
        "airport": settings.airport,
        "airlines": [record.to_dict() for record in airline_records],
        "destinations": [record.to_dict() for record in route_records],
        "routes": build_routes(airline_records),
        "errors": list(errors),
    }

    date_key = generated_at.date().isoformat()
    store.put(LATEST_RAW_KEY, raw)
    store.put(raw_snapshot_key(date_key), raw)
    store.put(LATEST_KEY, canonical)
    store.put(snapshot_key(date_key), canonical)

    logger.info(
        "scrape completed",
        extra={
            "records": len(route_records),
            "airports": len(catalog.airports),
            "airlines": len(catalog.airlines),
            "errors": len(errors),
        },
    )
    return ScrapeRun(raw=raw, canonical=canonical)
