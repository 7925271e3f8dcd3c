"""Aggregation of raw AENA records into the published catalog."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from unidecode import unidecode

from src.airline_names import canonicalize_airline
from src.city_names import canonical_city
from src.config import AIRPORT_CODE
from src.models import AirportEntry, Catalog, RawAirlineRecord, RawRouteRecord

logger = logging.getLogger(__name__)


def label_sort_key(label: str) -> Tuple[str, str]:
    """Accent- and case-insensitive ordering ("Düsseldorf" next to "Dublin"), ties broken by the label."""
    return unidecode(label).casefold(), label


def canonical_airlines(raw_labels: Iterable[str]) -> Tuple[str, ...]:
    brands = {canonicalize_airline(label) for label in raw_labels}
    brands.discard("")
    return tuple(sorted(brands))


def build_airport_entry(record: RawRouteRecord) -> AirportEntry:
    city = canonical_city(record.raw_label)
    return AirportEntry(
        label=city.display_label,
        iata=city.iata,
        country=record.country,
        airlines=canonical_airlines(record.raw_airline_labels),
    )


def build_catalog(
    records: Iterable[RawRouteRecord],
    *,
    airport: str = AIRPORT_CODE,
    generated_at: Optional[datetime] = None,
) -> Catalog:
    """One entry per record (no merging across blocks), airports by label, global airline index."""
    entries = [build_airport_entry(record) for record in records]
    entries.sort(key=lambda entry: label_sort_key(entry.label))

    airlines = set()
    for entry in entries:
        airlines.update(entry.airlines)

    catalog = Catalog(
        generated_at=generated_at or datetime.now(timezone.utc),
        airport=airport,
        airports=entries,
        airlines=sorted(airlines),
    )
    logger.debug("Built catalog with %d airports and %d airlines", len(entries), len(catalog.airlines))
    return catalog


def build_routes(airline_records: Iterable[RawAirlineRecord]) -> List[Dict[str, Any]]:
    """Airline -> destination pairs as published on the airlines page."""
    return [
        {"airline": record.name, "destination": link.city, "iata": link.iata}
        for record in airline_records
        for link in record.destinations
    ]
