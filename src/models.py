"""Record types shared by the extractor, the canonicalizers and the aggregator."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class RawRouteRecord:
    """One destination block from the AENA destinations page, as published."""

    raw_label: str
    iata: Optional[str]
    country: Optional[str]
    raw_airline_labels: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw": self.raw_label,
            "iata": self.iata,
            "country": self.country,
            "airlines": list(self.raw_airline_labels),
        }


@dataclass(frozen=True)
class RawDestinationLink:
    city: str
    iata: Optional[str]
    raw: str


@dataclass(frozen=True)
class RawAirlineRecord:
    """One airline block from the AENA airlines page with the destinations it lists."""

    name: str
    destinations: Tuple[RawDestinationLink, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "destinations": [asdict(link) for link in self.destinations],
        }


@dataclass(frozen=True)
class CanonicalCity:
    display_label: str
    iata: Optional[str]


@dataclass(frozen=True)
class AirportEntry:
    label: str
    iata: Optional[str]
    country: Optional[str]
    airlines: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "iata": self.iata,
            "country": self.country,
            "airlines": list(self.airlines),
        }


@dataclass
class Catalog:
    generated_at: datetime
    airport: str
    airports: List[AirportEntry] = field(default_factory=list)
    airlines: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat(),
            "airport": self.airport,
            "airports": [entry.to_dict() for entry in self.airports],
            "airlines": list(self.airlines),
        }
