"""Environment-driven settings for the scraper and its HTTP entrypoints."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).resolve().parents[1]

AIRPORT_CODE = "PMI"
AIRPORT_NAME = "PMI - Palma de Mallorca"
SERVICE_NAME = "aena-pmi-api"

DEFAULT_DESTINATIONS_URL = (
    "https://www.aena.es/es/palma-de-mallorca/aerolineas-y-destinos/destinos-aeropuerto.html"
)
DEFAULT_AIRLINES_URL = "https://www.aena.es/es/palma-de-mallorca/aerolineas-y-destinos/aerolineas.html"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; AenaPMI-Worker/1.0)"
DEFAULT_SNAPSHOT_DIR = BASE_DIR / "snapshots"


def _env(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_seconds(name: str) -> Optional[float]:
    raw = _env(name)
    if raw is None:
        return None
    try:
        seconds = float(raw)
        if seconds <= 0:
            raise ValueError
    except ValueError:
        return None
    return seconds


@dataclass(frozen=True)
class Settings:
    destinations_url: str = DEFAULT_DESTINATIONS_URL
    airlines_url: str = DEFAULT_AIRLINES_URL
    user_agent: str = DEFAULT_USER_AGENT
    fetch_timeout: Optional[float] = None
    snapshot_dir: Path = DEFAULT_SNAPSHOT_DIR
    api_key: Optional[str] = None
    airport: str = AIRPORT_CODE

    @classmethod
    def from_env(cls) -> "Settings":
        snapshot_dir = _env("SNAPSHOT_DIR")
        return cls(
            destinations_url=_env("AENA_DESTINATIONS_URL") or DEFAULT_DESTINATIONS_URL,
            airlines_url=_env("AENA_AIRLINES_URL") or DEFAULT_AIRLINES_URL,
            user_agent=_env("AENA_USER_AGENT") or DEFAULT_USER_AGENT,
            fetch_timeout=_env_seconds("AENA_FETCH_TIMEOUT"),
            snapshot_dir=Path(snapshot_dir) if snapshot_dir else DEFAULT_SNAPSHOT_DIR,
            api_key=_env("API_KEY"),
        )
