"""Single best-effort download of an AENA listing page (no retries)."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from src.config import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a page cannot be downloaded (transport error or non-2xx status)."""


def fetch_page(url: str, *, user_agent: str = DEFAULT_USER_AGENT, timeout: Optional[float] = None) -> str:
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"fetch failed: {exc}") from exc

    if not response.ok:
        raise FetchError(f"fetch failed: {response.status_code}")

    logger.debug("Fetched %s (%d bytes)", url, len(response.content))
    return response.text
