"""API key guard shared by the FastAPI and Flask entrypoints."""

from __future__ import annotations

import hmac
from typing import Optional

API_KEY_HEADER = "X-API-Key"
API_KEY_QUERY_PARAM = "key"

# Readable without a key so uptime checks keep working when a key is configured.
PUBLIC_PATHS = frozenset({"/", "/health", "/api/status"})


def requires_api_key(path: str, configured_key: Optional[str]) -> bool:
    if not configured_key:
        return False
    if path in PUBLIC_PATHS:
        return False
    return path.startswith("/api/")


def is_authorized(supplied_key: Optional[str], configured_key: Optional[str]) -> bool:
    """Constant-time comparison; an unset configured key authorizes everyone."""
    if not configured_key:
        return True
    if not supplied_key:
        return False
    return hmac.compare_digest(supplied_key.encode("utf-8"), configured_key.encode("utf-8"))
