"""
Shared helpers for configuring CORS across the Flask and FastAPI entrypoints.
"""
from __future__ import annotations

import os
from typing import List, Sequence, Tuple

# The catalog is public read-only data; any origin may read it unless narrowed via env.
DEFAULT_EXPLICIT_ORIGINS: Sequence[str] = ["*"]
DEFAULT_REGEX_ORIGINS: Sequence[str] = []
ALLOWED_METHODS: Sequence[str] = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS: Sequence[str] = ["Content-Type", "X-API-Key"]


def _split_env_list(raw_value: str | None) -> List[str]:
    if raw_value is None:
        return []
    return [entry.strip() for entry in raw_value.split(",") if entry.strip()]


def _list_from_env(name: str, default: Sequence[str]) -> List[str]:
    # Unset and blank both mean "use defaults".
    values = _split_env_list(os.environ.get(name))
    return values or list(default)


def get_cors_settings() -> Tuple[List[str], List[str]]:
    """
    Returns the explicit origins and regex-based origins allowed by the server.

    * CORS_ALLOW_ORIGINS controls the explicit list (comma-separated).
    * CORS_ALLOW_ORIGIN_REGEXES controls regex patterns (comma-separated).
    """
    explicit = _list_from_env("CORS_ALLOW_ORIGINS", DEFAULT_EXPLICIT_ORIGINS)
    regexes = _list_from_env("CORS_ALLOW_ORIGIN_REGEXES", DEFAULT_REGEX_ORIGINS)
    # A bare '*' belongs in the explicit list, not in a regex.
    regexes = [pattern for pattern in regexes if pattern != "*"]
    return explicit, regexes


def combine_regex_patterns(patterns: Sequence[str]) -> str | None:
    """
    Returns a single non-capturing regex that matches any of the supplied patterns.
    FastAPI's CORSMiddleware accepts only one regex.
    """
    if not patterns:
        return None
    return "|".join(f"(?:{pattern})" for pattern in patterns)
