"""Canonical display names for AENA destination labels.

    "BARCELONA-EL PRAT JOSEP TARRADELLAS (BCN)" -> "Barcelona (BCN)"
    "LONDRES /LONDON CITY APT. (LCY)"           -> "London City (LCY)"
    "LONDRES /GATWICK (LGW)"                    -> "London (LGW)"
"""

from __future__ import annotations

import re
from typing import Optional

from data.airports import (
    AIRPORT_ONLY_NAMES,
    AIRPORT_SUFFIXES,
    CITY_TRANSLATIONS,
    LINKING_WORDS,
)
from src.iata import split_iata
from src.models import CanonicalCity
from src.rule_pipeline import run_pipeline, squeeze

_DASH = re.compile(r"\s*[-–—]\s*")
_TRAILING_INITIALS = re.compile(r"(?:\s*\b[^\W\d_]\.){1,4}$")
_INLINE_CODE = re.compile(r"\(\s*[A-Z]{3}\s*\)")
_AIRPORT_SUFFIX = re.compile(
    r"\s*\b(?:" + "|".join(re.escape(suffix) for suffix in AIRPORT_SUFFIXES) + r")$",
    re.IGNORECASE,
)
_LEADING_INITIAL = re.compile(r"^[^\W\d_]\.\s*")


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:]


def case_place_name(text: str) -> str:
    """Lowercase, translate Spanish place tokens, capitalize all but linking words."""
    words = []
    for index, token in enumerate(text.lower().split()):
        translated = CITY_TRANSLATIONS.get(token.upper())
        if translated is not None:
            words.append(translated)
        elif index > 0 and token in LINKING_WORDS:
            words.append(token)
        else:
            words.append(_capitalize(token))
    return " ".join(words)


def _drop_dash_qualifier(text: str) -> str:
    # "BARCELONA-EL PRAT JOSEP TARRADELLAS" names the airport after the dash.
    return _DASH.split(text, maxsplit=1)[0]


def _drop_trailing_initials(text: str) -> str:
    return _TRAILING_INITIALS.sub("", text)


def _drop_inline_codes(text: str) -> str:
    return _INLINE_CODE.sub(" ", text)


def _clean_sub_airport(text: str) -> str:
    cleaned = squeeze(text)
    while True:
        stripped = squeeze(_AIRPORT_SUFFIX.sub("", cleaned))
        if stripped == cleaned:
            break
        cleaned = stripped
    return squeeze(_LEADING_INITIAL.sub("", cleaned))


def _merge_sub_airport(text: str) -> Optional[str]:
    if "/" not in text:
        return None
    main, _, sub = text.partition("/")
    main_name = case_place_name(main)
    sub_clean = _clean_sub_airport(sub)
    if not sub_clean or sub_clean.upper() in AIRPORT_ONLY_NAMES:
        return main_name or None
    sub_name = case_place_name(sub_clean)
    if not main_name or sub_name.casefold().startswith(main_name.casefold()):
        return sub_name
    return f"{main_name} {sub_name}"


CLEANUP_RULES = (
    _drop_dash_qualifier,
    _drop_trailing_initials,
    _drop_inline_codes,
)

RESOLVERS = (
    _merge_sub_airport,
    case_place_name,
)


def canonicalize_city(raw_label: Optional[str]) -> str:
    """Map a raw city/airport label (without its trailing IATA code) to a display name."""
    return run_pipeline(raw_label, CLEANUP_RULES, RESOLVERS)


def canonical_city(raw_label: Optional[str]) -> CanonicalCity:
    base_text, iata = split_iata(raw_label)
    name = canonicalize_city(base_text)
    display = f"{name} ({iata})" if iata else name
    return CanonicalCity(display_label=display, iata=iata)
