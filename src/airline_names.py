"""Canonical brand names for AENA airline labels.

    "RYANAIR (RYR)"                 -> "Ryanair"
    "TUIFLY GMBH, LANGENHAGEN"      -> "TUIfly"
    "SCANDINAVIAN AIRLINES SYSTEM"  -> "SAS"
    "EASYJET AIRLINE COMPANY LIMITED" -> "easyJet"

Legal-form stripping runs before any table lookup, and the exact override table is
checked before brand prefixes so a historical name never half-matches a prefix.
"""

from __future__ import annotations

import re
from typing import Optional

from data.airlines import (
    BRAND_PREFIXES,
    GERMAN_COMPANY_MARKER,
    LEGAL_FORMS,
    NOISE_PHRASES,
    OVERRIDES,
    UPPERCASE_TOKENS,
)
from src.rule_pipeline import run_pipeline, squeeze

_TRAILING_CODE = re.compile(r"\s*\([A-Z]{3}\)$")
_GERMAN_COMPANY = re.compile(r"[\s,]*\b" + re.escape(GERMAN_COMPANY_MARKER) + r"\b.*$", re.IGNORECASE)
_LEGAL_FORM = re.compile(
    r"[\s,]+(?:" + "|".join(re.escape(form) for form in LEGAL_FORMS) + r")$",
    re.IGNORECASE,
)
_NOISE = [re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE) for phrase in NOISE_PHRASES]


def _title_token(token: str) -> str:
    if token.upper() in UPPERCASE_TOKENS:
        return token.upper()
    return "-".join(part[:1].upper() + part[1:] for part in token.split("-"))


def title_case(text: str) -> str:
    return " ".join(_title_token(token) for token in text.lower().split())


def _strip_trailing_code(text: str) -> str:
    return _TRAILING_CODE.sub("", text)


def _strip_german_company(text: str) -> str:
    return _GERMAN_COMPANY.sub("", text)


def _strip_legal_forms(text: str) -> str:
    # "CO. LTD" style chains: keep stripping while a legal form closes the name.
    while True:
        stripped = squeeze(_LEGAL_FORM.sub("", text))
        if not stripped or stripped == text:
            return text
        text = stripped


def _strip_noise_phrases(text: str) -> str:
    for pattern in _NOISE:
        text = pattern.sub(" ", text)
    return text


def _override(text: str) -> Optional[str]:
    return OVERRIDES.get(text.upper())


def _brand_prefix(text: str) -> Optional[str]:
    upper = text.upper()
    for prefix, brand in BRAND_PREFIXES:
        if upper == prefix or upper.startswith(prefix + "."):
            return brand
        if upper.startswith(prefix + " "):
            return f"{brand} {title_case(text[len(prefix) + 1:])}"
    return None


CLEANUP_RULES = (
    _strip_trailing_code,
    _strip_german_company,
    _strip_legal_forms,
    _strip_noise_phrases,
)

RESOLVERS = (
    _override,
    _brand_prefix,
    title_case,
)


def canonicalize_airline(raw_label: Optional[str]) -> str:
    return run_pipeline(raw_label, CLEANUP_RULES, RESOLVERS)
