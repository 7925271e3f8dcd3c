"""Ordered rule runner shared by the city and airline canonicalizers.

A pipeline is two ordered tuples:

* cleanup rules (`str -> str`) applied one after another; a rule whose output is
  empty is ignored, so no rule can erase a label entirely;
* resolvers (`str -> Optional[str]`) tried in order; the first non-empty result is
  the canonical value.

New edge cases go in as new rules at the right position instead of as branches
inside existing ones.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

Rule = Callable[[str], str]
Resolver = Callable[[str], Optional[str]]


def squeeze(text: Optional[str]) -> str:
    """Collapse internal whitespace and trim separators left behind by a strip."""
    return " ".join((text or "").split()).strip(" ,;")


def run_pipeline(raw: Optional[str], rules: Sequence[Rule], resolvers: Sequence[Resolver]) -> str:
    text = squeeze(raw)
    for rule in rules:
        candidate = squeeze(rule(text))
        if candidate:
            text = candidate
    for resolve in resolvers:
        resolved = resolve(text)
        if resolved:
            return resolved
    return text
