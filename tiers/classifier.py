from typing import Sequence

from .types import TierDefinition

FALLBACK_TIER = "D"


def classify(value, tiers: Sequence[TierDefinition]) -> str:
    """Return the id of the first tier whose inclusive range holds ``value``.

    Order matters: this is a first-match scan, not a range search. When no
    tier matches, the lowest-ranked (last) tier id is returned.
    """
    for tier in tiers:
        if tier.contains(value):
            return tier.id
    if tiers:
        return tiers[-1].id
    return FALLBACK_TIER


def _fmt(number) -> str:
    if float(number).is_integer():
        return f"{int(number):,}"
    return f"{number:,}"


def tier_range_text(tier: TierDefinition, units: str) -> str:
    """Turn min/max into readable "35,000+ points" style."""
    lo, hi = tier.min_value, tier.max_value
    if lo is not None and hi is not None:
        return f"{_fmt(lo)}–{_fmt(hi)} {units}"
    if lo is not None:
        return f"{_fmt(lo)}+ {units}"
    if hi is not None:
        return f"≤ {_fmt(hi)} {units}"
    return ""
