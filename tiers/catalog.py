"""Daily puzzle catalog.

Puzzles are authored as plain dicts in ``tiers.data`` and turned into
immutable ``Puzzle`` objects here. Building a catalog validates every entry:
tier ranges must cover each item value exactly once and each item's true tier
is derived from its value. Problems found here are authoring bugs and raise
``CatalogError`` so a broken table never reaches players.
"""
import logging
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .classifier import classify
from .clock import Clock, date_key, system_clock
from .data import DAILY_PUZZLES
from .types import CategoryConfig, Puzzle, PuzzleItem, TierDefinition

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """The puzzle table is misconfigured."""


def _tier_from_raw(raw: Mapping) -> TierDefinition:
    return TierDefinition(
        id=raw["id"],
        label=raw.get("label", raw["id"]),
        min_value=raw.get("minValue"),
        max_value=raw.get("maxValue"),
    )


def validate_tiers(tiers: Sequence[TierDefinition], values=()) -> None:
    """Check that ``tiers`` partition ``values``.

    Each definition may leave at most one bound open, ids must be unique and
    every value must land in exactly one range.
    """
    if not tiers:
        raise CatalogError("Category has no tiers.")
    seen = set()
    for tier in tiers:
        if tier.id in seen:
            raise CatalogError(f"Duplicate tier id {tier.id!r}.")
        seen.add(tier.id)
        if tier.min_value is None and tier.max_value is None:
            raise CatalogError(f"Tier {tier.id!r} has no bounds.")
        if (
            tier.min_value is not None
            and tier.max_value is not None
            and tier.min_value > tier.max_value
        ):
            raise CatalogError(f"Tier {tier.id!r} has min above max.")
    for value in values:
        matches = [t.id for t in tiers if t.contains(value)]
        if len(matches) != 1:
            raise CatalogError(
                f"Value {value} falls in {len(matches)} tiers {matches}; "
                "ranges must not overlap or leave gaps."
            )


def build_puzzle(raw: Mapping, strict: bool = False) -> Puzzle:
    """Build a ``Puzzle`` from an authored dict, deriving true tiers."""
    cat = raw["category"]
    tiers = tuple(_tier_from_raw(t) for t in cat["tiers"])
    raw_items = raw["items"]
    validate_tiers(tiers, [it["value"] for it in raw_items])

    items = []
    seen_ids = set()
    for it in raw_items:
        if it["id"] in seen_ids:
            raise CatalogError(f"Duplicate item id {it['id']!r} in puzzle {raw['id']}.")
        seen_ids.add(it["id"])

        derived = classify(it["value"], tiers)
        authored = it.get("trueTier")
        if authored is not None and authored != derived:
            msg = (
                f"Puzzle {raw['id']}: item {it['id']!r} ({it['value']}) is authored "
                f"as {authored} but its value falls in {derived}."
            )
            if strict:
                raise CatalogError(msg)
            logger.warning("%s Using %s.", msg, derived)
        items.append(
            PuzzleItem(id=it["id"], name=it["name"], value=it["value"], true_tier=derived)
        )

    category = CategoryConfig(
        id=cat["id"], name=cat["name"], units=cat.get("units", ""), tiers=tiers
    )
    return Puzzle(id=raw["id"], category=category, items=tuple(items))


class PuzzleCatalog:
    """Date-keyed puzzle table with a deterministic fallback."""

    def __init__(self, entries: Mapping[str, Mapping], strict: bool = False, clock: Clock = system_clock):
        if not entries:
            raise CatalogError("No daily puzzles configured.")
        self._puzzles: Dict[str, Puzzle] = {
            key: build_puzzle(raw, strict=strict) for key, raw in entries.items()
        }
        self._fallback_key = sorted(self._puzzles)[0]
        self.clock = clock

    def __len__(self):
        return len(self._puzzles)

    def keys(self):
        return sorted(self._puzzles)

    def get(self, key: str) -> Optional[Puzzle]:
        return self._puzzles.get(key)

    def puzzle_for_date(self, day=None) -> Tuple[Puzzle, str]:
        """Return ``(puzzle, puzzle_id)`` for ``day`` (default: today).

        ``puzzle_id`` is always the requested calendar key, even when the
        earliest configured puzzle is served as a fallback.
        """
        key = date_key(day if day is not None else self.clock())
        puzzle = self._puzzles.get(key)
        if puzzle is None:
            logger.debug("No puzzle for %s, serving %s", key, self._fallback_key)
            puzzle = self._puzzles[self._fallback_key]
        return puzzle, key


_default_catalog: Optional[PuzzleCatalog] = None


def default_catalog() -> PuzzleCatalog:
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = PuzzleCatalog(DAILY_PUZZLES)
    return _default_catalog


def get_puzzle_for_date(day=None) -> Tuple[Puzzle, str]:
    return default_catalog().puzzle_for_date(day)
