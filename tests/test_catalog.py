import logging
from datetime import date, datetime

import pytest

from conftest import TIERS, raw_puzzle
from tiers.catalog import CatalogError, PuzzleCatalog, build_puzzle, get_puzzle_for_date, validate_tiers
from tiers.catalog import _tier_from_raw
from tiers.clock import date_key
from tiers.data import DAILY_PUZZLES


def test_date_key_is_zero_padded_and_ignores_time():
    assert date_key(date(2025, 1, 5)) == "2025-01-05"
    assert date_key(datetime(2025, 1, 5, 23, 59, 59)) == "2025-01-05"
    assert date_key(datetime(2025, 1, 5, 0, 0)) == "2025-01-05"


def test_exact_date_lookup(catalog):
    puzzle, puzzle_id = catalog.puzzle_for_date(date(2025, 11, 17))
    assert puzzle.id == "2025-11-17"
    assert puzzle_id == "2025-11-17"


def test_missing_date_falls_back_to_earliest_key_but_keeps_requested_id():
    catalog = PuzzleCatalog({
        "2025-12-01": raw_puzzle("2025-12-01"),
        "2025-11-20": raw_puzzle("2025-11-20"),
    })
    puzzle, puzzle_id = catalog.puzzle_for_date(date(2026, 3, 4))
    assert puzzle.id == "2025-11-20"
    assert puzzle_id == "2026-03-04"


def test_default_date_comes_from_clock(catalog, clock):
    clock.now = datetime(2025, 11, 17, 23, 59)
    puzzle, puzzle_id = catalog.puzzle_for_date()
    assert puzzle_id == "2025-11-17"
    assert puzzle.id == "2025-11-17"


def test_empty_catalog_is_fatal():
    with pytest.raises(CatalogError):
        PuzzleCatalog({})


def test_true_tier_is_derived_from_value():
    puzzle = build_puzzle(raw_puzzle())
    assert {i.id: i.true_tier for i in puzzle.items} == {"a": "S", "b": "A", "c": "B"}


def test_mismatched_true_tier_is_corrected_and_logged(caplog):
    raw = raw_puzzle(items=[
        {"id": "a", "name": "Alpha", "value": 35, "trueTier": "A"},
        {"id": "b", "name": "Bravo", "value": 25, "trueTier": "A"},
    ])
    with caplog.at_level(logging.WARNING, logger="tiers.catalog"):
        puzzle = build_puzzle(raw)
    assert puzzle.items[0].true_tier == "S"
    assert "'a'" in caplog.text


def test_mismatched_true_tier_raises_in_strict_mode():
    raw = raw_puzzle(items=[{"id": "a", "name": "Alpha", "value": 35, "trueTier": "B"}])
    with pytest.raises(CatalogError):
        build_puzzle(raw, strict=True)


def test_duplicate_item_ids_rejected():
    raw = raw_puzzle(items=[
        {"id": "a", "name": "Alpha", "value": 35},
        {"id": "a", "name": "Alpha again", "value": 3},
    ])
    with pytest.raises(CatalogError):
        build_puzzle(raw)


def test_validate_tiers_rejects_overlap_and_gaps():
    tiers = [_tier_from_raw(t) for t in TIERS]
    validate_tiers(tiers, [0, 4, 5, 9, 10, 29, 30, 10_000])

    overlapping = tiers + [_tier_from_raw({"id": "X", "minValue": 25, "maxValue": 27})]
    with pytest.raises(CatalogError):
        validate_tiers(overlapping, [26])

    gappy = [_tier_from_raw({"id": "S", "minValue": 30, "maxValue": None}),
             _tier_from_raw({"id": "D", "minValue": None, "maxValue": 9})]
    with pytest.raises(CatalogError):
        validate_tiers(gappy, [15])


def test_validate_tiers_rejects_unbounded_definition():
    with pytest.raises(CatalogError):
        validate_tiers([_tier_from_raw({"id": "S"})])


def test_shipped_catalog_is_consistent():
    catalog = PuzzleCatalog(DAILY_PUZZLES, strict=True)
    assert len(catalog) == len(DAILY_PUZZLES)
    for key in catalog.keys():
        puzzle = catalog.get(key)
        assert puzzle.id == key
        assert len({i.id for i in puzzle.items}) == len(puzzle.items)


def test_module_level_lookup_uses_shipped_table():
    puzzle, puzzle_id = get_puzzle_for_date(date(2025, 11, 18))
    assert puzzle_id == "2025-11-18"
    assert puzzle.category.id == "mlb-career-hr"
