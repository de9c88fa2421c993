"""Validate the daily puzzle table before shipping it.

    python check_catalog.py            # warn on trueTier mismatches
    python check_catalog.py --strict   # fail on them
"""
import logging
import sys

from tiers.catalog import CatalogError, PuzzleCatalog
from tiers.classifier import tier_range_text
from tiers.data import DAILY_PUZZLES


def main(argv=None, entries=None):
    argv = sys.argv[1:] if argv is None else argv
    strict = "--strict" in argv
    try:
        catalog = PuzzleCatalog(DAILY_PUZZLES if entries is None else entries, strict=strict)
    except CatalogError as e:
        print(f"Catalog check failed: {e}")
        return 1

    for key in catalog.keys():
        puzzle = catalog.get(key)
        print(f"{key}  {puzzle.category.name} ({len(puzzle.items)} items)")
        for tier in puzzle.category.tiers:
            count = sum(1 for i in puzzle.items if i.true_tier == tier.id)
            print(f"  {tier.label:<2} {tier_range_text(tier, puzzle.category.units):<36} {count}")
    print(f"Checked {len(catalog)} puzzles.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
