import logging
from uuid import uuid4

from flask import session

from tiers.clock import date_key, system_clock

logger = logging.getLogger(__name__)


def get_player_id() -> str:
    """Anonymous player id kept in the signed session cookie."""
    player_id = session.get("player_id")
    if not player_id:
        player_id = uuid4().hex
        session["player_id"] = player_id
        session.permanent = True
    return player_id


class DailyBoard:
    """Today's puzzle, cached until the calendar day changes."""

    def __init__(self, catalog, clock=system_clock):
        self.catalog = catalog
        self.clock = clock
        self.puzzle = None
        self.puzzle_id = None
        self.refresh()

    def refresh(self, day=None):
        self.puzzle, self.puzzle_id = self.catalog.puzzle_for_date(day or self.clock())
        logger.info("Serving puzzle %s as %s", self.puzzle.id, self.puzzle_id)

    def current(self):
        # catch a missed or disabled rollover timer
        if date_key(self.clock()) != self.puzzle_id:
            self.refresh()
        return self.puzzle, self.puzzle_id
