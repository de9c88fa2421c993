import random
from typing import Optional

from .assignment import AssignmentStore
from .classifier import tier_range_text
from .scoring import ScoringEngine
from .storage import PersistedState, PersistenceAdapter
from .types import DEFAULT_MAX_ATTEMPTS, Puzzle, SubmitResult


class GameSession:
    """One player's board for one puzzle id.

    Wires the assignment store, scoring engine and persistence together and
    refuses moves once the game is over. With ``autosave`` the board is
    written after every move so a reload resumes mid-arrangement.
    """

    def __init__(
        self,
        puzzle: Puzzle,
        puzzle_id: str,
        storage: Optional[PersistenceAdapter] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        autosave: bool = True,
    ):
        self.puzzle = puzzle
        self.puzzle_id = puzzle_id
        self.storage = storage
        self.autosave = autosave
        self.assignment = AssignmentStore(puzzle.category.tier_ids(), puzzle.items)
        self.engine = ScoringEngine(puzzle, puzzle_id, storage, max_attempts)

    @classmethod
    def open(cls, catalog, storage=None, day=None, **kwargs):
        puzzle, puzzle_id = catalog.puzzle_for_date(day)
        session = cls(puzzle, puzzle_id, storage, **kwargs)
        session.load()
        return session

    @property
    def game_over(self) -> bool:
        return self.engine.game_over

    def load(self):
        saved = self.storage.load(self.puzzle_id) if self.storage else None
        self.assignment.seed(self.puzzle.items)
        if saved is not None and saved.player_tiers:
            self.assignment.restore(saved.player_tiers)
        self.engine.restore(saved)

    def move(self, item_id: str, destination: str) -> bool:
        if self.engine.game_over:
            return False
        changed = self.assignment.move(item_id, destination)
        if changed and self.autosave and self.storage is not None:
            self.storage.save(self.puzzle_id, PersistedState(
                player_tiers=self.assignment.snapshot(),
                attempts_used=self.engine.state.attempts_used,
            ))
        return changed

    def submit(self) -> SubmitResult:
        return self.engine.submit(self.assignment)

    def shuffled_items(self):
        """Items in an order that is random but stable for this puzzle id."""
        items = list(self.puzzle.items)
        random.Random(self.puzzle_id).shuffle(items)
        return items

    def state(self) -> dict:
        st = self.engine.state
        return {
            "puzzleId": self.puzzle_id,
            "playerTiers": self.assignment.snapshot(),
            "complete": self.assignment.is_complete(),
            "attemptsUsed": st.attempts_used,
            "maxAttempts": st.max_attempts,
            "attemptsLeft": self.engine.attempts_left,
            "failedAttempts": self.engine.failed_attempts(),
            "lastCorrectCount": st.last_correct_count,
            "results": st.last_result if st.game_over else None,
            "gameOver": st.game_over,
        }

    def board(self) -> dict:
        """Puzzle payload for the front end; answers stay hidden until the end."""
        category = self.puzzle.category
        reveal = self.engine.game_over
        items = []
        for item in self.shuffled_items():
            entry = {"id": item.id, "name": item.name}
            if reveal:
                entry["value"] = item.value
                entry["trueTier"] = item.true_tier
            items.append(entry)
        return {
            "puzzleId": self.puzzle_id,
            "category": {
                "id": category.id,
                "name": category.name,
                "units": category.units,
                "tiers": [
                    {
                        "id": t.id,
                        "label": t.label,
                        "range": tier_range_text(t, category.units),
                    }
                    for t in category.tiers
                ],
            },
            "items": items,
        }
