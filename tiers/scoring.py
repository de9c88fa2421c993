"""Scoring and attempt budget for one puzzle id.

A small state machine: IN_PROGRESS until a perfect board is submitted or the
attempt budget runs out, then GAME_OVER for good. Only ``submit`` moves it.
"""
import logging
from typing import Optional

from .assignment import AssignmentStore
from .storage import PersistedState, PersistenceAdapter
from .types import DEFAULT_MAX_ATTEMPTS, AttemptState, Puzzle, SubmitResult

logger = logging.getLogger(__name__)

IN_PROGRESS = "IN_PROGRESS"
GAME_OVER = "GAME_OVER"


class ScoringEngine:
    def __init__(
        self,
        puzzle: Puzzle,
        puzzle_id: str,
        storage: Optional[PersistenceAdapter] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.puzzle = puzzle
        self.puzzle_id = puzzle_id
        self.storage = storage
        self.state = AttemptState(max_attempts=max_attempts)

    @property
    def total_items(self) -> int:
        return len(self.puzzle.items)

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def status(self) -> str:
        return GAME_OVER if self.state.game_over else IN_PROGRESS

    @property
    def attempts_left(self) -> int:
        return max(0, self.state.max_attempts - self.state.attempts_used)

    def restore(self, saved: Optional[PersistedState]):
        """Pick up attempt state from a saved record (or start fresh)."""
        state = AttemptState(max_attempts=self.state.max_attempts)
        if saved is not None:
            state.attempts_used = saved.attempts_used or 0
            state.game_over = bool(saved.game_over)
            if state.attempts_used >= state.max_attempts:
                state.game_over = True
            if state.game_over and saved.results is not None:
                state.last_result = dict(saved.results)
                state.last_correct_count = sum(saved.results.values())
        self.state = state

    def score(self, assignment: AssignmentStore):
        return {
            item.id: assignment.get(item.id) == item.true_tier
            for item in self.puzzle.items
        }

    def submit(self, assignment: AssignmentStore) -> SubmitResult:
        state = self.state

        # Finished games only replay the stored result.
        if state.game_over:
            return SubmitResult(
                accepted=False,
                correct_count=state.last_correct_count,
                game_over=True,
                score_map=dict(state.last_result) if state.last_result is not None else None,
            )

        if not assignment.is_complete():
            return SubmitResult(accepted=False, correct_count=None, game_over=False)

        score_map = self.score(assignment)
        correct_count = sum(score_map.values())
        next_attempts = state.attempts_used + 1
        is_perfect = correct_count == self.total_items
        exhausted = next_attempts >= state.max_attempts

        state.attempts_used = next_attempts
        state.last_correct_count = correct_count

        if is_perfect or exhausted:
            state.game_over = True
            state.last_result = score_map
            logger.info(
                "Puzzle %s over after %d attempt(s): %d/%d correct",
                self.puzzle_id, next_attempts, correct_count, self.total_items,
            )
            self._persist(PersistedState(
                player_tiers=assignment.snapshot(),
                results=score_map,
                attempts_used=next_attempts,
                game_over=True,
            ))
            return SubmitResult(
                accepted=True,
                correct_count=correct_count,
                game_over=True,
                score_map=dict(score_map),
            )

        # Imperfect with tries left: only the count goes back to the player.
        self._persist(PersistedState(
            player_tiers=assignment.snapshot(),
            attempts_used=next_attempts,
        ))
        return SubmitResult(accepted=True, correct_count=correct_count, game_over=False)

    def failed_attempts(self) -> int:
        """Attempts to show as lost; a winning final attempt is not a loss."""
        state = self.state
        failed = state.attempts_used
        if state.game_over and state.last_correct_count == self.total_items:
            failed = max(0, failed - 1)
        return min(failed, state.max_attempts)

    def _persist(self, record: PersistedState):
        if self.storage is not None:
            self.storage.save(self.puzzle_id, record)
