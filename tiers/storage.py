"""Persistence for per-day puzzle progress.

One JSON record per puzzle id, stored under ``dailyTiersAttempt_<id>`` in a
string key-value backend. Reads never fail: a missing key, an unparsable
payload or a payload of the wrong shape all load as ``None``.
"""
import logging
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

STORAGE_PREFIX = "dailyTiersAttempt_"


class StorageError(Exception):
    """A key-value backend could not read or write."""


class PersistedState(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True)

    player_tiers: Optional[Dict[str, str]] = Field(default=None, alias="playerTiers")
    results: Optional[Dict[str, bool]] = None
    attempts_used: Optional[int] = Field(default=None, alias="attemptsUsed", ge=0)
    game_over: Optional[bool] = Field(default=None, alias="gameOver")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class MemoryStore:
    """Dict-backed key-value store."""

    def __init__(self, data=None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value


class PersistenceAdapter:
    def __init__(self, store, prefix: str = STORAGE_PREFIX):
        self.store = store
        self.prefix = prefix

    def key_for(self, puzzle_id: str) -> str:
        return f"{self.prefix}{puzzle_id}"

    def load(self, puzzle_id: str) -> Optional[PersistedState]:
        key = self.key_for(puzzle_id)
        try:
            raw = self.store.get(key)
        except StorageError:
            logger.exception("Failed to read saved state for %s", key)
            return None
        if not raw:
            return None
        try:
            return PersistedState.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Discarding unreadable saved state for %s (%d errors)",
                key, exc.error_count(),
            )
            return None

    def save(self, puzzle_id: str, state: PersistedState) -> bool:
        key = self.key_for(puzzle_id)
        try:
            self.store.set(key, state.to_json())
        except StorageError:
            logger.exception("Failed to save state for %s", key)
            return False
        return True
