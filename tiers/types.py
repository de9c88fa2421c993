from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

POOL = "pool"
UNASSIGNED = ""
DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class TierDefinition:
    id: str
    label: str
    min_value: Optional[float] = None  # inclusive
    max_value: Optional[float] = None  # inclusive

    def contains(self, value) -> bool:
        min_ok = self.min_value is None or value >= self.min_value
        max_ok = self.max_value is None or value <= self.max_value
        return min_ok and max_ok


@dataclass(frozen=True)
class CategoryConfig:
    id: str
    name: str
    units: str
    tiers: Tuple[TierDefinition, ...]

    def tier_ids(self):
        return [t.id for t in self.tiers]


@dataclass(frozen=True)
class Item:
    id: str
    name: str
    value: float


@dataclass(frozen=True)
class PuzzleItem(Item):
    true_tier: str = ""


@dataclass(frozen=True)
class Puzzle:
    id: str  # calendar key, e.g. "2025-11-16"
    category: CategoryConfig
    items: Tuple[PuzzleItem, ...]

    def item_ids(self):
        return [item.id for item in self.items]


@dataclass
class AttemptState:
    """Attempt bookkeeping for one puzzle id."""
    attempts_used: int = 0
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    last_result: Optional[Dict[str, bool]] = None
    last_correct_count: Optional[int] = None
    game_over: bool = False


@dataclass
class SubmitResult:
    accepted: bool
    correct_count: Optional[int]
    game_over: bool
    score_map: Optional[Dict[str, bool]] = field(default=None)

    def to_dict(self):
        payload = {
            "accepted": self.accepted,
            "correctCount": self.correct_count,
            "gameOver": self.game_over,
        }
        if self.score_map is not None:
            payload["scoreMap"] = dict(self.score_map)
        return payload
