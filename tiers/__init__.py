from .assignment import AssignmentStore
from .catalog import CatalogError, PuzzleCatalog, build_puzzle, get_puzzle_for_date, validate_tiers
from .classifier import classify, tier_range_text
from .clock import date_key, system_clock
from .rollover import DayRollover
from .scoring import GAME_OVER, IN_PROGRESS, ScoringEngine
from .session import GameSession
from .storage import MemoryStore, PersistedState, PersistenceAdapter, StorageError
from .types import (
    DEFAULT_MAX_ATTEMPTS,
    POOL,
    AttemptState,
    CategoryConfig,
    Item,
    Puzzle,
    PuzzleItem,
    SubmitResult,
    TierDefinition,
)
