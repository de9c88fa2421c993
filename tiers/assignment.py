from typing import Dict, Iterable, Mapping

from .types import POOL, UNASSIGNED, Item


class AssignmentStore:
    """Player's item id -> tier id mapping ("" = still in the pool).

    Every item of the active puzzle always has an entry. The store has no
    notion of a locked board; callers decide who may call ``move``.
    """

    def __init__(self, tier_ids: Iterable[str], items: Iterable[Item] = ()):
        self.tier_ids = frozenset(tier_ids)
        self._tiers: Dict[str, str] = {}
        self.seed(items)

    def seed(self, items: Iterable[Item]):
        self._tiers = {item.id: UNASSIGNED for item in items}

    def move(self, item_id: str, destination: str) -> bool:
        """Move an item to a tier or back to the pool.

        Unknown items and unknown drop targets are ignored. Returns whether
        the assignment changed.
        """
        if item_id not in self._tiers:
            return False
        if destination == POOL:
            new = UNASSIGNED
        elif destination in self.tier_ids:
            new = destination
        else:
            return False
        changed = self._tiers[item_id] != new
        self._tiers[item_id] = new
        return changed

    def get(self, item_id: str) -> str:
        return self._tiers[item_id]

    def is_complete(self) -> bool:
        return all(tier != UNASSIGNED for tier in self._tiers.values())

    def snapshot(self) -> Dict[str, str]:
        return dict(self._tiers)

    def restore(self, data: Mapping[str, str]):
        # only known items, only known tiers; the rest goes back to the pool
        for item_id in self._tiers:
            tier = data.get(item_id, UNASSIGNED)
            self._tiers[item_id] = tier if tier in self.tier_ids else UNASSIGNED

    def __len__(self):
        return len(self._tiers)

    def __iter__(self):
        return iter(self._tiers)
