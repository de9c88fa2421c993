import random

from tiers.assignment import AssignmentStore
from tiers.types import POOL


def make_store(puzzle):
    return AssignmentStore(puzzle.category.tier_ids(), puzzle.items)


def test_seed_puts_everything_in_pool(puzzle):
    store = make_store(puzzle)
    assert store.snapshot() == {"a": "", "b": "", "c": ""}
    assert not store.is_complete()


def test_move_to_tier_and_back_to_pool(puzzle):
    store = make_store(puzzle)
    assert store.move("a", "S") is True
    assert store.get("a") == "S"
    assert store.move("a", "S") is False
    assert store.move("a", POOL) is True
    assert store.get("a") == ""


def test_unknown_destination_and_item_are_ignored(puzzle):
    store = make_store(puzzle)
    store.move("a", "A")
    assert store.move("a", "Z") is False
    assert store.move("a", "POOL-ish") is False
    assert store.move("zzz", "S") is False
    assert store.snapshot() == {"a": "A", "b": "", "c": ""}


def test_is_complete_iff_no_item_in_pool(puzzle):
    store = make_store(puzzle)
    for item_id in ("a", "b", "c"):
        assert not store.is_complete()
        store.move(item_id, "D")
    assert store.is_complete()
    store.move("b", POOL)
    assert not store.is_complete()


def test_domain_is_stable_under_random_moves(puzzle):
    store = make_store(puzzle)
    rng = random.Random(7)
    targets = ["S", "A", "B", "C", "D", POOL, "X", ""]
    ids = ["a", "b", "c", "ghost"]
    for _ in range(500):
        store.move(rng.choice(ids), rng.choice(targets))
        snap = store.snapshot()
        assert sorted(snap) == ["a", "b", "c"]
        assert store.is_complete() == all(v != "" for v in snap.values())


def test_restore_round_trip(puzzle):
    store = make_store(puzzle)
    store.move("a", "S")
    store.move("c", "B")
    other = make_store(puzzle)
    other.restore(store.snapshot())
    assert other.snapshot() == store.snapshot()


def test_restore_keeps_domain_invariant(puzzle):
    store = make_store(puzzle)
    store.restore({"a": "S", "b": "nope", "intruder": "A"})
    assert store.snapshot() == {"a": "S", "b": "", "c": ""}


def test_snapshot_is_a_copy(puzzle):
    store = make_store(puzzle)
    snap = store.snapshot()
    snap["a"] = "S"
    assert store.get("a") == ""
