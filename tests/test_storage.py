import logging

import pytest

from tiers.storage import MemoryStore, PersistedState, PersistenceAdapter, StorageError


class BrokenStore:
    def get(self, key):
        raise StorageError("disk on fire")

    def set(self, key, value):
        raise StorageError("disk on fire")


def test_missing_key_loads_none(storage):
    assert storage.load("2025-11-16") is None


def test_save_then_load(storage):
    state = PersistedState(player_tiers={"a": "S"}, attempts_used=1)
    assert storage.save("2025-11-16", state)
    assert storage.store.data == {
        "dailyTiersAttempt_2025-11-16": '{"playerTiers":{"a":"S"},"attemptsUsed":1}'
    }
    loaded = storage.load("2025-11-16")
    assert loaded.player_tiers == {"a": "S"}
    assert loaded.attempts_used == 1
    assert loaded.results is None
    assert loaded.game_over is None


def test_keys_are_scoped_by_puzzle_id(storage):
    storage.save("2025-11-16", PersistedState(attempts_used=2))
    assert storage.load("2025-11-17") is None


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        "[1, 2, 3]",
        '"just a string"',
        '{"attemptsUsed": "two"}',
        '{"attemptsUsed": -1}',
        '{"playerTiers": ["a", "b"]}',
        '{"results": {"a": "yes"}}',
        '{"gameOver": 1}',
    ],
)
def test_malformed_payload_is_treated_as_absent(payload, caplog):
    adapter = PersistenceAdapter(MemoryStore({"dailyTiersAttempt_d": payload}))
    with caplog.at_level(logging.WARNING, logger="tiers.storage"):
        assert adapter.load("d") is None
    assert "dailyTiersAttempt_d" in caplog.text


def test_unknown_fields_are_ignored():
    adapter = PersistenceAdapter(MemoryStore({
        "dailyTiersAttempt_d": '{"attemptsUsed": 1, "legacy": true}'
    }))
    assert adapter.load("d").attempts_used == 1


def test_backend_failures_are_logged_not_raised(caplog):
    adapter = PersistenceAdapter(BrokenStore())
    with caplog.at_level(logging.ERROR, logger="tiers.storage"):
        assert adapter.load("d") is None
        assert adapter.save("d", PersistedState(attempts_used=1)) is False
    assert "disk on fire" in caplog.text
