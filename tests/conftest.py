from datetime import datetime

import pytest
from apscheduler.jobstores.base import JobLookupError

from tiers.catalog import PuzzleCatalog, build_puzzle
from tiers.storage import MemoryStore, PersistenceAdapter

TIERS = [
    {"id": "S", "label": "S", "minValue": 30, "maxValue": None},
    {"id": "A", "label": "A", "minValue": 20, "maxValue": 29},
    {"id": "B", "label": "B", "minValue": 10, "maxValue": 19},
    {"id": "C", "label": "C", "minValue": 5, "maxValue": 9},
    {"id": "D", "label": "D", "minValue": None, "maxValue": 4},
]


def raw_puzzle(key="2025-11-16", items=None):
    return {
        "id": key,
        "category": {"id": "test-stat", "name": "Test Stat", "units": "pts", "tiers": TIERS},
        "items": items or [
            {"id": "a", "name": "Alpha", "value": 35},
            {"id": "b", "name": "Bravo", "value": 25},
            {"id": "c", "name": "Charlie", "value": 15},
        ],
    }


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


class FakeJob:
    def __init__(self, scheduler, func, run_date, args):
        self.scheduler = scheduler
        self.func = func
        self.run_date = run_date
        self.args = args
        self.removed = False

    def remove(self):
        if self not in self.scheduler.jobs:
            raise JobLookupError(id(self))
        self.removed = True
        self.scheduler.jobs.remove(self)


class FakeScheduler:
    """Records date jobs; ``run_due`` fires whatever is due."""

    def __init__(self):
        self.jobs = []

    def add_job(self, func, trigger, run_date=None, args=None):
        assert trigger == "date"
        job = FakeJob(self, func, run_date, args or [])
        self.jobs.append(job)
        return job

    def run_due(self, now):
        due = [j for j in self.jobs if j.run_date <= now]
        for job in due:
            self.jobs.remove(job)
            job.func(*job.args)
        return len(due)


@pytest.fixture
def puzzle():
    return build_puzzle(raw_puzzle())


@pytest.fixture
def storage():
    return PersistenceAdapter(MemoryStore())


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 11, 16, 9, 30))


@pytest.fixture
def catalog(clock):
    return PuzzleCatalog(
        {"2025-11-16": raw_puzzle("2025-11-16"), "2025-11-17": raw_puzzle("2025-11-17")},
        clock=clock,
    )

