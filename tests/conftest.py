import random
from datetime import datetime, timedelta, UTC

import pytest

from linkshortener.dao.memory import ShortURLMemoryDAO, ClickLedgerMemoryDAO
from linkshortener.lifecycle import LifecycleCoordinator


T0 = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Manually advanced clock for deterministic expiry tests."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def registry(clock, rng) -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO(clock=clock, rng=rng)


@pytest.fixture
def ledger() -> ClickLedgerMemoryDAO:
    return ClickLedgerMemoryDAO()


@pytest.fixture
def coordinator(registry, ledger, clock) -> LifecycleCoordinator:
    return LifecycleCoordinator(registry, ledger, clock=clock)
