"""Unit tests for the background ExpirySweeper.

Test coverage includes:

1. Construction
   - Ensures non-positive intervals are rejected.

2. run_once()

3. Background thread
   - 3.1. Ensures the thread sweeps expired links and stops cleanly.
   - 3.2. Ensures starting twice raises RuntimeError.
   - 3.3. Ensures a failing sweep stops the sweeper.
   - 3.4. Ensures a stop() that times out mid-sweep keeps the thread so start() refuses a second loop.
"""

import time
import threading
from unittest.mock import MagicMock

import pytest

from linkshortener.exceptions import InternalInvariantViolationError
from linkshortener.lifecycle import ExpirySweeper, LifecycleCoordinator


TIMEOUT = 5


def _wait_for(predicate, timeout=TIMEOUT):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


# -------------------------------
# 1. Construction
# -------------------------------


@pytest.mark.parametrize('interval', [0, -1, -0.5])
def test_invalid_interval(coordinator, interval):
    with pytest.raises(ValueError):
        ExpirySweeper(coordinator, interval_seconds=interval)


# -------------------------------
# 2. run_once()
# -------------------------------


def test_run_once(coordinator, clock):
    coordinator.create_short_url('https://example.com/a', validity_minutes=1)
    sweeper = ExpirySweeper(coordinator, interval_seconds=60)

    assert sweeper.run_once() == 0
    clock.advance(minutes=2)
    assert sweeper.run_once() == 1
    assert not sweeper.running


# -------------------------------
# 3.1. Background sweeping
# -------------------------------


def test_background_sweep(coordinator, registry, ledger, clock):
    coordinator.create_short_url('https://example.com/a', validity_minutes=1)
    coordinator.create_short_url('https://example.com/b', validity_minutes=10)
    clock.advance(minutes=2)

    sweeper = ExpirySweeper(coordinator, interval_seconds=0.01)
    sweeper.start()
    try:
        assert sweeper.running
        assert _wait_for(lambda: registry.count() == 1)
        assert ledger.count() == 1
    finally:
        sweeper.stop(timeout=TIMEOUT)

    assert not sweeper.running


# -------------------------------
# 3.2. Double start
# -------------------------------


def test_start_twice(coordinator):
    sweeper = ExpirySweeper(coordinator, interval_seconds=60)
    sweeper.start()
    try:
        with pytest.raises(RuntimeError):
            sweeper.start()
    finally:
        sweeper.stop(timeout=TIMEOUT)

    # Restart after stop is allowed
    sweeper.start()
    sweeper.stop(timeout=TIMEOUT)


# -------------------------------
# 3.3. Failing sweep
# -------------------------------


def test_failing_sweep_stops_sweeper(monkeypatch):
    monkeypatch.setattr(threading, 'excepthook', lambda args: None)
    coordinator = MagicMock(spec=LifecycleCoordinator)
    coordinator.sweep_expired.side_effect = InternalInvariantViolationError('boom')

    sweeper = ExpirySweeper(coordinator, interval_seconds=0.01)
    sweeper.start()

    assert _wait_for(lambda: not sweeper.running)
    coordinator.sweep_expired.assert_called_once()
    sweeper.stop(timeout=TIMEOUT)


# -------------------------------
# 3.4. Stop timing out mid-sweep
# -------------------------------


def test_stop_timeout_keeps_running_thread():
    entered, release = threading.Event(), threading.Event()

    def slow_sweep():
        entered.set()
        release.wait(TIMEOUT)
        return 0

    coordinator = MagicMock(spec=LifecycleCoordinator)
    coordinator.sweep_expired.side_effect = slow_sweep

    sweeper = ExpirySweeper(coordinator, interval_seconds=0.01)
    sweeper.start()
    assert entered.wait(TIMEOUT)

    sweeper.stop(timeout=0.05)
    assert sweeper.running
    with pytest.raises(RuntimeError):
        sweeper.start()

    release.set()
    sweeper.stop(timeout=TIMEOUT)
    assert not sweeper.running
    coordinator.sweep_expired.assert_called_once()
