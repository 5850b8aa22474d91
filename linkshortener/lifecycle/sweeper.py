"""Background expiry sweeper.

Runs `LifecycleCoordinator.sweep_expired()` on a fixed interval in a daemon
thread. Sweeping only bounds memory; correctness never depends on it.
"""

import logging
import threading

from linkshortener.constants import Event
from linkshortener.lifecycle.coordinator import LifecycleCoordinator


logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Periodically sweep expired short URLs.

    Example:
        >>> sweeper = ExpirySweeper(coordinator, interval_seconds=300)
        >>> sweeper.start()
        >>> ...
        >>> sweeper.stop()
    """

    def __init__(self, coordinator: LifecycleCoordinator, interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError(f'Sweep interval must be positive (given value: {interval_seconds}).')

        self.coordinator = coordinator
        self.interval_seconds = interval_seconds
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> int:
        return self.coordinator.sweep_expired()

    def start(self) -> None:
        if self.running:
            raise RuntimeError('Expiry sweeper is already running.')

        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, name='expiry-sweeper', daemon=True)
        self._thread.start()
        logger.info('Expiry sweeper started.', extra={'interval_seconds': self.interval_seconds})

    def stop(self, timeout: float | None = None) -> None:
        self._stopped.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                # Still inside a sweep; keep the handle so start() refuses to run a second loop
                logger.warning('Expiry sweeper did not stop within %s seconds.', timeout)
                return
            self._thread = None
        logger.info('Expiry sweeper stopped.')

    def _run(self) -> None:
        # Event.wait() returns True once stop() is called
        while not self._stopped.wait(self.interval_seconds):
            try:
                self.run_once()
            except Exception:
                logger.exception('Expiry sweep failed. Stopping sweeper.', extra={'event': Event.SWEEP_FAILED})
                self._stopped.set()
                raise
