"""Locking primitives for the in-memory data stores.

Classes:
    ReadWriteLock:
        Writer-preferring reader/writer lock. Any number of readers may hold
        the lock together; a writer holds it exclusively. Once a writer is
        waiting, new readers queue behind it so sweeps and deletions can't be
        starved by a steady stream of redirects.

Example:
    >>> lock = ReadWriteLock()
    >>> with lock.read_locked():
    ...     pass
    >>> with lock.write_locked():
    ...     pass

NOTE: The lock is not reentrant. A thread holding it (in either mode) must
      not acquire it again.
"""

import threading
from contextlib import contextmanager
from collections.abc import Iterator


__all__ = ['ReadWriteLock']


class ReadWriteLock:
    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._condition:
            while self._writer or self._waiting_writers:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._readers <= 0:
                raise RuntimeError('Cannot release a read lock that is not held.')
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writer:
                raise RuntimeError('Cannot release a write lock that is not held.')
            self._writer = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
