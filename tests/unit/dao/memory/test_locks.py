"""Unit tests for ReadWriteLock in locks.py.

Test coverage includes:

1. Shared readers
   - Ensures several readers hold the lock at the same time.

2. Exclusive writer
   - Ensures a writer waits for readers and readers wait for a writer.
   - Ensures a waiting writer blocks new readers (writer preference).

3. Misuse
   - Ensures releasing an unheld lock raises RuntimeError.
"""

import time
import threading

import pytest

from linkshortener.dao.memory import ReadWriteLock


TIMEOUT = 5


# -------------------------------
# 1. Shared readers
# -------------------------------


def test_readers_share_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=TIMEOUT)
    passed = []

    def reader():
        with lock.read_locked():
            # All three readers must be inside at once to pass the barrier
            inside.wait()
            passed.append(True)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(TIMEOUT)

    assert not any(thread.is_alive() for thread in threads)
    assert len(passed) == 3


# -------------------------------
# 2. Exclusive writer
# -------------------------------


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    lock.acquire_read()
    thread = threading.Thread(target=writer)
    thread.start()

    assert not acquired.wait(0.1)
    lock.release_read()
    assert acquired.wait(TIMEOUT)
    thread.join(TIMEOUT)


def test_reader_waits_for_writer():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            acquired.set()

    lock.acquire_write()
    thread = threading.Thread(target=reader)
    thread.start()

    assert not acquired.wait(0.1)
    lock.release_write()
    assert acquired.wait(TIMEOUT)
    thread.join(TIMEOUT)


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order = []

    def writer():
        with lock.write_locked():
            order.append('writer')

    def late_reader():
        with lock.read_locked():
            order.append('reader')

    lock.acquire_read()
    writer_thread = threading.Thread(target=writer)
    writer_thread.start()

    # Late reader must arrive while the writer is already queued
    while not lock._waiting_writers:
        time.sleep(0.01)
    reader_thread = threading.Thread(target=late_reader)
    reader_thread.start()

    lock.release_read()
    writer_thread.join(TIMEOUT)
    reader_thread.join(TIMEOUT)

    assert order == ['writer', 'reader']


# -------------------------------
# 3. Misuse
# -------------------------------


def test_release_unheld_lock():
    lock = ReadWriteLock()

    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_context_managers_release_on_error():
    lock = ReadWriteLock()

    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError('boom')

    # Lock must be free again
    with lock.read_locked():
        pass
    with lock.write_locked():
        pass
