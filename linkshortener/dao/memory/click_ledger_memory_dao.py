"""In-memory click ledger.

Entries are created and removed under a map-level reader/writer lock. Each
entry additionally carries its own mutex, so clicks on different shortcodes
are appended in parallel while clicks on the same shortcode are serialized in
arrival order.

Example:
    >>> from datetime import datetime, UTC
    >>> from linkshortener.models import ClickModel
    >>> ledger = ClickLedgerMemoryDAO()
    >>> ledger.init_entry('abc123')
    >>> ledger.record_click('abc123', ClickModel(timestamp=datetime.now(UTC)))
    1
    >>> ledger.get_entry('abc123').total_clicks
    1
"""

import threading

from beartype import beartype

from linkshortener.models import ClickModel, ClickLedgerEntry
from linkshortener.dao.base import ClickLedgerBaseDAO
from linkshortener.dao.memory.locks import ReadWriteLock
from linkshortener.dao.exceptions import LedgerEntryAlreadyExistsError, LedgerEntryNotFoundError


class _LedgerSlot:
    """Mutable per-shortcode state. Only touched with `lock` held."""

    __slots__ = ('lock', 'total_clicks', 'clicks')

    def __init__(self):
        self.lock = threading.Lock()
        self.total_clicks = 0
        self.clicks: list[ClickModel] = []

    def snapshot(self) -> ClickLedgerEntry:
        return ClickLedgerEntry(total_clicks=self.total_clicks, clicks=tuple(self.clicks))


class ClickLedgerMemoryDAO(ClickLedgerBaseDAO):
    def __init__(self):
        self._entries: dict[str, _LedgerSlot] = {}
        self._lock = ReadWriteLock()

    @beartype
    def init_entry(self, shortcode: str) -> None:
        with self._lock.write_locked():
            if shortcode in self._entries:
                raise LedgerEntryAlreadyExistsError(f"Click ledger entry for '{shortcode}' already exists.")
            self._entries[shortcode] = _LedgerSlot()

    @beartype
    def record_click(self, shortcode: str, click: ClickModel) -> int:
        """Append `click` to the entry and return the new click total."""
        with self._lock.read_locked():
            slot = self._slot(shortcode)
            with slot.lock:
                slot.clicks.append(click)
                slot.total_clicks += 1
                return slot.total_clicks

    @beartype
    def get_entry(self, shortcode: str) -> ClickLedgerEntry:
        with self._lock.read_locked():
            slot = self._slot(shortcode)
            with slot.lock:
                return slot.snapshot()

    @beartype
    def delete_entry(self, shortcode: str) -> None:
        with self._lock.write_locked():
            if self._entries.pop(shortcode, None) is None:
                raise LedgerEntryNotFoundError(f"Click ledger entry for '{shortcode}' not found.")

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def _slot(self, shortcode: str) -> _LedgerSlot:
        slot = self._entries.get(shortcode)
        if slot is None:
            raise LedgerEntryNotFoundError(f"Click ledger entry for '{shortcode}' not found.")
        return slot
