"""Abstract base class for click ledger data access objects (DAOs).

The click ledger owns per-shortcode click history and aggregate counters,
keyed to the same shortcode space as the code registry.
"""

from abc import ABC, abstractmethod

from linkshortener.models import ClickModel, ClickLedgerEntry


class ClickLedgerBaseDAO(ABC):
    """Interface for click ledger DAOs.

    Methods:
        init_entry(shortcode) -> None:
            Create an empty entry (zero clicks).
            Raises LedgerEntryAlreadyExistsError if one exists.

        record_click(shortcode, click) -> int:
            Append a click and return the new click total.
            Raises LedgerEntryNotFoundError if no entry exists.

        get_entry(shortcode) -> ClickLedgerEntry:
            Return a consistent snapshot of the entry.
            Raises LedgerEntryNotFoundError if no entry exists.

        delete_entry(shortcode) -> None:
            Remove the entry.
            Raises LedgerEntryNotFoundError if no entry exists.

        count() -> int:
            Number of stored entries.
    """

    @abstractmethod
    def init_entry(self, shortcode: str) -> None:
        pass

    @abstractmethod
    def record_click(self, shortcode: str, click: ClickModel) -> int:
        pass

    @abstractmethod
    def get_entry(self, shortcode: str) -> ClickLedgerEntry:
        pass

    @abstractmethod
    def delete_entry(self, shortcode: str) -> None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
