"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes the contract of the code registry: the component which
owns the shortcode -> ShortURLModel mapping, allocates unique codes and
enforces expiry.

Responsibilities:
    - Validate and register new short URLs (custom or generated shortcodes).
    - Resolve shortcodes to active records only.
    - Delete records and periodically sweep expired ones.

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> short_url = dao.create('https://example.com/blog/article-123', validity_minutes=5)
    >>> dao.resolve(short_url.shortcode).target
    'https://example.com/blog/article-123'
"""

from abc import ABC, abstractmethod
from datetime import datetime
from collections.abc import Callable

from linkshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        create(target, validity_minutes=None, shortcode=None, now=None) -> ShortURLModel:
            Validate input and register a new short URL.
            Raises InvalidUrlError, InvalidValidityError, InvalidShortcodeFormatError.
            Raises ShortURLAlreadyExistsError if a custom shortcode is taken.

        resolve(shortcode, now=None) -> ShortURLModel:
            Return the record if it exists and is active at `now`.
            Raises ShortURLNotFoundError otherwise (unknown and expired alike).

        get(shortcode) -> ShortURLModel:
            Return the record regardless of its activity.
            Raises ShortURLNotFoundError if absent.

        delete(shortcode) -> None:
            Remove the record and free its shortcode.
            Raises ShortURLNotFoundError if absent.

        sweep_expired(now=None, on_removed=None) -> int:
            Remove records that expired before `now` and return how many were removed.

        count() -> int:
            Number of stored records.
    """

    @abstractmethod
    def create(
        self,
        target: str,
        validity_minutes: int | None = None,
        shortcode: str | None = None,
        now: datetime | None = None,
    ) -> ShortURLModel:
        """Validate input and register a new short URL.

        Args:
            target (str):
                Absolute http/https URL to shorten.
            validity_minutes (int | None):
                Validity window in minutes (1-525600). None means the configured default.
            shortcode (str | None):
                Custom shortcode. None means a unique code is generated.
            now (datetime | None):
                Creation timestamp. None means the DAO's clock.

        Returns:
            ShortURLModel: the stored record (active at creation).

        Raises:
            InvalidUrlError, InvalidValidityError, InvalidShortcodeFormatError:
                If the input doesn't validate.
            ShortURLAlreadyExistsError:
                If the custom shortcode is already taken.
        """
        pass

    @abstractmethod
    def resolve(self, shortcode: str, now: datetime | None = None) -> ShortURLModel:
        """Return the record for `shortcode` if it is active at `now`.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown or its record expired.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str) -> ShortURLModel:
        """Return the record for `shortcode` whether active or not.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown.
        """
        pass

    @abstractmethod
    def delete(self, shortcode: str) -> None:
        """Remove the record for `shortcode` and free the code.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown.
        """
        pass

    @abstractmethod
    def sweep_expired(
        self,
        now: datetime | None = None,
        on_removed: Callable[[str], None] | None = None,
    ) -> int:
        """Remove records whose expiry lies strictly before `now`.

        Args:
            now (datetime | None):
                Reference time. None means the DAO's clock.
            on_removed (Callable[[str], None] | None):
                Called with every removed shortcode while the registry is still
                locked, so dependent state can be dropped in the same critical section.

        Returns:
            int: number of removed records.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        pass
