"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides the process-local code registry: an implementation of
ShortURLBaseDAO backed by a dictionary guarded by a reader/writer lock.

Responsibilities:
    - Validate input and register short URLs;
    - Allocate unique shortcodes (custom or randomly generated);
    - Resolve shortcodes to active records only (activity derived per call);
    - Delete records and sweep expired ones to bound memory.

Classes:
    ShortURLMemoryDAO:
        Thread-safe in-memory code registry.

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> short_url = dao.create('https://example.com/page', validity_minutes=1, shortcode='abc123')
    >>> dao.resolve('abc123').target
    'https://example.com/page'
    >>> dao.delete('abc123')
    >>> dao.resolve('abc123')
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""

import random
import logging
from datetime import datetime
from collections.abc import Callable

from beartype import beartype

from linkshortener.constants import Shortcode, Validity
from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory.locks import ReadWriteLock
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from linkshortener.types import Clock
from linkshortener.utils.helpers import utcnow
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.validators import is_reserved_shortcode, validate_shortcode, validate_url, validate_validity


logger = logging.getLogger(__name__)


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for short URL mappings

    Every check-then-insert (custom or generated shortcode) happens under the
    write lock, so two concurrent creations can never both obtain the same code.

    Shortcodes removed by `sweep_expired()` are retired: they are never issued
    again during the lifetime of the registry, so a stale short link can't
    start pointing somewhere else. `delete()` is the only way to free a code.
    The price is that the retired set grows by one shortcode per swept record
    for the whole process lifetime: sweeping bounds memory held by records and
    click history, not by retired codes.

    Attributes:
        clock (Callable[[], datetime]):
            Time source used when callers don't pass `now`.
        rng (random.Random | None):
            Random source for generated shortcodes (None: module default).
        shortcode_length (int):
            Length of generated shortcodes.
        default_validity_minutes (int):
            Validity applied when `create()` receives None.
    """

    def __init__(
        self,
        clock: Clock = utcnow,
        rng: random.Random | None = None,
        shortcode_length: int = Shortcode.DEFAULT_LENGTH,
        default_validity_minutes: int = Validity.DEFAULT,
    ):
        self.clock = clock
        self.rng = rng
        self.shortcode_length = shortcode_length
        self.default_validity_minutes = default_validity_minutes

        self._records: dict[str, ShortURLModel] = {}
        self._retired: set[str] = set()
        self._lock = ReadWriteLock()

    def create(
        self,
        target: str,
        validity_minutes: int | None = None,
        shortcode: str | None = None,
        now: datetime | None = None,
    ) -> ShortURLModel:
        """Validate input and register a new short URL

        Args:
            target (str):
                Absolute http/https URL to shorten.
            validity_minutes (int | None):
                Validity window in minutes. None applies `default_validity_minutes`.
            shortcode (str | None):
                Custom shortcode. None generates a random, unused one.
            now (datetime | None):
                Creation time. None reads `clock()`.

        Returns:
            ShortURLModel: the newly stored record.

        Raises:
            InvalidUrlError:
                If `target` is not an absolute http/https URL.
            InvalidValidityError:
                If `validity_minutes` is outside [1, 525600].
            InvalidShortcodeFormatError:
                If the custom shortcode doesn't match ^[A-Za-z0-9]{3,20}$ or is reserved.
            ShortURLAlreadyExistsError:
                If the custom shortcode is held by a live or retired record.
        """
        target = validate_url(target)
        validity_minutes = validate_validity(validity_minutes, default=self.default_validity_minutes)
        if shortcode is not None:
            validate_shortcode(shortcode)
        if now is None:
            now = self.clock()

        with self._lock.write_locked():
            if shortcode is None:
                shortcode = self._generate_unique_shortcode()
            elif self._is_taken(shortcode):
                raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")

            short_url = ShortURLModel.create(
                shortcode=shortcode,
                target=target,
                created_at=now,
                validity_minutes=validity_minutes,
            )
            self._records[shortcode] = short_url

        return short_url

    @beartype
    def resolve(self, shortcode: str, now: datetime | None = None) -> ShortURLModel:
        if now is None:
            now = self.clock()

        with self._lock.read_locked():
            short_url = self._records.get(shortcode)

        # Activity is re-derived on every call, never cached on the record
        if short_url is None or not short_url.is_active(now):
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return short_url

    @beartype
    def get(self, shortcode: str) -> ShortURLModel:
        with self._lock.read_locked():
            short_url = self._records.get(shortcode)

        if short_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return short_url

    @beartype
    def delete(self, shortcode: str) -> None:
        with self._lock.write_locked():
            if self._records.pop(shortcode, None) is None:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

    def sweep_expired(
        self,
        now: datetime | None = None,
        on_removed: Callable[[str], None] | None = None,
    ) -> int:
        """Remove every record whose expiry lies strictly before `now`

        Sweeping only reclaims memory: `resolve()` already refuses expired
        records. Removed shortcodes are retired and never reissued.

        Args:
            now (datetime | None):
                Reference time. None reads `clock()`.
            on_removed (Callable[[str], None] | None):
                Invoked for every removed shortcode while the write lock is held.

        Returns:
            int: number of removed records.
        """
        if now is None:
            now = self.clock()

        with self._lock.write_locked():
            expired = [code for code, short_url in self._records.items() if short_url.is_expired(now)]
            for shortcode in expired:
                del self._records[shortcode]
                self._retired.add(shortcode)
                if on_removed is not None:
                    on_removed(shortcode)

        if expired:
            logger.debug('Swept %s expired short URL(s) from the registry.', len(expired))
        return len(expired)

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._records)

    def _is_taken(self, shortcode: str) -> bool:
        return shortcode in self._records or shortcode in self._retired or is_reserved_shortcode(shortcode)

    def _generate_unique_shortcode(self) -> str:
        # NOTE: must be called with the write lock held. Collisions are
        #       negligible at 62**6 codes, but uniqueness is a hard invariant,
        #       so the loop retries until an unused code comes up.
        while True:
            shortcode = generate_shortcode(self.shortcode_length, rng=self.rng)
            if not self._is_taken(shortcode):
                return shortcode
            logger.debug('Generated shortcode collided with an existing one. Retrying.', extra={'shortcode': shortcode})
