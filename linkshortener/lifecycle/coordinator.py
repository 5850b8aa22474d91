"""Lifecycle coordinator for short URLs and their click analytics.

The coordinator is the only component allowed to create or delete short URL
records, and it always does so together with the matching click ledger entry.
Every operation runs inside a lifecycle reader/writer lock:

    create_short_url / delete_short_url / sweep_expired  -> write
    resolve_and_track / get_stats                        -> read

Locks are always taken in the order coordinator -> registry -> ledger.

Per shortcode the lifecycle is:

    Active --(time passes)--> Expired          (derived, never stored)
    Active | Expired --(delete or sweep)--> Deleted   (terminal)

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO, ClickLedgerMemoryDAO
    >>> from linkshortener.models import ClickContext
    >>> coordinator = LifecycleCoordinator(ShortURLMemoryDAO(), ClickLedgerMemoryDAO())
    >>> short_url = coordinator.create_short_url('https://example.com/a', validity_minutes=1)
    >>> coordinator.resolve_and_track(short_url.shortcode, ClickContext(referrer='https://news.example'))
    'https://example.com/a'
    >>> coordinator.get_stats(short_url.shortcode).total_clicks
    1
"""

import logging

from beartype import beartype

from linkshortener.constants import Event
from linkshortener.exceptions import InternalInvariantViolationError
from linkshortener.models import ShortURLModel, ClickContext, ClickModel, ShortURLStats
from linkshortener.dao.base import ShortURLBaseDAO, ClickLedgerBaseDAO
from linkshortener.dao.memory.locks import ReadWriteLock
from linkshortener.dao.exceptions import DAOError, LedgerEntryNotFoundError
from linkshortener.types import Clock, GeoLocator
from linkshortener.utils.geo import no_location
from linkshortener.utils.helpers import utcnow


logger = logging.getLogger(__name__)


class LifecycleCoordinator:
    """Orchestrate create/resolve/stats/delete/sweep across registry and ledger.

    Attributes:
        registry (ShortURLBaseDAO):
            Code registry owning shortcode -> ShortURLModel.
        ledger (ClickLedgerBaseDAO):
            Click ledger owning shortcode -> ClickLedgerEntry.
        clock (Callable[[], datetime]):
            Time source. Every operation reads it exactly once.
        locate (Callable[[str | None], GeoLocation | None]):
            Geo-IP lookup for click locations.
    """

    def __init__(
        self,
        registry: ShortURLBaseDAO,
        ledger: ClickLedgerBaseDAO,
        clock: Clock = utcnow,
        locate: GeoLocator = no_location,
    ):
        self.registry = registry
        self.ledger = ledger
        self.clock = clock
        self.locate = locate
        self._lock = ReadWriteLock()

    def create_short_url(
        self,
        target: str,
        validity_minutes: int | None = None,
        shortcode: str | None = None,
    ) -> ShortURLModel:
        """Register a short URL and its empty click ledger entry as one unit

        Args:
            target (str):
                Absolute http/https URL to shorten.
            validity_minutes (int | None):
                Validity window in minutes; None applies the registry default.
            shortcode (str | None):
                Optional custom shortcode.

        Returns:
            ShortURLModel: shortcode, target, created_at and expires_at of the new link.

        Raises:
            InvalidUrlError, InvalidValidityError, InvalidShortcodeFormatError:
                On invalid input.
            ShortURLAlreadyExistsError:
                If the custom shortcode is taken.
            InternalInvariantViolationError:
                If the ledger entry couldn't be initialized. The registry
                record is rolled back before raising.
        """
        now = self.clock()

        with self._lock.write_locked():
            short_url = self.registry.create(target, validity_minutes=validity_minutes, shortcode=shortcode, now=now)
            try:
                self.ledger.init_entry(short_url.shortcode)
            except DAOError as e:
                # Compensate so no active code exists without a ledger entry
                self.registry.delete(short_url.shortcode)
                logger.critical(
                    'Click ledger initialization failed. Registry record rolled back.',
                    extra={'shortcode': short_url.shortcode, 'event': Event.INVARIANT_VIOLATION},
                )
                raise InternalInvariantViolationError(
                    f"Click ledger could not be initialized for '{short_url.shortcode}'."
                ) from e

        logger.info(
            'Short URL created.',
            extra={
                'shortcode': short_url.shortcode,
                'target': short_url.target,
                'expires_at': short_url.expires_at.isoformat(),
                'event': Event.SHORT_URL_CREATED,
            },
        )
        return short_url

    @beartype
    def resolve_and_track(self, shortcode: str, context: ClickContext | None = None) -> str:
        """Resolve an active shortcode and record the click

        A single `now` is captured on entry and used for both the activity
        check and the click timestamp, so a click can never be recorded
        against a link that expired mid-operation.

        Args:
            shortcode (str):
                Shortcode requested by the client.
            context (ClickContext | None):
                Referrer, user agent and remote address of the request.

        Returns:
            str: the original URL to redirect to.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown or expired.
            InternalInvariantViolationError:
                If an active record has no ledger entry.
        """
        now = self.clock()
        context = context or ClickContext()
        location = self.locate(context.remote_addr)

        with self._lock.read_locked():
            short_url = self.registry.resolve(shortcode, now=now)
            click = ClickModel.from_context(context, timestamp=now, location=location)
            try:
                total_clicks = self.ledger.record_click(shortcode, click)
            except LedgerEntryNotFoundError as e:
                logger.critical(
                    'Active short URL has no click ledger entry.',
                    extra={'shortcode': shortcode, 'event': Event.INVARIANT_VIOLATION},
                )
                raise InternalInvariantViolationError(f"Short URL '{shortcode}' has no click ledger entry.") from e

        logger.debug(
            'Click recorded.',
            extra={'shortcode': shortcode, 'total_clicks': total_clicks, 'event': Event.CLICK_RECORDED},
        )
        return short_url.target

    @beartype
    def get_stats(self, shortcode: str) -> ShortURLStats:
        """Join the short URL record with its click ledger entry

        Stats stay available after expiry until the record is swept or
        deleted; `is_active` is derived at read time.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown.
            InternalInvariantViolationError:
                If the record has no ledger entry.
        """
        now = self.clock()

        with self._lock.read_locked():
            short_url = self.registry.get(shortcode)
            try:
                entry = self.ledger.get_entry(shortcode)
            except LedgerEntryNotFoundError as e:
                raise InternalInvariantViolationError(f"Short URL '{shortcode}' has no click ledger entry.") from e

        return ShortURLStats.join(short_url, entry, now=now)

    @beartype
    def delete_short_url(self, shortcode: str) -> None:
        """Remove the short URL and its click ledger entry as one unit

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown.
            InternalInvariantViolationError:
                If the record had no ledger entry.
        """
        with self._lock.write_locked():
            self.registry.delete(shortcode)
            try:
                self.ledger.delete_entry(shortcode)
            except LedgerEntryNotFoundError as e:
                raise InternalInvariantViolationError(f"Short URL '{shortcode}' had no click ledger entry.") from e

        logger.info('Short URL deleted.', extra={'shortcode': shortcode, 'event': Event.SHORT_URL_DELETED})

    def sweep_expired(self) -> int:
        """Remove expired short URLs together with their click history

        Returns:
            int: number of removed short URLs.

        Raises:
            InternalInvariantViolationError:
                If a swept record had no ledger entry.
        """
        now = self.clock()

        with self._lock.write_locked():
            try:
                removed = self.registry.sweep_expired(now=now, on_removed=self.ledger.delete_entry)
            except LedgerEntryNotFoundError as e:
                raise InternalInvariantViolationError('Swept short URL had no click ledger entry.') from e

        logger.info('Expired short URLs swept.', extra={'removed': removed, 'event': Event.SWEEP_COMPLETED})
        return removed
