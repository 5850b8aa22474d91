"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a short URL is unknown, expired, or already removed.

    ShortURLAlreadyExistsError:
        Raised when a shortcode is already held by another record.

    LedgerEntryNotFoundError:
        Raised when a shortcode has no click ledger entry.

    LedgerEntryAlreadyExistsError:
        Raised when a click ledger entry is initialized twice.

Example:
    >>> from linkshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""

from linkshortener.constants import ErrorKind
from linkshortener.exceptions import LinkShortenerError


class DAOError(LinkShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError):
    """Exception raised when a short URL doesn't exist or is no longer active.

    Unknown and expired shortcodes deliberately raise the same exception.
    """

    error_code = ErrorKind.NOT_FOUND


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to register a shortcode that is already taken."""

    error_code = ErrorKind.SHORTCODE_TAKEN


class LedgerEntryNotFoundError(DAOError):
    """Exception raised when a shortcode has no click ledger entry."""

    error_code = 'dao:ledger_entry_not_found'


class LedgerEntryAlreadyExistsError(DAOError):
    """Exception raised when a click ledger entry already exists for a shortcode."""

    error_code = 'dao:ledger_entry_already_exists'
