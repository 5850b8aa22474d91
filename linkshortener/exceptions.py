"""Application-wide exceptions.

Every exception carries an `error_code` which request handlers map to HTTP
status codes. Data store errors live in `linkshortener.dao.exceptions`.
"""

from linkshortener.constants import ErrorKind


class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'


class ValidationError(LinkShortenerError):
    """Base exception for rejected user input."""

    error_code = 'app:validation_error'


class InvalidUrlError(ValidationError):
    """Raised when the target is not an absolute http/https URL."""

    error_code = ErrorKind.INVALID_URL


class InvalidValidityError(ValidationError):
    """Raised when the validity window is outside the allowed bounds."""

    error_code = ErrorKind.INVALID_VALIDITY


class InvalidShortcodeFormatError(ValidationError):
    """Raised when a custom shortcode doesn't match ^[A-Za-z0-9]{3,20}$."""

    error_code = ErrorKind.INVALID_SHORTCODE_FORMAT


class InternalInvariantViolationError(LinkShortenerError):
    """Raised when the registry and the click ledger disagree.

    This is a bug, never a user error. It must not be mapped to a 4xx response.
    """

    error_code = ErrorKind.INTERNAL_INVARIANT_VIOLATION


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
