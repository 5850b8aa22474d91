import string
from enum import StrEnum


class Shortcode:
    """Shortcode format constraints."""

    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    PATTERN = r'^[A-Za-z0-9]{3,20}$'
    MIN_LENGTH = 3
    MAX_LENGTH = 20
    DEFAULT_LENGTH = 6

    # Path segments routed before GET /{shortcode}
    RESERVED = frozenset({'health', 'shorturls'})


class Validity:
    """Validity window bounds in minutes."""

    DEFAULT = 30
    MIN = 1
    MAX = 525_600  # 60 * 24 * 365


# Referrer recorded when a click carries no Referer header
DIRECT_REFERRER = 'Direct'

# Default interval between two expiry sweeps (5 minutes)
DEFAULT_SWEEP_INTERVAL_SECONDS = 300

# Fallback public base URL for short links
DEFAULT_BASE_URL = 'http://localhost:3000'


class ErrorKind(StrEnum):
    """Closed set of error kinds surfaced by the core."""

    INVALID_URL = 'INVALID_URL'
    INVALID_VALIDITY = 'INVALID_VALIDITY'
    INVALID_SHORTCODE_FORMAT = 'INVALID_SHORTCODE_FORMAT'
    SHORTCODE_TAKEN = 'SHORTCODE_TAKEN'
    NOT_FOUND = 'NOT_FOUND'
    INTERNAL_INVARIANT_VIOLATION = 'INTERNAL_INVARIANT_VIOLATION'


class Event(StrEnum):
    """Structured log event codes."""

    SHORT_URL_CREATED = 'SHORT_URL_CREATED'
    SHORT_URL_REJECTED = 'SHORT_URL_REJECTED'
    SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
    SHORT_URL_DELETED = 'SHORT_URL_DELETED'
    CLICK_RECORDED = 'CLICK_RECORDED'
    REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
    STATS_RETRIEVED = 'STATS_RETRIEVED'
    MISSING_SHORTCODE = 'MISSING_SHORTCODE'
    INVALID_REQUEST = 'INVALID_REQUEST'
    SWEEP_COMPLETED = 'SWEEP_COMPLETED'
    SWEEP_FAILED = 'SWEEP_FAILED'
    INVARIANT_VIOLATION = 'INVARIANT_VIOLATION'
    ROUTE_NOT_FOUND = 'ROUTE_NOT_FOUND'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        CONFIG_FILE = 'CONFIG_FILE'
        LOG_LEVEL = 'LOG_LEVEL'

    class Shortener(StrEnum):
        SHORTCODE_LENGTH = 'SHORTCODE_LENGTH'
        DEFAULT_VALIDITY_MINUTES = 'DEFAULT_VALIDITY_MINUTES'
        SWEEP_INTERVAL_SECONDS = 'SWEEP_INTERVAL_SECONDS'
        BASE_URL = 'BASE_URL'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
