"""Input validators shared by the code registry and the request handlers.

Each validator returns the normalized value or raises the matching typed
`ValidationError` subclass.
"""

import re
import ipaddress
from urllib.parse import urlparse

from linkshortener.constants import Shortcode, Validity
from linkshortener.exceptions import InvalidUrlError, InvalidValidityError, InvalidShortcodeFormatError


SHORTCODE_RE = re.compile(Shortcode.PATTERN)
HOST_LABEL_RE = re.compile(r'^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$')

MAX_URL_LENGTH = 2048


def is_valid_shortcode(shortcode: object) -> bool:
    return isinstance(shortcode, str) and SHORTCODE_RE.fullmatch(shortcode) is not None


def is_reserved_shortcode(shortcode: str) -> bool:
    return shortcode.lower() in Shortcode.RESERVED


def validate_shortcode(shortcode: object) -> str:
    """Validate a custom shortcode requested by a client."""
    if not is_valid_shortcode(shortcode):
        raise InvalidShortcodeFormatError(
            f'Invalid shortcode {shortcode!r}. Must be {Shortcode.MIN_LENGTH}-{Shortcode.MAX_LENGTH} alphanumeric characters.'
        )
    if is_reserved_shortcode(shortcode):
        raise InvalidShortcodeFormatError(f'Shortcode {shortcode!r} is reserved and cannot be used.')
    return shortcode


def is_valid_hostname(hostname: str) -> bool:
    """True for IP literals and DNS names made of valid labels (IDN allowed)."""
    try:
        ipaddress.ip_address(hostname)
        return True
    except ValueError:
        pass

    try:
        ascii_hostname = hostname.encode('idna').decode('ascii')
    except UnicodeError:
        return False
    labels = ascii_hostname.removesuffix('.').split('.')
    return all(HOST_LABEL_RE.match(label) for label in labels)


def validate_url(url: object) -> str:
    """Ensure `url` is an absolute http(s) URL with a valid host.

    `urlparse` silently strips tabs and newlines, so whitespace and control
    characters are rejected up front. The stored URL ends up verbatim in the
    redirect's Location header.
    """
    if not isinstance(url, str) or not url:
        raise InvalidUrlError('URL is required and must be a string.')
    if len(url) > MAX_URL_LENGTH:
        raise InvalidUrlError(f'URL is too long (max {MAX_URL_LENGTH} characters).')
    if any(ch.isspace() or not ch.isprintable() for ch in url):
        raise InvalidUrlError(f'URL must not contain whitespace or control characters: {url!r}.')

    try:
        components = urlparse(url)
        hostname = components.hostname
        components.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidUrlError(f'Invalid URL format: {url!r}.') from e

    if components.scheme not in {'http', 'https'}:
        raise InvalidUrlError(f'URL must use the http or https scheme: {url!r}.')
    if not hostname or not is_valid_hostname(hostname):
        raise InvalidUrlError(f'URL must include a valid host: {url!r}.')
    return url


def validate_validity(validity_minutes: object, default: int = Validity.DEFAULT) -> int:
    """Return the validity window in minutes, substituting `default` for None."""
    if validity_minutes is None:
        validity_minutes = default
    if not isinstance(validity_minutes, int) or isinstance(validity_minutes, bool):
        raise InvalidValidityError(f'Validity must be an integer number of minutes (given: {validity_minutes!r}).')
    if not Validity.MIN <= validity_minutes <= Validity.MAX:
        raise InvalidValidityError(
            f'Validity must be between {Validity.MIN} and {Validity.MAX} minutes (given: {validity_minutes}).'
        )
    return validity_minutes
