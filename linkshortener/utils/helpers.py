"""Helper utilities for request handlers.

Functions:
    utcnow() -> datetime
        Current time as a timezone-aware UTC datetime (default clock)
    base_url(event, default) -> str
        Extract correct public base URL from an API Gateway event
    get_short_url(shortcode, base) -> str
        Get string representation of short URL for a given shortcode
    guarantee_500_response(func) -> Callable
        Decorator: convert unexpected handler exceptions into a 500 response

Example:
    >>> from linkshortener.utils.helpers import base_url
    >>> event = {
    ...     "requestContext": {
    ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
    ...         "stage": "Prod"
    ...     }
    ... }
    >>> base_url(event)
    'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

    >>> base_url({})
    'http://localhost:3000'
"""

import json
import logging
import functools
from datetime import datetime, UTC
from typing import Any
from collections.abc import Callable

from linkshortener.constants import DEFAULT_BASE_URL, UNKNOWN_INTERNAL_SERVER_ERROR
from linkshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(UTC)


def base_url(event: dict[str, Any], default: str = DEFAULT_BASE_URL) -> str:
    """Extract public base URL from API Gateway event

    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.
    Without any domain information, `default` is returned.

    Args:
        event (dict): API Gateway event object passed to the handler
        default (str): fallback base URL (configured `base_url`)

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # Custom domain, skip stage
        return f'https://{domain}'
    elif domain:
        return f'https://{domain}/{stage}'
    else:
        return default


def get_short_url(shortcode: str, base: str) -> str:
    return f'{base.rstrip("/")}/{shortcode}'


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with 500 when a handler raises unexpectedly.

    When running locally the original exception is re-raised so that bugs
    (e.g. InternalInvariantViolationError) surface with a full traceback.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(func)
    def wrapper(event, context, *args, **kwargs):
        try:
            return func(event, context, *args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in request handler. Responding with 500.')
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
