"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the service runs in a local/dev environment, False otherwise.

Example:
    >>> from linkshortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'prod'
    >>> running_locally()
    False
"""

import os

from linkshortener.constants import ENV


LOCAL_ENVIRONMENTS = frozenset({'local', 'test'})


def running_locally() -> bool:
    """Check if the service is running locally (APP_ENV is 'local' or 'test')."""
    return os.getenv(ENV.App.APP_ENV, '').lower() in LOCAL_ENVIRONMENTS
