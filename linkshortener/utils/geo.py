"""Geo-IP lookup collaborators.

The lifecycle coordinator only needs a callable `locate(remote_addr)` that
returns a `GeoLocation` or None. Lookups must be pure and non-blocking.
"""

from collections.abc import Mapping

from linkshortener.models import GeoLocation


def no_location(remote_addr: str | None) -> GeoLocation | None:
    return None


class StaticGeoLocator:
    """Resolve client addresses from a fixed table.

    Example:
        >>> locate = StaticGeoLocator({'203.0.113.7': {'country': 'US', 'city': 'Boston'}})
        >>> locate('203.0.113.7').city
        'Boston'
        >>> locate('198.51.100.1') is None
        True
    """

    def __init__(self, table: Mapping[str, Mapping[str, str]] | None = None):
        self._table = {addr: GeoLocation(**fields) for addr, fields in (table or {}).items()}

    def __call__(self, remote_addr: str | None) -> GeoLocation | None:
        if not remote_addr:
            return None
        return self._table.get(remote_addr)
