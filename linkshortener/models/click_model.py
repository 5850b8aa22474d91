from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any

from linkshortener.constants import DIRECT_REFERRER


# fmt: off
@dataclass(frozen=True)
class GeoLocation:
    country: str | None = None          # ISO country code, e.g. 'US'
    region: str | None = None           # Region/state code
    city: str | None = None
    timezone: str | None = None         # IANA timezone name

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ClickContext:
    referrer: str | None = None         # Referer header, if any
    user_agent: str | None = None       # User-Agent header, if any
    remote_addr: str | None = None      # Client IP used for geo lookup
# fmt: on


@dataclass(frozen=True)
class ClickModel:
    """One observed redirect event."""

    timestamp: datetime
    referrer: str = DIRECT_REFERRER
    user_agent: str = ''
    location: GeoLocation | None = None

    @classmethod
    def from_context(cls, context: ClickContext, timestamp: datetime, location: GeoLocation | None = None) -> 'ClickModel':
        return cls(
            timestamp=timestamp,
            referrer=context.referrer or DIRECT_REFERRER,
            user_agent=context.user_agent or '',
            location=location,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'timestamp': self.timestamp.isoformat(),
            'referrer': self.referrer,
            'user_agent': self.user_agent,
            'location': None if self.location is None else self.location.to_dict(),
        }


@dataclass(frozen=True)
class ClickLedgerEntry:
    """Point-in-time snapshot of a shortcode's click history.

    Attributes:
        total_clicks (int):
            Number of recorded clicks. Never decreases while the entry lives.
        clicks (tuple[ClickModel, ...]):
            Recorded clicks in arrival order.
    """

    total_clicks: int = 0
    clicks: tuple[ClickModel, ...] = field(default_factory=tuple)
