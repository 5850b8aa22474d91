from dataclasses import dataclass
from datetime import datetime
from typing import Any

from linkshortener.models.short_url_model import ShortURLModel
from linkshortener.models.click_model import ClickModel, ClickLedgerEntry


@dataclass(frozen=True)
class ShortURLStats:
    """Joined view of a short URL record and its click ledger entry."""

    shortcode: str
    target: str
    created_at: datetime
    expires_at: datetime
    total_clicks: int
    is_active: bool
    clicks: tuple[ClickModel, ...]

    @classmethod
    def join(cls, short_url: ShortURLModel, entry: ClickLedgerEntry, now: datetime) -> 'ShortURLStats':
        return cls(
            shortcode=short_url.shortcode,
            target=short_url.target,
            created_at=short_url.created_at,
            expires_at=short_url.expires_at,
            total_clicks=entry.total_clicks,
            is_active=short_url.is_active(now),
            clicks=entry.clicks,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'shortcode': self.shortcode,
            'target_url': self.target,
            'created_at': self.created_at.isoformat(),
            'expires_at': self.expires_at.isoformat(),
            'total_clicks': self.total_clicks,
            'is_active': self.is_active,
            'clicks': [click.to_dict() for click in self.clicks],
        }
