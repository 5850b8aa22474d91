from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Activity is never stored on the model. It is always derived from the
    expiry timestamp and the caller's notion of "now", so two reads straddling
    the expiry moment can't disagree because of a cached flag.

    Attributes:
        shortcode (str):
            The unique short identifier representing the shortened URL.
        target (str):
            The original long URL that the shortcode redirects to.
        created_at (datetime):
            Timezone-aware creation timestamp (UTC).
        expires_at (datetime):
            Timezone-aware timestamp after which the short URL stops resolving.
        validity_minutes (int):
            Length of the validity window the record was created with.

    Example:
        >>> from datetime import datetime, UTC
        >>> url = ShortURLModel.create(
        ...     shortcode='Ab12Cd',
        ...     target='https://example.com/a',
        ...     created_at=datetime(2025, 1, 1, tzinfo=UTC),
        ...     validity_minutes=1,
        ... )
        >>> url.expires_at
        datetime.datetime(2025, 1, 1, 0, 1, tzinfo=datetime.timezone.utc)
        >>> url.is_active(datetime(2025, 1, 1, 0, 0, 30, tzinfo=UTC))
        True
    """

    shortcode: str
    target: str
    created_at: datetime
    expires_at: datetime
    validity_minutes: int

    def __post_init__(self):
        if self.expires_at <= self.created_at:
            raise ValueError(f'expires_at ({self.expires_at}) must be later than created_at ({self.created_at}).')

    @classmethod
    def create(cls, shortcode: str, target: str, created_at: datetime, validity_minutes: int) -> 'ShortURLModel':
        return cls(
            shortcode=shortcode,
            target=target,
            created_at=created_at,
            expires_at=created_at + timedelta(minutes=validity_minutes),
            validity_minutes=validity_minutes,
        )

    def is_active(self, now: datetime) -> bool:
        return now < self.expires_at

    def is_expired(self, now: datetime) -> bool:
        """True once `now` is strictly past the expiry (sweep eligibility)."""
        return self.expires_at < now

    def to_dict(self) -> dict[str, Any]:
        return {
            'shortcode': self.shortcode,
            'target_url': self.target,
            'created_at': self.created_at.isoformat(),
            'expires_at': self.expires_at.isoformat(),
        }
