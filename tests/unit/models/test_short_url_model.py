"""Unit tests for the ShortURLModel dataclass in short_url_model.py.

Test coverage includes:

1. Model creation
   - Ensures `create()` derives expires_at from created_at and the validity window.
   - Ensures expires_at must lie strictly after created_at.

2. Derived activity
   - Verifies is_active() is true strictly before expiry and false from expiry on.
   - Verifies is_expired() (sweep eligibility) is true strictly after expiry only.

3. Immutability and serialization
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, UTC

import pytest

from linkshortener.models import ShortURLModel


T0 = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture()
def short_url():
    return ShortURLModel.create(shortcode='abc123', target='https://example.com/a', created_at=T0, validity_minutes=1)


# -------------------------------
# 1. Model creation
# -------------------------------


def test_create_derives_expiry(short_url):
    """Ensure expires_at equals created_at plus the validity window."""
    assert short_url.created_at == T0
    assert short_url.expires_at == T0 + timedelta(minutes=1)
    assert short_url.validity_minutes == 1


def test_expiry_must_follow_creation():
    """Ensure a record expiring at (or before) its creation is rejected."""
    with pytest.raises(ValueError):
        ShortURLModel(shortcode='abc123', target='https://example.com', created_at=T0, expires_at=T0, validity_minutes=0)


# -------------------------------
# 2. Derived activity
# -------------------------------


@pytest.mark.parametrize(
    'offset, active, expired',
    [
        (timedelta(seconds=0), True, False),
        (timedelta(seconds=59), True, False),
        (timedelta(minutes=1), False, False),
        (timedelta(minutes=1, microseconds=1), False, True),
    ],
)
def test_activity_boundaries(short_url, offset, active, expired):
    """Ensure activity is now < expires_at and sweep eligibility is expires_at < now."""
    now = T0 + offset
    assert short_url.is_active(now) is active
    assert short_url.is_expired(now) is expired


# -------------------------------
# 3. Immutability and serialization
# -------------------------------


def test_model_is_frozen(short_url):
    with pytest.raises(FrozenInstanceError):
        short_url.target = 'https://evil.example'


def test_to_dict(short_url):
    assert short_url.to_dict() == {
        'shortcode': 'abc123',
        'target_url': 'https://example.com/a',
        'created_at': '2025-10-15T12:00:00+00:00',
        'expires_at': '2025-10-15T12:01:00+00:00',
    }
