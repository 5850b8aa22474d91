"""Unit tests for click and statistics models.

Test coverage includes:

1. ClickModel.from_context()
   - Ensures a missing referrer is recorded as 'Direct'.
   - Ensures headers and location are carried over.

2. ShortURLStats.join()
   - Ensures record and ledger entry are joined and is_active is derived at read time.
"""

from datetime import datetime, timedelta, UTC

from linkshortener.models import ClickContext, ClickModel, ClickLedgerEntry, GeoLocation, ShortURLModel, ShortURLStats


T0 = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


# -------------------------------
# 1. ClickModel.from_context()
# -------------------------------


def test_missing_referrer_is_direct():
    click = ClickModel.from_context(ClickContext(), timestamp=T0)

    assert click.referrer == 'Direct'
    assert click.user_agent == ''
    assert click.location is None


def test_context_fields_are_recorded():
    location = GeoLocation(country='US', region='CA', city='San Francisco', timezone='America/Los_Angeles')
    context = ClickContext(referrer='https://news.example', user_agent='curl/8.0', remote_addr='203.0.113.7')

    click = ClickModel.from_context(context, timestamp=T0, location=location)

    assert click.referrer == 'https://news.example'
    assert click.user_agent == 'curl/8.0'
    assert click.to_dict() == {
        'timestamp': '2025-10-15T12:00:00+00:00',
        'referrer': 'https://news.example',
        'user_agent': 'curl/8.0',
        'location': {'country': 'US', 'region': 'CA', 'city': 'San Francisco', 'timezone': 'America/Los_Angeles'},
    }


# -------------------------------
# 2. ShortURLStats.join()
# -------------------------------


def test_stats_join():
    short_url = ShortURLModel.create(shortcode='abc123', target='https://example.com/a', created_at=T0, validity_minutes=1)
    entry = ClickLedgerEntry(total_clicks=1, clicks=(ClickModel(timestamp=T0),))

    active = ShortURLStats.join(short_url, entry, now=T0 + timedelta(seconds=30))
    expired = ShortURLStats.join(short_url, entry, now=T0 + timedelta(seconds=70))

    assert active.is_active is True
    assert expired.is_active is False
    assert expired.total_clicks == 1

    body = active.to_dict()
    assert body['target_url'] == 'https://example.com/a'
    assert body['total_clicks'] == 1
    assert body['clicks'][0]['referrer'] == 'Direct'
