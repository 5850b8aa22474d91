"""Unit tests for the delete_url request handler.

Test coverage includes:

1. Deletion
   - Ensures a 204 response and that the link no longer resolves.

2. Invalid or unknown shortcodes
   - Ensures 400 for malformed shortcodes and 404 for unknown or already deleted ones.
"""

import json

import pytest

from linkshortener.dao.exceptions import ShortURLNotFoundError
from linkshortener.handlers import delete_url


@pytest.fixture()
def handler(coordinator):
    return delete_url.make_handler(coordinator)


# -------------------------------
# 1. Deletion
# -------------------------------


def test_delete(handler, make_event, context, coordinator):
    coordinator.create_short_url('https://example.com/a', shortcode='abc123')

    response = handler(make_event(method='DELETE', path='/shorturls/abc123', shortcode='abc123'), context)

    assert response['statusCode'] == 204
    assert response['body'] == ''
    with pytest.raises(ShortURLNotFoundError):
        coordinator.resolve_and_track('abc123')


# -------------------------------
# 2. Invalid or unknown shortcodes
# -------------------------------


def test_malformed_shortcode(handler, make_event, context):
    response = handler(make_event(method='DELETE', path='/shorturls/ab', shortcode='ab'), context)
    assert response['statusCode'] == 400


def test_missing_shortcode(handler, make_event, context):
    response = handler(make_event(method='DELETE', path='/shorturls/'), context)
    assert json.loads(response['body'])['error_code'] == 'MISSING_SHORTCODE'


def test_delete_twice(handler, make_event, context, coordinator):
    coordinator.create_short_url('https://example.com/a', shortcode='abc123')
    event = make_event(method='DELETE', path='/shorturls/abc123', shortcode='abc123')

    handler(event, context)
    response = handler(event, context)

    assert response['statusCode'] == 404
    assert json.loads(response['body'])['error_code'] == 'NOT_FOUND'
