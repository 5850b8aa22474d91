"""Unit tests for shared handler responses and request helpers.

Test coverage includes:

1. status_for()
   - Ensures every error kind maps to its HTTP status code.

2. error_response()
   - Ensures typed errors produce the matching response and error code.

3. Request helpers
   - Ensures headers are matched case-insensitively.
   - Ensures the client address prefers the first X-Forwarded-For hop.
"""

import json

import pytest

from linkshortener.constants import ErrorKind
from linkshortener.dao.exceptions import ShortURLNotFoundError, ShortURLAlreadyExistsError
from linkshortener.exceptions import InvalidUrlError, InvalidValidityError, InternalInvariantViolationError
from linkshortener.handlers.helpers import header, click_context
from linkshortener.handlers.responses import status_for, error_response


# -------------------------------
# 1. status_for()
# -------------------------------


@pytest.mark.parametrize(
    'kind, status',
    [
        (ErrorKind.INVALID_URL, 400),
        (ErrorKind.INVALID_VALIDITY, 400),
        (ErrorKind.INVALID_SHORTCODE_FORMAT, 400),
        (ErrorKind.SHORTCODE_TAKEN, 409),
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.INTERNAL_INVARIANT_VIOLATION, 500),
    ],
)
def test_status_for(kind, status):
    assert status_for(kind) == status


def test_every_error_kind_is_mapped():
    for kind in ErrorKind:
        assert status_for(kind) in {400, 404, 409, 500}


# -------------------------------
# 2. error_response()
# -------------------------------


@pytest.mark.parametrize(
    'error, status, base',
    [
        (InvalidUrlError('bad url'), 400, 'Bad Request'),
        (InvalidValidityError('bad validity'), 400, 'Bad Request'),
        (ShortURLNotFoundError('missing'), 404, 'Not Found'),
        (ShortURLAlreadyExistsError('taken'), 409, 'Conflict'),
        (InternalInvariantViolationError('out of sync'), 500, 'Internal Server Error'),
    ],
)
def test_error_response(error, status, base):
    response = error_response(error)
    body = json.loads(response['body'])

    assert response['statusCode'] == status
    assert body['message'].startswith(base)
    assert body['error_code'] == error.error_code


def test_internal_errors_hide_details():
    body = json.loads(error_response(InternalInvariantViolationError('out of sync'))['body'])
    assert 'out of sync' not in body['message']


# -------------------------------
# 3. Request helpers
# -------------------------------


def test_header_is_case_insensitive():
    event = {'headers': {'user-agent': 'curl/8.0'}}

    assert header(event, 'User-Agent') == 'curl/8.0'
    assert header(event, 'Referer') is None
    assert header({'headers': None}, 'Referer') is None


@pytest.mark.parametrize(
    'event, remote_addr',
    [
        ({'headers': {'X-Forwarded-For': '203.0.113.7, 10.0.0.1'}}, '203.0.113.7'),
        ({'requestContext': {'identity': {'sourceIp': '198.51.100.1'}}}, '198.51.100.1'),
        ({}, None),
    ],
)
def test_click_context_remote_addr(event, remote_addr):
    assert click_context(event).remote_addr == remote_addr
