import json

import pytest


@pytest.fixture()
def context():
    class _Context:
        function_name = 'linkshortener'

    return _Context()


@pytest.fixture()
def make_event():
    """Build an API Gateway proxy event."""

    def _make_event(method='GET', path='/', shortcode=None, body=None, headers=None, source_ip=None, domain=None):
        request_context = {'httpMethod': method, 'identity': {'sourceIp': source_ip}}
        if domain:
            request_context.update({'domainName': domain, 'stage': 'Prod'})
        return {
            'httpMethod': method,
            'path': path,
            'pathParameters': {'shortcode': shortcode} if shortcode is not None else None,
            'headers': headers or {},
            'body': body if body is None or isinstance(body, str) else json.dumps(body),
            'requestContext': request_context,
        }

    return _make_event
