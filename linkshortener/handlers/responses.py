"""API Gateway proxy responses shared by all request handlers."""

import json
from typing import Any

from linkshortener.constants import ErrorKind
from linkshortener.exceptions import LinkShortenerError


JSON_HEADERS = {'Content-Type': 'application/json'}


def json_response(status_code: int, body: dict[str, Any] | None = None, headers: dict[str, str] | None = None) -> dict:
    return {
        'statusCode': status_code,
        'headers': {**JSON_HEADERS, **(headers or {})},
        'body': json.dumps(body if body is not None else {}),
    }


def _error_body(base: str, message: str | None, error_code: str | None) -> dict[str, Any]:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['error_code'] = str(error_code)
    return body


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    return json_response(400, _error_body('Bad Request', message, error_code))


def response_404(message: str | None = None, error_code: str | None = None) -> dict:
    return json_response(404, _error_body('Not Found', message, error_code))


def response_409(message: str | None = None, error_code: str | None = None) -> dict:
    return json_response(409, _error_body('Conflict', message, error_code))


def response_500(message: str | None = None, error_code: str | None = None) -> dict:
    return json_response(500, _error_body('Internal Server Error', message, error_code))


def response_302(*, location: str) -> dict:
    return {
        'statusCode': 302,
        'headers': {'Location': location, 'Cache-Control': 'no-store'},
        'body': json.dumps({}),  # no body needed for redirects
    }


def response_204() -> dict:
    return {'statusCode': 204, 'headers': {}, 'body': ''}


def status_for(kind: ErrorKind) -> int:
    """Map every error kind to its HTTP status code."""
    match kind:
        case ErrorKind.INVALID_URL | ErrorKind.INVALID_VALIDITY | ErrorKind.INVALID_SHORTCODE_FORMAT:
            return 400
        case ErrorKind.SHORTCODE_TAKEN:
            return 409
        case ErrorKind.NOT_FOUND:
            return 404
        case ErrorKind.INTERNAL_INVARIANT_VIOLATION:
            return 500
        case _:
            raise ValueError(f'Unknown error kind: {kind!r}')


def error_response(error: LinkShortenerError, message: str | None = None) -> dict:
    """Build the response for a typed user-facing error."""
    kind = ErrorKind(error.error_code)
    status = status_for(kind)
    message = message if message is not None else str(error)
    match status:
        case 400:
            return response_400(message=message, error_code=kind)
        case 404:
            return response_404(message=message, error_code=kind)
        case 409:
            return response_409(message=message, error_code=kind)
        case _:
            return response_500(error_code=kind)
