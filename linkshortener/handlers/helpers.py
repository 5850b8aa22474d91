import json
from typing import Any

from linkshortener.models import ClickContext


def header(event: dict[str, Any], name: str) -> str | None:
    """Case-insensitive request header lookup."""
    headers = event.get('headers') or {}
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def path_shortcode(event: dict[str, Any]) -> str | None:
    return (event.get('pathParameters') or {}).get('shortcode')


def json_body(event: dict[str, Any]) -> Any:
    """Decode the JSON request body. Raises json.JSONDecodeError on malformed input."""
    return json.loads(event.get('body') or '{}')


def click_context(event: dict[str, Any]) -> ClickContext:
    identity = (event.get('requestContext') or {}).get('identity') or {}
    forwarded_for = header(event, 'X-Forwarded-For')
    # First hop of X-Forwarded-For is the original client
    remote_addr = forwarded_for.split(',')[0].strip() if forwarded_for else identity.get('sourceIp')
    return ClickContext(
        referrer=header(event, 'Referer'),
        user_agent=header(event, 'User-Agent'),
        remote_addr=remote_addr or None,
    )
