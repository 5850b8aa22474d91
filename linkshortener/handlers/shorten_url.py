import json
import logging

from linkshortener.constants import Event
from linkshortener.exceptions import ValidationError
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError
from linkshortener.lifecycle import LifecycleCoordinator
from linkshortener.handlers.helpers import json_body
from linkshortener.handlers.responses import json_response, response_400, error_response
from linkshortener.types import LambdaEvent, LambdaContext, LambdaHandler, LambdaResponse
from linkshortener.utils.helpers import base_url, get_short_url, guarantee_500_response


logger = logging.getLogger(__name__)


def make_handler(coordinator: LifecycleCoordinator, default_base_url: str) -> LambdaHandler:
    """Build the `POST /shorturls` handler

    This handler follows this procedure to shorten URLs:
    - Step 1: Parse the JSON request body
    - Step 2: Create the short URL (validation, code allocation, ledger init)
    - Step 3: Respond with 201 and the short link

    Request body:
        url: original URL (required, absolute http/https)
        validity: validity window in minutes (optional, 1-525600, default 30)
        shortcode: custom shortcode (optional, 3-20 alphanumeric characters)

    HTTP responses:
        201: Short URL created
            shortcode, short_link, target_url, created_at, expiry
        400: Bad client request
            invalid JSON, missing url, invalid url/validity/shortcode format
        409: Custom shortcode already taken
        500: Internal server error

    Example:
        >>> handler = make_handler(coordinator, 'https://sho.rt')
        >>> response = handler({'body': '{"url": "https://example.com"}'}, None)
        >>> response['statusCode']
        201
    """

    @guarantee_500_response
    def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        # 1- Parse request body
        try:
            body = json_body(event)
        except json.JSONDecodeError:
            logger.info('Invalid JSON body. Responding with 400.', extra={'event': Event.INVALID_REQUEST})
            return response_400(message='invalid JSON body', error_code=Event.INVALID_REQUEST)
        if not isinstance(body, dict) or not body.get('url'):
            logger.info("Missing 'url' in JSON body. Responding with 400.", extra={'event': Event.INVALID_REQUEST})
            return response_400(message="missing 'url' in JSON body", error_code=Event.INVALID_REQUEST)

        # 2- Create the short URL
        try:
            short_url = coordinator.create_short_url(
                body['url'],
                validity_minutes=body.get('validity'),
                shortcode=body.get('shortcode'),
            )
        except (ValidationError, ShortURLAlreadyExistsError) as error:
            logger.info(
                'Short URL creation rejected. Responding with %s.',
                error.error_code,
                extra={'reason': str(error), 'event': Event.SHORT_URL_REJECTED},
            )
            return error_response(error)

        # 3- Respond with the short link
        short_link = get_short_url(short_url.shortcode, base_url(event, default=default_base_url))
        return json_response(
            201,
            {
                'shortcode': short_url.shortcode,
                'short_link': short_link,
                'target_url': short_url.target,
                'created_at': short_url.created_at.isoformat(),
                'expiry': short_url.expires_at.isoformat(),
            },
        )

    return lambda_handler
