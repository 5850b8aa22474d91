import logging

from linkshortener.constants import Event, ErrorKind
from linkshortener.dao.exceptions import ShortURLNotFoundError
from linkshortener.lifecycle import LifecycleCoordinator
from linkshortener.handlers.helpers import path_shortcode, click_context
from linkshortener.handlers.responses import response_302, response_400, error_response
from linkshortener.types import LambdaEvent, LambdaContext, LambdaHandler, LambdaResponse
from linkshortener.utils.helpers import guarantee_500_response
from linkshortener.utils.validators import is_valid_shortcode


logger = logging.getLogger(__name__)


def make_handler(coordinator: LifecycleCoordinator) -> LambdaHandler:
    """Build the `GET /{shortcode}` redirect handler

    This handler follows this procedure to redirect clients:
    - Step 1: Extract and validate the shortcode from the request path
    - Step 2: Resolve the shortcode and record the click
    - Step 3: Redirect the client to the target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Missing or malformed shortcode
        404: Shortcode unknown or expired (indistinguishable)
        500: Internal server error
    """

    @guarantee_500_response
    def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        # 1- Extract shortcode from request's path
        shortcode = path_shortcode(event)
        if shortcode is None:
            logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': Event.MISSING_SHORTCODE})
            return response_400(message="missing 'shortcode' in path", error_code=Event.MISSING_SHORTCODE)
        if not is_valid_shortcode(shortcode):
            logger.info(
                'Malformed shortcode in path. Responding with 400.',
                extra={'shortcode': shortcode, 'event': Event.INVALID_REQUEST},
            )
            return response_400(message='invalid shortcode format', error_code=ErrorKind.INVALID_SHORTCODE_FORMAT)

        # 2- Resolve and track the click
        try:
            target_url = coordinator.resolve_and_track(shortcode, click_context(event))
        except ShortURLNotFoundError as error:
            logger.info(
                'Short URL not found or expired. Responding with 404.',
                extra={'shortcode': shortcode, 'event': Event.SHORT_URL_NOT_FOUND},
            )
            return error_response(error, message='short URL not found or has expired')

        # 3- Redirect client to target URL
        logger.info(
            'Redirecting client to target URL. Responding with 302.',
            extra={'shortcode': shortcode, 'event': Event.REDIRECT_SUCCESS},
        )
        return response_302(location=target_url)

    return lambda_handler
