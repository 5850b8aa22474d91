import logging

from linkshortener.constants import Event, ErrorKind
from linkshortener.dao.exceptions import ShortURLNotFoundError
from linkshortener.lifecycle import LifecycleCoordinator
from linkshortener.handlers.helpers import path_shortcode
from linkshortener.handlers.responses import json_response, response_400, error_response
from linkshortener.types import LambdaEvent, LambdaContext, LambdaHandler, LambdaResponse
from linkshortener.utils.helpers import guarantee_500_response
from linkshortener.utils.validators import is_valid_shortcode


logger = logging.getLogger(__name__)


def make_handler(coordinator: LifecycleCoordinator) -> LambdaHandler:
    """Build the `GET /shorturls/{shortcode}` statistics handler

    HTTP responses:
        200: shortcode, target_url, created_at, expires_at, total_clicks, is_active, clicks
        400: Missing or malformed shortcode
        404: Shortcode unknown
    """

    @guarantee_500_response
    def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        shortcode = path_shortcode(event)
        if shortcode is None:
            return response_400(message="missing 'shortcode' in path", error_code=Event.MISSING_SHORTCODE)
        if not is_valid_shortcode(shortcode):
            return response_400(message='invalid shortcode format', error_code=ErrorKind.INVALID_SHORTCODE_FORMAT)

        try:
            stats = coordinator.get_stats(shortcode)
        except ShortURLNotFoundError as error:
            logger.info(
                'Short URL not found for statistics. Responding with 404.',
                extra={'shortcode': shortcode, 'event': Event.SHORT_URL_NOT_FOUND},
            )
            return error_response(error, message='shortcode does not exist')

        logger.info(
            'Statistics retrieved.',
            extra={'shortcode': shortcode, 'total_clicks': stats.total_clicks, 'event': Event.STATS_RETRIEVED},
        )
        return json_response(200, stats.to_dict())

    return lambda_handler
