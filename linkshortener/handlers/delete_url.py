import logging

from linkshortener.constants import Event, ErrorKind
from linkshortener.dao.exceptions import ShortURLNotFoundError
from linkshortener.lifecycle import LifecycleCoordinator
from linkshortener.handlers.helpers import path_shortcode
from linkshortener.handlers.responses import response_204, response_400, error_response
from linkshortener.types import LambdaEvent, LambdaContext, LambdaHandler, LambdaResponse
from linkshortener.utils.helpers import guarantee_500_response
from linkshortener.utils.validators import is_valid_shortcode


logger = logging.getLogger(__name__)


def make_handler(coordinator: LifecycleCoordinator) -> LambdaHandler:
    """Build the `DELETE /shorturls/{shortcode}` handler (204, 400 or 404)."""

    @guarantee_500_response
    def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        shortcode = path_shortcode(event)
        if shortcode is None:
            return response_400(message="missing 'shortcode' in path", error_code=Event.MISSING_SHORTCODE)
        if not is_valid_shortcode(shortcode):
            return response_400(message='invalid shortcode format', error_code=ErrorKind.INVALID_SHORTCODE_FORMAT)

        try:
            coordinator.delete_short_url(shortcode)
        except ShortURLNotFoundError as error:
            logger.info(
                'Short URL not found for deletion. Responding with 404.',
                extra={'shortcode': shortcode, 'event': Event.SHORT_URL_NOT_FOUND},
            )
            return error_response(error, message='shortcode does not exist')

        return response_204()

    return lambda_handler
