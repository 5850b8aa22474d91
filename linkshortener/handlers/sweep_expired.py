import logging

from linkshortener.constants import Event
from linkshortener.exceptions import LinkShortenerError
from linkshortener.lifecycle import LifecycleCoordinator
from linkshortener.types import LambdaEvent, LambdaContext, LambdaHandler


logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'


def response_success(*, removed: int) -> dict:
    return {
        'status': SUCCESS,
        'removed': removed,
        'message': f'Successfully swept {removed} expired short URL(s)',
    }


def response_error(*, error: LinkShortenerError) -> dict:
    return {
        'status': ERROR,
        'message': 'Failed to sweep expired short URLs',
        'reason': str(error),
        'error': error.__class__.__name__,
    }


def make_handler(coordinator: LifecycleCoordinator) -> LambdaHandler:
    """Build the scheduled sweep handler

    Diagnostic responses:
        success:
            status: success
            removed: <count>
            message: Successfully swept <count> expired short URL(s)
        error:
            status: error
            message: Failed to sweep expired short URLs
            reason: <reason>
            error: <error class name>
    """

    def lambda_handler(event: LambdaEvent, context: LambdaContext) -> dict:
        try:
            removed = coordinator.sweep_expired()
        except LinkShortenerError as error:
            logger.exception(
                'Failed to sweep expired short URLs.',
                extra={'event': Event.SWEEP_FAILED, 'reason': str(error), 'error': error.__class__.__name__},
            )
            return response_error(error=error)
        return response_success(removed=removed)

    return lambda_handler
