"""Application composition root.

`ShortenerApp` wires one in-memory store (registry + click ledger) into a
lifecycle coordinator, builds the request handlers around it and owns the
background expiry sweeper. There is no module-level state: every process (and
every test) builds its own app.

Routes:
    GET    /health                  health check
    POST   /shorturls               create a short URL
    GET    /shorturls/{shortcode}   click statistics
    DELETE /shorturls/{shortcode}   delete a short URL
    GET    /{shortcode}             redirect and record the click

Example:
    >>> from linkshortener.app import ShortenerApp
    >>> from linkshortener.utils import load_config
    >>> app = ShortenerApp.from_config(load_config())
    >>> app.start()
    >>> response = app.handle({'httpMethod': 'POST', 'path': '/shorturls',
    ...                        'body': '{"url": "https://example.com"}'}, None)
    >>> response['statusCode']
    201
    >>> app.stop()
"""

import random
import logging

from linkshortener.constants import Event
from linkshortener.dao.memory import ShortURLMemoryDAO, ClickLedgerMemoryDAO
from linkshortener.lifecycle import LifecycleCoordinator, ExpirySweeper
from linkshortener.handlers import shorten_url, redirect_url, url_stats, delete_url, sweep_expired
from linkshortener.handlers.responses import json_response, response_404
from linkshortener.types import LambdaEvent, LambdaContext, LambdaResponse, Clock, GeoLocator
from linkshortener.utils.config import ShortenerConfig
from linkshortener.utils.geo import StaticGeoLocator
from linkshortener.utils.helpers import utcnow
from linkshortener.utils.logging import initialize_logging


logger = logging.getLogger(__name__)

SERVICE_NAME = 'linkshortener'
SERVICE_VERSION = '1.0.0'


class ShortenerApp:
    def __init__(self, coordinator: LifecycleCoordinator, config: ShortenerConfig):
        self.coordinator = coordinator
        self.config = config
        self.sweeper = ExpirySweeper(coordinator, interval_seconds=config.sweep_interval_seconds)

        self.shorten_url = shorten_url.make_handler(coordinator, default_base_url=config.base_url)
        self.redirect_url = redirect_url.make_handler(coordinator)
        self.url_stats = url_stats.make_handler(coordinator)
        self.delete_url = delete_url.make_handler(coordinator)
        self.sweep_expired = sweep_expired.make_handler(coordinator)

    @classmethod
    def from_config(
        cls,
        config: ShortenerConfig,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        locate: GeoLocator | None = None,
        configure_logging: bool = True,
    ) -> 'ShortenerApp':
        """Build a fresh store and coordinator from configuration

        Args:
            config (ShortenerConfig):
                Validated application configuration.
            clock (Callable[[], datetime] | None):
                Time source shared by registry and coordinator (default: UTC wall clock).
            rng (random.Random | None):
                Random source for generated shortcodes.
            locate (Callable | None):
                Geo-IP lookup. Defaults to a table lookup over `config.geo_table`.
            configure_logging (bool):
                Install the JSON logging configuration at `config.log_level`.
        """
        if configure_logging:
            initialize_logging(config.log_level)

        clock = clock or utcnow
        registry = ShortURLMemoryDAO(
            clock=clock,
            rng=rng,
            shortcode_length=config.shortcode_length,
            default_validity_minutes=config.default_validity_minutes,
        )
        ledger = ClickLedgerMemoryDAO()
        coordinator = LifecycleCoordinator(
            registry,
            ledger,
            clock=clock,
            locate=locate or StaticGeoLocator(config.geo_table),
        )
        return cls(coordinator, config)

    def start(self) -> None:
        self.sweeper.start()

    def stop(self) -> None:
        self.sweeper.stop()

    def health(self, event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        return json_response(
            200,
            {
                'status': 'OK',
                'timestamp': self.coordinator.clock().isoformat(),
                'service': SERVICE_NAME,
                'version': SERVICE_VERSION,
            },
        )

    def handle(self, event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        """Route an API Gateway proxy event to its handler."""
        method = (event.get('httpMethod') or 'GET').upper()
        segments = [segment for segment in (event.get('path') or '/').split('/') if segment]

        match method, segments:
            case 'GET', ['health']:
                return self.health(event, context)
            case 'POST', ['shorturls']:
                return self.shorten_url(event, context)
            case 'GET', ['shorturls', shortcode]:
                return self.url_stats(_with_shortcode(event, shortcode), context)
            case 'DELETE', ['shorturls', shortcode]:
                return self.delete_url(_with_shortcode(event, shortcode), context)
            case 'GET', [shortcode]:
                return self.redirect_url(_with_shortcode(event, shortcode), context)

        logger.info(
            'Route not found. Responding with 404.',
            extra={'method': method, 'path': event.get('path'), 'event': Event.ROUTE_NOT_FOUND},
        )
        return response_404(message=f'the requested endpoint {method} {event.get("path")} does not exist')


def _with_shortcode(event: LambdaEvent, shortcode: str) -> LambdaEvent:
    return {**event, 'pathParameters': {**(event.get('pathParameters') or {}), 'shortcode': shortcode}}
