from linkshortener.utils.config import app_env, app_name, load_config, ShortenerConfig
from linkshortener.utils.helpers import utcnow, base_url, get_short_url, guarantee_500_response
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.validators import is_valid_shortcode, validate_shortcode, validate_url, validate_validity
from linkshortener.utils.geo import no_location, StaticGeoLocator
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'load_config',
    'ShortenerConfig',
    'utcnow',
    'base_url',
    'get_short_url',
    'guarantee_500_response',
    'is_valid_shortcode',
    'validate_shortcode',
    'validate_url',
    'validate_validity',
    'no_location',
    'StaticGeoLocator',
    'initialize_logging',
]
