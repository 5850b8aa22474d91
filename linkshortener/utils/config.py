"""Utility functions for application configuration management.

Configuration is a YAML document merged with environment overrides. The YAML
file is optional; its location comes from the `path` argument or the
`CONFIG_FILE` environment variable:

    shortener:
      shortcode_length: 6
      default_validity_minutes: 30
      sweep_interval_seconds: 300
      base_url: https://sho.rt
    logging:
      level: INFO
    geoip:
      table:
        203.0.113.7: {country: US, region: CA, city: San Francisco, timezone: America/Los_Angeles}

Environment variables take precedence over the file:

    SHORTCODE_LENGTH, DEFAULT_VALIDITY_MINUTES, SWEEP_INTERVAL_SECONDS,
    BASE_URL, LOG_LEVEL

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    load_yaml(path: Path) -> dict
        Load a YAML document, returning {} for empty files.

    load_config(path: Path | str | None = None) -> ShortenerConfig
        Build the validated application configuration.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> config = load_config('config/local.yaml')
    >>> config.shortcode_length
    6
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from linkshortener.constants import ENV, Shortcode, Validity, DEFAULT_BASE_URL, DEFAULT_SWEEP_INTERVAL_SECONDS
from linkshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)

LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


@dataclass(frozen=True)
class ShortenerConfig:
    """Validated application configuration."""

    shortcode_length: int = Shortcode.DEFAULT_LENGTH
    default_validity_minutes: int = Validity.DEFAULT
    sweep_interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS
    base_url: str = DEFAULT_BASE_URL
    log_level: str = 'INFO'
    geo_table: dict[str, dict[str, str]] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.shortcode_length, int) or not (
            Shortcode.MIN_LENGTH <= self.shortcode_length <= Shortcode.MAX_LENGTH
        ):
            raise BadConfigurationError(
                f'shortcode_length must be an integer in [{Shortcode.MIN_LENGTH}, {Shortcode.MAX_LENGTH}] '
                f'(given value: {self.shortcode_length!r}).'
            )
        if not isinstance(self.default_validity_minutes, int) or not (
            Validity.MIN <= self.default_validity_minutes <= Validity.MAX
        ):
            raise BadConfigurationError(
                f'default_validity_minutes must be an integer in [{Validity.MIN}, {Validity.MAX}] '
                f'(given value: {self.default_validity_minutes!r}).'
            )
        if not isinstance(self.sweep_interval_seconds, (int, float)) or self.sweep_interval_seconds <= 0:
            raise BadConfigurationError(
                f'sweep_interval_seconds must be a positive number (given value: {self.sweep_interval_seconds!r}).'
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise BadConfigurationError(f'Unknown log level {self.log_level!r}.')
        if not isinstance(self.geo_table, dict):
            raise BadConfigurationError('geoip.table must be a mapping of IP address to location.')


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file into a Python dictionary.

    Raises:
        FileNotFoundError:
            If the file does not exist.
        BadConfigurationError:
            If the document is not a mapping.
    """
    if not path.is_file():
        raise FileNotFoundError(f'YAML not found: {path}')
    with path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a YAML mapping.')
    return data


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise BadConfigurationError(f'Environment variable {name} must be an integer (given value: {raw!r}).') from e


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise BadConfigurationError(f'Environment variable {name} must be a number (given value: {raw!r}).') from e


def load_config(path: Path | str | None = None) -> ShortenerConfig:
    """Load configuration from YAML (optional) and environment overrides

    Args:
        path (Path | str | None):
            YAML configuration file. Falls back to `CONFIG_FILE`; when neither
            is set only defaults and environment overrides apply.

    Returns:
        ShortenerConfig: validated configuration.

    Raises:
        FileNotFoundError:
            If an explicit configuration file doesn't exist.
        BadConfigurationError:
            If any value is out of bounds or of the wrong type.
    """
    path = path or os.environ.get(ENV.App.CONFIG_FILE)
    document = load_yaml(Path(path)) if path else {}

    shortener = document.get('shortener') or {}
    logging_section = document.get('logging') or {}
    geoip = document.get('geoip') or {}

    # None values are dropped so dataclass defaults apply
    overrides = {
        'shortcode_length': _env_int(ENV.Shortener.SHORTCODE_LENGTH),
        'default_validity_minutes': _env_int(ENV.Shortener.DEFAULT_VALIDITY_MINUTES),
        'sweep_interval_seconds': _env_float(ENV.Shortener.SWEEP_INTERVAL_SECONDS),
        'base_url': os.environ.get(ENV.Shortener.BASE_URL) or None,
        'log_level': os.environ.get(ENV.App.LOG_LEVEL) or None,
    }
    values = {
        'shortcode_length': shortener.get('shortcode_length'),
        'default_validity_minutes': shortener.get('default_validity_minutes'),
        'sweep_interval_seconds': shortener.get('sweep_interval_seconds'),
        'base_url': shortener.get('base_url'),
        'log_level': logging_section.get('level'),
        'geo_table': geoip.get('table'),
    }
    values.update({key: value for key, value in overrides.items() if value is not None})

    config = ShortenerConfig(**{key: value for key, value in values.items() if value is not None})
    logger.debug('Loaded configuration.', extra={'configFile': str(path) if path else None, 'appEnv': app_env()})
    return config
