"""Unit tests for JSON logging in logging.py.

Test coverage includes:

1. JsonFormatter output
   - Ensures standard fields and `extra` fields are emitted as one JSON object.
   - Ensures exceptions are serialized under the `exception` key.

2. initialize_logging()
   - Ensures the root logger level and JSON handler are installed.
"""

import sys
import json
import logging

import pytest

from linkshortener.constants import Event
from linkshortener.utils.logging import JsonFormatter, initialize_logging


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name='linkshortener.test',
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='Short URL %s.',
        args=('created',),
        exc_info=kwargs.pop('exc_info', None),
    )
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


# -------------------------------
# 1. JsonFormatter output
# -------------------------------


def test_json_formatter_includes_extras():
    log = json.loads(JsonFormatter().format(_record(shortcode='abc123', event=Event.SHORT_URL_CREATED)))

    assert log['level'] == 'INFO'
    assert log['logger'] == 'linkshortener.test'
    assert log['message'] == 'Short URL created.'
    assert log['shortcode'] == 'abc123'
    assert log['event'] == 'SHORT_URL_CREATED'
    assert log['timestamp'].endswith('Z')
    assert 'msg' not in log
    assert 'args' not in log


def test_json_formatter_serializes_exceptions():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))
    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.fixture()
def _restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.mark.usefixtures('_restore_root_logger')
def test_initialize_logging():
    initialize_logging('debug')

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
