import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from waterwise.core.config import settings
from waterwise.core.logging_config import RequestIdFilter, setup_logging
from waterwise.core.middleware import request_id_context


@pytest.fixture
def restore_logging():
    yield
    setup_logging()


def test_request_id_defaults_to_system():
    record = logging.LogRecord("waterwise", logging.INFO, __file__, 1, "msg", None, None)
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "system"


def test_request_id_from_context():
    token = request_id_context.set("req-123")
    try:
        record = logging.LogRecord("waterwise", logging.INFO, __file__, 1, "msg", None, None)
        RequestIdFilter().filter(record)
    finally:
        request_id_context.reset(token)
    assert record.request_id == "req-123"


def test_json_format_selected(monkeypatch, restore_logging):
    monkeypatch.setattr(settings, "log_format", "json")
    setup_logging()

    handler = logging.getLogger("waterwise").handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)


def test_client_libraries_are_quieted(restore_logging):
    setup_logging()
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("minio").level == logging.WARNING
