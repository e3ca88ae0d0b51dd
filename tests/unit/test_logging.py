"""Tests for logging setup."""

import logging

import pytest

from colprov.observability.logging import RequestIDFilter, request_id_var, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    app_level = logging.getLogger("colprov").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("colprov").setLevel(app_level)


def _record() -> logging.LogRecord:
    return logging.LogRecord("colprov.test", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_defaults_to_dash():
    record = _record()
    assert RequestIDFilter().filter(record) is True
    assert record.request_id == "-"


def test_filter_uses_current_request_id():
    token = request_id_var.set("req_abc")
    try:
        record = _record()
        RequestIDFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req_abc"


def test_service_and_library_levels():
    setup_logging("DEBUG")
    assert logging.getLogger("colprov").level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING


def test_library_level_never_below_service_level():
    setup_logging("ERROR", library_level="INFO")
    assert logging.getLogger().level == logging.ERROR


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger("colprov").level == logging.INFO
