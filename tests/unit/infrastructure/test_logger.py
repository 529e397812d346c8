"""Unit tests for the structured logger."""

import logging

from safequote.infrastructure.logging.logger import format_fields, log_event, log_fetch_failure


def test_format_fields_key_value_pairs():
    """Test fields render in order as key=repr(value)."""
    assert format_fields({"component": "http", "count": 2}) == "component='http' | count=2"


def test_format_fields_masks_nested_nonce():
    """Test nonces are masked inside request params."""
    message = format_fields({"params": {"action": "get_years", "nonce": "secret"}})

    assert "secret" not in message
    assert "'nonce': '***'" in message


def test_log_event_emits_record(caplog):
    """Test log_event writes one record on the package logger."""
    with caplog.at_level(logging.INFO, logger="safequote_filters"):
        log_event("filter_sync", "options_loaded", field="make", options_count=3)

    assert caplog.records[-1].getMessage() == (
        "component='filter_sync' | action='options_loaded' | field='make' | options_count=3"
    )


def test_fetch_failure_logged_as_warning(caplog):
    """Test backend failures are warnings."""
    with caplog.at_level(logging.INFO, logger="safequote_filters"):
        log_fetch_failure("get_makes", "HTTP 500")

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "backend_action='get_makes'" in record.getMessage()
