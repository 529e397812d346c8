"""Unit tests for notifier adapters."""

import logging
from unittest.mock import patch

import pytest

from safequote.adapters.outbound.notifications.logging_notifier import LoggingNotifier
from safequote.adapters.outbound.notifications.noop_notifier import NoOpNotifier


def test_logging_notifier_logs_error_level():
    """Test error notifications are logged at ERROR."""
    with patch(
        "safequote.adapters.outbound.notifications.logging_notifier.log_event"
    ) as log_event:
        LoggingNotifier().notify("Failed to load makes. Please try again.", "error")

    log_event.assert_called_once_with(
        "notifier",
        "notify",
        level=logging.ERROR,
        message="Failed to load makes. Please try again.",
        notice="error",
    )


def test_logging_notifier_defaults_to_info():
    """Test the default level."""
    with patch(
        "safequote.adapters.outbound.notifications.logging_notifier.log_event"
    ) as log_event:
        LoggingNotifier().notify("Saved")

    assert log_event.call_args.kwargs["level"] == logging.INFO


def test_logging_notifier_rejects_unknown_level():
    """Test unknown levels raise ValueError."""
    with pytest.raises(ValueError):
        LoggingNotifier().notify("Hello", "critical")


def test_noop_notifier_accepts_anything():
    """Test the no-op notifier does nothing."""
    assert NoOpNotifier().notify("Hello", "error") is None
