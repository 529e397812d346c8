"""Logging notifier adapter."""

import logging

from safequote.application.ports.notifier import NOTIFICATION_LEVELS, Notifier
from safequote.infrastructure.logging.logger import log_event

_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingNotifier(Notifier):
    """Writes notifications to the application log."""

    def notify(self, message: str, level: str = "info") -> None:
        """
        Log a notification.

        Args:
            message: Message text
            level: One of info, success, warning, error

        Raises:
            ValueError: If the level is unknown
        """
        if level not in NOTIFICATION_LEVELS:
            raise ValueError(f"Unknown notification level: {level}")
        log_event("notifier", "notify", level=_LEVELS[level], message=message, notice=level)
