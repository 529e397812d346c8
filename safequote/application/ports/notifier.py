"""Notifier port."""

from abc import ABC, abstractmethod

NOTIFICATION_LEVELS = ("info", "success", "warning", "error")


class Notifier(ABC):
    """Port interface for user-facing notifications."""

    @abstractmethod
    def notify(self, message: str, level: str = "info") -> None:
        """
        Show a notification.

        Args:
            message: Message text
            level: One of info, success, warning, error
        """
        pass
