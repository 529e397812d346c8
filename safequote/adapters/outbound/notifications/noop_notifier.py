"""No-op notifier adapter for when no notification surface exists."""

from safequote.application.ports.notifier import Notifier


class NoOpNotifier(Notifier):
    """No-op adapter that discards notifications."""

    def notify(self, message: str, level: str = "info") -> None:
        """
        No-op (does nothing).

        Args:
            message: Message text (ignored)
            level: Notification level (ignored)
        """
        pass
