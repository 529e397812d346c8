"""In-memory publish/subscribe event bus adapter."""

import inspect
from collections import defaultdict
from typing import Any, Awaitable, Callable, Union

from safequote.application.dtos.base import DTO
from safequote.application.ports.event_publisher import EventPublisher
from safequote.infrastructure.logging.logger import logger

EventHandler = Callable[[Any], Union[None, Awaitable[None]]]


class InMemoryEventBus(EventPublisher):
    """Delivers events to handlers subscribed to their exact type."""

    def __init__(self) -> None:
        """Initialize with no subscribers."""
        self._handlers: defaultdict[type, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[DTO], handler: EventHandler) -> Callable[[], None]:
        """
        Subscribe a handler (sync or async) to an event type.

        Args:
            event_type: Event DTO class
            handler: Called with the event instance

        Returns:
            Function that removes the subscription
        """
        self._handlers[event_type].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)

        return unsubscribe

    async def publish(self, event: DTO) -> None:
        """
        Publish an event to its subscribers in subscription order.

        A failing handler is logged and does not stop delivery to the others.

        Args:
            event: Event DTO
        """
        for handler in list(self._handlers[type(event)]):
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "Event handler %r failed for %s", handler, type(event).__name__
                )
