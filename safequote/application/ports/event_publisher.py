"""Event publisher port."""

from abc import ABC, abstractmethod

from safequote.application.dtos.base import DTO


class EventPublisher(ABC):
    """Port interface for notifying other page components."""

    @abstractmethod
    async def publish(self, event: DTO) -> None:
        """
        Publish an event to its subscribers.

        Args:
            event: Event DTO (e.g. VehicleSearchCompleted)
        """
        pass
