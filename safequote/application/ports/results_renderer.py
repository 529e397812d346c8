"""Results renderer port."""

from abc import ABC, abstractmethod

from safequote.application.dtos.vehicle import VehicleCard


class ResultsRenderer(ABC):
    """Port interface for turning vehicle cards into markup."""

    @abstractmethod
    def render(self, cards: list[VehicleCard]) -> str:
        """
        Render the results area.

        Args:
            cards: Vehicle cards in display order (empty renders a placeholder)

        Returns:
            Markup with every interpolated value escaped
        """
        pass
