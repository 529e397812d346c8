"""Vehicle catalog gateway port."""

from abc import ABC, abstractmethod
from typing import Optional

from safequote.application.dtos.option import OptionItem
from safequote.application.dtos.vehicle import Vehicle


class VehicleCatalogError(Exception):
    """Raised when a catalog request fails or returns an unusable payload."""


class VehicleCatalogGateway(ABC):
    """Port interface for the backend answering option and search requests."""

    @abstractmethod
    async def get_years(self, make: Optional[str] = None) -> list[OptionItem]:
        """
        Get model years, optionally narrowed by make.

        Args:
            make: Make filter (empty or None means unfiltered)

        Returns:
            Ordered list of year options

        Raises:
            VehicleCatalogError: If the request fails
        """
        pass

    @abstractmethod
    async def get_makes(self, year: Optional[str] = None) -> list[OptionItem]:
        """
        Get makes, optionally narrowed by year.

        Args:
            year: Year filter (empty or None means unfiltered)

        Returns:
            Ordered list of make options

        Raises:
            VehicleCatalogError: If the request fails
        """
        pass

    @abstractmethod
    async def get_models(self, make: str, year: Optional[str] = None) -> list[OptionItem]:
        """
        Get models of a make, optionally narrowed by year.

        Args:
            make: Make (required)
            year: Year filter (empty or None means unfiltered)

        Returns:
            Ordered list of model options

        Raises:
            VehicleCatalogError: If the request fails
        """
        pass

    @abstractmethod
    async def search_vehicles(self, params: dict[str, str]) -> list[Vehicle]:
        """
        Search vehicles.

        Args:
            params: Search parameters (year, make, model, minSafetyRating)

        Returns:
            Vehicles in backend order

        Raises:
            VehicleCatalogError: If the request fails
        """
        pass
