"""Vehicle search event DTOs."""

from typing import Optional

from pydantic import ConfigDict

from safequote.application.dtos.base import DTO
from safequote.application.dtos.vehicle import Vehicle


class VehicleSearchCompleted(DTO):
    """Published after a successful search."""

    year: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    min_safety_rating: int = 0
    vehicles: list[Vehicle]

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "year": "2024",
                "make": "Toyota",
                "model": None,
                "min_safety_rating": 4,
                "vehicles": [
                    {
                        "id": 1,
                        "year": 2024,
                        "make": "Toyota",
                        "model": "Camry",
                        "type": "Sedan",
                        "safety_rating": 5,
                        "front_crash": 4.6,
                    }
                ],
            }
        },
    )
