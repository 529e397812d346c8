"""Vehicle DTOs."""

import math
from typing import Any, Optional, Union

from pydantic import ConfigDict, field_validator

from safequote.application.dtos.base import DTO

# Nested NHTSA keys used when the flat columns are empty
NHTSA_OVERALL_RATING = "OverallRating"
NHTSA_FRONT_CRASH = "OverallFrontCrashRating"
NHTSA_SIDE_CRASH = "OverallSideCrashRating"
NHTSA_ROLLOVER = "RolloverRating"
NHTSA_PICTURE = "VehiclePicture"


def _positive_number(value: Any) -> Optional[float]:
    """Parse a rating-like value; 0, null, inf/nan and non-numeric text mean absent."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) and number > 0 else None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class Vehicle(DTO):
    """Vehicle returned by search_vehicles (read-only)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[Union[int, str]] = None
    year: Optional[Union[int, str]] = None
    make: Optional[str] = None
    model: Optional[str] = None
    type: Optional[str] = None
    vehicle_type: Optional[str] = None
    safety_rating: Optional[Union[float, str]] = None
    nhtsa_overall_rating: Optional[Union[float, str]] = None
    front_crash: Optional[Union[float, str]] = None
    side_crash: Optional[Union[float, str]] = None
    rollover_crash: Optional[Union[float, str]] = None
    vehicle_picture: Optional[str] = None
    image: Optional[str] = None
    nhtsa_data: Optional[dict[str, Any]] = None

    @field_validator("make", "model", "type", "vehicle_type", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        """Names like the Chrysler 300 come back as numbers."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def _nhtsa(self, key: str) -> Any:
        if not isinstance(self.nhtsa_data, dict):
            return None
        return self.nhtsa_data.get(key)

    @property
    def title(self) -> str:
        """Card title: '{year} {make} {model}'."""
        parts = [_text(self.year), _text(self.make), _text(self.model)]
        return " ".join(part for part in parts if part)

    @property
    def resolved_type(self) -> Optional[str]:
        """Body type, falling back to the legacy vehicle_type column."""
        return _text(self.type) or _text(self.vehicle_type)

    @property
    def resolved_rating(self) -> Optional[float]:
        """Overall safety rating, or None when unrated."""
        for candidate in (
            self.safety_rating,
            self.nhtsa_overall_rating,
            self._nhtsa(NHTSA_OVERALL_RATING),
        ):
            rating = _positive_number(candidate)
            if rating is not None:
                return rating
        return None

    @property
    def resolved_image(self) -> Optional[str]:
        """Picture URL, or None when no usable image field is present."""
        for candidate in (self.vehicle_picture, self.image, self._nhtsa(NHTSA_PICTURE)):
            url = _text(candidate)
            if url:
                return url
        return None

    @property
    def resolved_front_crash(self) -> Optional[float]:
        """Front crash rating."""
        return _positive_number(self.front_crash) or _positive_number(
            self._nhtsa(NHTSA_FRONT_CRASH)
        )

    @property
    def resolved_side_crash(self) -> Optional[float]:
        """Side crash rating."""
        return _positive_number(self.side_crash) or _positive_number(
            self._nhtsa(NHTSA_SIDE_CRASH)
        )

    @property
    def resolved_rollover_crash(self) -> Optional[float]:
        """Rollover rating."""
        return _positive_number(self.rollover_crash) or _positive_number(
            self._nhtsa(NHTSA_ROLLOVER)
        )


class CrashRating(DTO):
    """One line of a card's crash ratings block."""

    label: str
    value: str  # One decimal place (e.g. "4.6")


class VehicleCard(DTO):
    """Presentation model for a rendered vehicle card."""

    id: Optional[Union[int, str]] = None
    title: str
    type_line: str = ""
    image_url: Optional[str] = None
    rating: Optional[float] = None
    stars: tuple[bool, ...] = ()
    crash_ratings: tuple[CrashRating, ...] = ()

    @property
    def has_rating(self) -> bool:
        """Whether the star row is shown."""
        return self.rating is not None

    @property
    def filled_stars(self) -> int:
        """Number of filled stars."""
        return sum(1 for star in self.stars if star)
