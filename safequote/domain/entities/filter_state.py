"""Filter state entity."""

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional
from urllib.parse import urlencode

from safequote.domain.value_objects.safety_rating import SafetyRating


@dataclass(frozen=True)
class FilterState:
    """Current year/make/model/rating selections of the filter panel."""

    year: str = ""
    make: str = ""
    model: str = ""
    min_safety_rating: SafetyRating = field(default_factory=SafetyRating)

    def __post_init__(self) -> None:
        """Drop a model selected without a make."""
        if self.model and not self.make:
            object.__setattr__(self, "model", "")

    def with_year(self, year: str) -> "FilterState":
        """Return a copy with a new year; the model selection is invalidated."""
        return replace(self, year=year, model="")

    def with_make(self, make: str) -> "FilterState":
        """Return a copy with a new make; the model selection is invalidated."""
        return replace(self, make=make, model="")

    def to_search_params(self) -> dict[str, str]:
        """
        Build search_vehicles parameters.

        Only non-empty selections are included; minSafetyRating only when > 0.

        Returns:
            Dictionary of request parameters
        """
        params: dict[str, str] = {}
        if self.year:
            params["year"] = self.year
        if self.make:
            params["make"] = self.make
        if self.model:
            params["model"] = self.model
        if self.min_safety_rating.is_filter:
            params["minSafetyRating"] = str(self.min_safety_rating.value)
        return params

    def to_query_string(self) -> str:
        """Encode the state as a bookmarkable query string."""
        return urlencode(self.to_search_params())

    @classmethod
    def from_query_params(cls, params: Mapping[str, Optional[str]]) -> "FilterState":
        """
        Decode a state from URL query parameters.

        Malformed ratings fall back to 0; out-of-range ratings are clamped.

        Args:
            params: Query parameters (e.g. request.query_params)

        Returns:
            FilterState instance
        """
        raw_rating = (params.get("minSafetyRating") or "").strip()
        try:
            rating = SafetyRating.clamped(int(raw_rating))
        except ValueError:
            rating = SafetyRating()

        return cls(
            year=(params.get("year") or "").strip(),
            make=(params.get("make") or "").strip(),
            model=(params.get("model") or "").strip(),
            min_safety_rating=rating,
        )
