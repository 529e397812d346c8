"""Safety rating value object."""

from dataclasses import dataclass

MAX_SAFETY_RATING = 5


@dataclass(frozen=True)
class SafetyRating:
    """Minimum safety rating selected on the slider (0 means no filter)."""

    value: int = 0

    def __post_init__(self) -> None:
        """Validate rating range."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Safety rating must be an integer")
        if not 0 <= self.value <= MAX_SAFETY_RATING:
            raise ValueError(f"Safety rating must be between 0 and {MAX_SAFETY_RATING}")

    @classmethod
    def clamped(cls, value: int) -> "SafetyRating":
        """Build a rating, forcing the value into the slider range."""
        return cls(max(0, min(MAX_SAFETY_RATING, int(value))))

    @property
    def is_filter(self) -> bool:
        """Whether the rating narrows a search."""
        return self.value > 0

    @property
    def label(self) -> str:
        """Slider label (e.g. '3/5')."""
        return f"{self.value}/{MAX_SAFETY_RATING}"
