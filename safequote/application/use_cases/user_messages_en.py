"""English user-facing messages for the vehicle filters."""

from safequote.domain.value_objects.filter_field import FilterField


class UserMessagesEN:
    """Centralized English user-facing messages."""

    # Select sentinels
    ALL_YEARS = "All Years"
    ALL_MAKES = "All Makes"
    SELECT_MODEL = "Select Model"

    # Results
    NO_RATING = "No Rating"
    NO_RESULTS = "No vehicles found. Try adjusting your filters."

    # Crash ratings block
    FRONT_CRASH = "Front Crash"
    SIDE_CRASH = "Side Crash"
    ROLLOVER = "Rollover"

    # Failures
    LOAD_YEARS_FAILED = "Failed to load years. Please try again."
    LOAD_MAKES_FAILED = "Failed to load makes. Please try again."
    LOAD_MODELS_FAILED = "Failed to load models. Please try again."
    SEARCH_FAILED = "Failed to search vehicles. Please try again."

    @staticmethod
    def vehicles_found(count: int) -> str:
        """Result count label."""
        return f"{count} vehicles found"

    @classmethod
    def sentinel_for(cls, field: FilterField) -> str:
        """Sentinel label of a select."""
        return {
            FilterField.YEAR: cls.ALL_YEARS,
            FilterField.MAKE: cls.ALL_MAKES,
            FilterField.MODEL: cls.SELECT_MODEL,
        }[field]
