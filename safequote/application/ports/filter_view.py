"""Filter view port."""

from abc import ABC, abstractmethod

from safequote.domain.entities.filter_state import FilterState
from safequote.domain.entities.select_field import SelectField
from safequote.domain.value_objects.filter_field import FilterField
from safequote.domain.value_objects.safety_rating import SafetyRating


class FilterView(ABC):
    """Port interface for the filter panel UI (selects, slider, results area)."""

    @abstractmethod
    def read_state(self) -> FilterState:
        """Read the current selections."""
        pass

    @abstractmethod
    def get_select(self, field: FilterField) -> SelectField:
        """Get a select input's current contents."""
        pass

    @abstractmethod
    def set_select(self, select: SelectField) -> None:
        """Replace a select input's contents."""
        pass

    @abstractmethod
    def set_rating(self, rating: SafetyRating, label: str) -> None:
        """Set the slider value and its visible label."""
        pass

    @abstractmethod
    def show_results(self, html: str, count_label: str) -> None:
        """Replace the results area and the visible result count."""
        pass
