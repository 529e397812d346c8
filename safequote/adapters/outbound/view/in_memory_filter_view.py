"""In-memory filter view adapter."""

from typing import Iterable, Optional

from safequote.application.ports.filter_view import FilterView
from safequote.application.use_cases.user_messages_en import UserMessagesEN
from safequote.domain.entities.filter_state import FilterState
from safequote.domain.entities.select_field import SelectField
from safequote.domain.value_objects.filter_field import FilterField
from safequote.domain.value_objects.safety_rating import SafetyRating


class InMemoryFilterView(FilterView):
    """Filter panel held in memory, rebuilt from a client snapshot per request."""

    def __init__(
        self,
        years: Iterable[str] = (),
        makes: Iterable[str] = (),
        models: Iterable[str] = (),
        year: str = "",
        make: str = "",
        model: str = "",
        min_safety_rating: int = 0,
    ) -> None:
        """
        Initialize view.

        Args:
            years: Year options currently shown
            makes: Make options currently shown
            models: Model options currently shown
            year: Selected year
            make: Selected make
            model: Selected model
            min_safety_rating: Slider value
        """
        self._selects: dict[FilterField, SelectField] = {}
        for field, options, selected in (
            (FilterField.YEAR, years, year),
            (FilterField.MAKE, makes, make),
            (FilterField.MODEL, models, model),
        ):
            self._selects[field] = SelectField(
                field=field,
                sentinel_label=UserMessagesEN.sentinel_for(field),
                options=tuple(options),
                selected=selected or "",
            )
        self.rating = SafetyRating(min_safety_rating)
        self.rating_label = self.rating.label
        self.results_html: Optional[str] = None
        self.results_count_label: Optional[str] = None

    def read_state(self) -> FilterState:
        """Read the current selections."""
        return FilterState(
            year=self._selects[FilterField.YEAR].selected,
            make=self._selects[FilterField.MAKE].selected,
            model=self._selects[FilterField.MODEL].selected,
            min_safety_rating=self.rating,
        )

    def get_select(self, field: FilterField) -> SelectField:
        """Get a select input's current contents."""
        return self._selects[field]

    def set_select(self, select: SelectField) -> None:
        """Replace a select input's contents."""
        self._selects[select.field] = select

    def set_rating(self, rating: SafetyRating, label: str) -> None:
        """Set the slider value and its visible label."""
        self.rating = rating
        self.rating_label = label

    def show_results(self, html: str, count_label: str) -> None:
        """Replace the results area and the visible result count."""
        self.results_html = html
        self.results_count_label = count_label
