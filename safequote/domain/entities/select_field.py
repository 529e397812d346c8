"""Select field entity."""

from dataclasses import dataclass, replace
from typing import Iterable

from safequote.domain.value_objects.filter_field import FilterField


@dataclass(frozen=True)
class SelectField:
    """A select input: its options, its selection and its "all" sentinel."""

    field: FilterField
    sentinel_label: str
    options: tuple[str, ...] = ()
    selected: str = ""

    def select(self, value: str) -> "SelectField":
        """Return a copy with `value` selected (empty selects the sentinel)."""
        return replace(self, selected=value or "")

    def repopulate(self, names: Iterable[str]) -> "SelectField":
        """
        Replace the options, keeping the selection only if still offered.

        Args:
            names: New option values, in backend order

        Returns:
            Repopulated select field
        """
        options = tuple(names)
        selected = self.selected if self.selected in options else ""
        return replace(self, options=options, selected=selected)

    def reset(self) -> "SelectField":
        """Return a copy holding only the sentinel."""
        return replace(self, options=(), selected="")
