"""Filter field enumeration."""

from enum import Enum


class FilterField(str, Enum):
    """Select inputs owned by the filter panel."""

    YEAR = "year"
    MAKE = "make"
    MODEL = "model"
