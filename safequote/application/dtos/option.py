"""Option list DTOs."""

from pydantic import field_validator

from safequote.application.dtos.base import DTO


class OptionItem(DTO):
    """One entry of a year/make/model option list."""

    name: str

    @field_validator("name", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        """Years come back from the backend as numbers."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
