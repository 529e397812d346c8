"""HTTP adapter schemas for the filter panel."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from safequote.domain.entities.select_field import SelectField


class FilterPanelRequest(BaseModel):
    """Snapshot of the filter panel as currently shown by the client."""

    year: str = ""
    make: str = ""
    model: str = ""
    min_safety_rating: int = Field(default=0, ge=0, le=5)
    years: list[str] = Field(default_factory=list)
    makes: list[str] = Field(default_factory=list)
    models: list[str] = Field(default_factory=list)
    nonce: Optional[str] = None
    page_id: Optional[str] = Field(default=None, max_length=128)
    request_seq: dict[str, int] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "year": "2024",
                "make": "Toyota",
                "model": "",
                "min_safety_rating": 4,
                "years": ["2025", "2024", "2023"],
                "makes": ["Honda", "Toyota"],
                "models": ["Camry", "Corolla"],
                "nonce": "a1b2c3d4e5",
                "page_id": "4f9c2e",
                "request_seq": {"makes": 7, "models": 3},
            }
        }
    )


class YearChangedRequest(FilterPanelRequest):
    """Panel snapshot plus the newly selected year."""

    selected_year: str = ""


class MakeChangedRequest(FilterPanelRequest):
    """Panel snapshot plus the newly selected make."""

    selected_make: str = ""


class RatingInputRequest(FilterPanelRequest):
    """Panel snapshot plus the new slider value."""

    value: int = Field(ge=0, le=5)


class SelectOption(BaseModel):
    """One rendered option of a select."""

    value: str
    label: str


class SelectSchema(BaseModel):
    """Select contents, sentinel option first."""

    options: list[SelectOption]
    selected: str

    @classmethod
    def from_field(cls, select: SelectField) -> "SelectSchema":
        """Build the schema from a select field."""
        options = [SelectOption(value="", label=select.sentinel_label)]
        options.extend(SelectOption(value=name, label=name) for name in select.options)
        return cls(options=options, selected=select.selected)


class FilterPanelResponse(BaseModel):
    """Panel state after a controller operation."""

    years: SelectSchema
    makes: SelectSchema
    models: SelectSchema
    min_safety_rating: int
    rating_label: str
    results_html: Optional[str] = None
    results_count_label: Optional[str] = None
    query_string: str = ""
    page_id: Optional[str] = None
    request_seq: dict[str, int] = Field(default_factory=dict)  # Echoed from the request
    stale: bool = False  # A newer request from the same page superseded this one
    stale_targets: list[str] = Field(default_factory=list)
    debug: Optional[dict[str, Any]] = None
