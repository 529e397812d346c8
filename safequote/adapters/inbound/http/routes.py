"""HTTP routes."""

from typing import Optional

from fastapi import APIRouter, Query, status

from safequote.adapters.inbound.http.schemas import (
    FilterPanelRequest,
    FilterPanelResponse,
    MakeChangedRequest,
    RatingInputRequest,
    SelectSchema,
    YearChangedRequest,
)
from safequote.adapters.outbound.view.in_memory_filter_view import InMemoryFilterView
from safequote.application.use_cases.filter_sync_controller import FilterSyncController
from safequote.domain.entities.filter_state import FilterState
from safequote.domain.value_objects.filter_field import FilterField
from safequote.infrastructure.config.settings import settings
from safequote.infrastructure.logging.logger import log_event
from safequote.infrastructure.wiring import dependencies

router = APIRouter()

# Shared by every request so page-level subscribers see all searches
_event_bus = dependencies.create_event_bus()

# Lets overlapping requests from one page supersede each other
_sequencers = dependencies.create_sequencer_registry()


def _build_view(panel: FilterPanelRequest) -> InMemoryFilterView:
    return InMemoryFilterView(
        years=panel.years,
        makes=panel.makes,
        models=panel.models,
        year=panel.year,
        make=panel.make,
        model=panel.model,
        min_safety_rating=panel.min_safety_rating,
    )


def _build_controller(
    view: InMemoryFilterView, nonce: Optional[str], page_id: Optional[str]
) -> FilterSyncController:
    context = dependencies.create_ajax_context(nonce)
    sequencer = _sequencers.for_page(page_id) if page_id else None
    return dependencies.create_filter_sync_controller(
        view, context, event_publisher=_event_bus, sequencer=sequencer
    )


def _to_response(
    view: InMemoryFilterView,
    controller: FilterSyncController,
    operation: str,
    page_id: Optional[str] = None,
    request_seq: Optional[dict[str, int]] = None,
) -> FilterPanelResponse:
    state = view.read_state()
    response = FilterPanelResponse(
        years=SelectSchema.from_field(view.get_select(FilterField.YEAR)),
        makes=SelectSchema.from_field(view.get_select(FilterField.MAKE)),
        models=SelectSchema.from_field(view.get_select(FilterField.MODEL)),
        min_safety_rating=view.rating.value,
        rating_label=view.rating_label,
        results_html=view.results_html,
        results_count_label=view.results_count_label,
        query_string=state.to_query_string(),
        page_id=page_id,
        request_seq=request_seq or {},
        stale=bool(controller.stale_targets),
        stale_targets=sorted(controller.stale_targets),
    )

    if settings.debug_mode:
        response.debug = {
            "operation": operation,
            "search_params": state.to_search_params(),
        }

    log_event(
        "http",
        operation,
        query=response.query_string,
        page_id=page_id,
        stale_targets=response.stale_targets,
    )
    return response


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post(
    "/filters/initialize", status_code=status.HTTP_200_OK, response_model=FilterPanelResponse
)
async def initialize(panel: FilterPanelRequest) -> FilterPanelResponse:
    """
    Load the unfiltered year and make lists.

    Args:
        panel: Current panel snapshot

    Returns:
        Panel state with both selects populated (unchanged without a nonce)
    """
    view = _build_view(panel)
    controller = _build_controller(view, panel.nonce, panel.page_id)
    await controller.initialize()
    return _to_response(view, controller, "initialize", panel.page_id, panel.request_seq)


@router.post(
    "/filters/year-changed", status_code=status.HTTP_200_OK, response_model=FilterPanelResponse
)
async def year_changed(request: YearChangedRequest) -> FilterPanelResponse:
    """
    Narrow makes (and models) after a year selection.

    Args:
        request: Panel snapshot and selected year

    Returns:
        Panel state with refreshed makes and a reset model select
    """
    view = _build_view(request)
    controller = _build_controller(view, request.nonce, request.page_id)
    await controller.on_year_changed(request.selected_year)
    return _to_response(view, controller, "year_changed", request.page_id, request.request_seq)


@router.post(
    "/filters/make-changed", status_code=status.HTTP_200_OK, response_model=FilterPanelResponse
)
async def make_changed(request: MakeChangedRequest) -> FilterPanelResponse:
    """
    Narrow years and load models after a make selection.

    Args:
        request: Panel snapshot and selected make

    Returns:
        Panel state with refreshed years and models
    """
    view = _build_view(request)
    controller = _build_controller(view, request.nonce, request.page_id)
    await controller.on_make_changed(request.selected_make)
    return _to_response(view, controller, "make_changed", request.page_id, request.request_seq)


@router.post(
    "/filters/rating-input", status_code=status.HTTP_200_OK, response_model=FilterPanelResponse
)
async def rating_input(request: RatingInputRequest) -> FilterPanelResponse:
    """
    Update the slider label.

    Args:
        request: Panel snapshot and slider value

    Returns:
        Panel state with the new rating label
    """
    view = _build_view(request)
    controller = _build_controller(view, request.nonce, request.page_id)
    controller.on_rating_input(request.value)
    return _to_response(view, controller, "rating_input", request.page_id, request.request_seq)


@router.post("/filters/search", status_code=status.HTTP_200_OK, response_model=FilterPanelResponse)
async def search(panel: FilterPanelRequest) -> FilterPanelResponse:
    """
    Search with the current selections.

    Args:
        panel: Current panel snapshot

    Returns:
        Panel state with rendered results (results omitted if the search failed)
    """
    view = _build_view(panel)
    controller = _build_controller(view, panel.nonce, panel.page_id)
    await controller.on_search()
    return _to_response(view, controller, "search", panel.page_id, panel.request_seq)


@router.post("/filters/reset", status_code=status.HTTP_200_OK, response_model=FilterPanelResponse)
async def reset(panel: FilterPanelRequest) -> FilterPanelResponse:
    """
    Clear every filter and refresh the results.

    Args:
        panel: Current panel snapshot

    Returns:
        Cleared panel state with unfiltered lists and results
    """
    view = _build_view(panel)
    controller = _build_controller(view, panel.nonce, panel.page_id)
    await controller.on_reset()
    return _to_response(view, controller, "reset", panel.page_id, panel.request_seq)


@router.get("/filters/restore", status_code=status.HTTP_200_OK, response_model=FilterPanelResponse)
async def restore(
    year: Optional[str] = Query(default=None),
    make: Optional[str] = Query(default=None),
    model: Optional[str] = Query(default=None),
    min_safety_rating: Optional[str] = Query(default=None, alias="minSafetyRating"),
    nonce: Optional[str] = Query(default=None),
    page_id: Optional[str] = Query(default=None, max_length=128),
) -> FilterPanelResponse:
    """
    Rebuild the panel from a bookmarked URL.

    Args:
        year: Year from the URL
        make: Make from the URL
        model: Model from the URL
        min_safety_rating: Minimum rating from the URL
        nonce: Optional nonce (defaults to the configured one)
        page_id: Optional page session id

    Returns:
        Restored panel state, with results when year and make were restored
    """
    state = FilterState.from_query_params(
        {"year": year, "make": make, "model": model, "minSafetyRating": min_safety_rating}
    )
    view = InMemoryFilterView()
    controller = _build_controller(view, nonce, page_id)
    await controller.restore(state)
    return _to_response(view, controller, "restore", page_id)
