"""Filter sync controller use case."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from safequote.application.dtos.option import OptionItem
from safequote.application.dtos.search import VehicleSearchCompleted
from safequote.application.dtos.vehicle import Vehicle
from safequote.application.ports.event_publisher import EventPublisher
from safequote.application.ports.filter_view import FilterView
from safequote.application.ports.notifier import Notifier
from safequote.application.ports.results_renderer import ResultsRenderer
from safequote.application.ports.vehicle_catalog_gateway import (
    VehicleCatalogError,
    VehicleCatalogGateway,
)
from safequote.application.use_cases.request_sequencer import RequestSequencer
from safequote.application.use_cases.user_messages_en import UserMessagesEN
from safequote.application.use_cases.vehicle_card_presenter import VehicleCardPresenter
from safequote.domain.entities.filter_state import FilterState
from safequote.domain.value_objects.ajax_context import AjaxContext
from safequote.domain.value_objects.filter_field import FilterField
from safequote.domain.value_objects.safety_rating import SafetyRating

# Sequencer targets
TARGET_YEARS = "years"
TARGET_MAKES = "makes"
TARGET_MODELS = "models"
TARGET_SEARCH = "search"


class FilterSyncController:
    """
    Keeps the year/make/model selects and the rating slider consistent.

    Year and make narrow each other through backend queries; the model list
    depends on the make. Searches run only on explicit user action.
    """

    def __init__(
        self,
        catalog_gateway: VehicleCatalogGateway,
        view: FilterView,
        renderer: ResultsRenderer,
        context: AjaxContext,
        event_publisher: Optional[EventPublisher] = None,
        notifier: Optional[Notifier] = None,
        logger: Optional[Callable[..., None]] = None,
        sequencer: Optional[RequestSequencer] = None,
    ) -> None:
        """
        Initialize filter sync controller.

        Args:
            catalog_gateway: Backend for option lists and searches
            view: Filter panel the controller owns
            renderer: Results markup renderer
            context: Endpoint and nonce supplied by the page environment
            event_publisher: Optional publisher for VehicleSearchCompleted
            notifier: Optional user-facing notifier
            logger: Optional logger function (component, action, **kwargs)
            sequencer: Optional request sequencer (one is created if omitted)
        """
        self._catalog_gateway = catalog_gateway
        self._view = view
        self._renderer = renderer
        self._context = context
        self._event_publisher = event_publisher
        self._notifier = notifier
        self._logger = logger
        self._sequencer = sequencer or RequestSequencer()
        self._presenter = VehicleCardPresenter()
        self._stale_targets: set[str] = set()

    @property
    def stale_targets(self) -> frozenset[str]:
        """Targets whose responses were dropped because a newer request was issued."""
        return frozenset(self._stale_targets)

    def _log(self, action: str, **kwargs: Any) -> None:
        """
        Log event if logger is available.

        Args:
            action: Event name
            **kwargs: Additional log fields
        """
        if self._logger:
            self._logger("filter_sync", action, **kwargs)

    def _fail(self, backend_action: str, err: VehicleCatalogError, message: str) -> None:
        self._log(
            "request_failed",
            level=logging.WARNING,
            backend_action=backend_action,
            error=str(err),
        )
        if self._notifier:
            self._notifier.notify(message, "error")

    async def initialize(self) -> None:
        """Load the unfiltered year and make lists (skipped without a nonce)."""
        if not self._context.has_nonce:
            self._log("initialize_skipped", reason="missing_nonce")
            return

        await asyncio.gather(self._load_years(""), self._load_makes(""))

    async def on_year_changed(self, year: str) -> None:
        """
        Handle a year selection.

        Refetches makes for the year and, if a make is selected, the models
        for (year, make). The model selection is reset. Does not search.

        Args:
            year: Selected year (empty for all years)
        """
        year = year or ""
        self._select(FilterField.YEAR, year)
        self._reset_models()

        make = self._view.get_select(FilterField.MAKE).selected
        loads = [self._load_makes(year)]
        if make:
            loads.append(self._load_models(year, make))
        await asyncio.gather(*loads)

    async def on_make_changed(self, make: str) -> None:
        """
        Handle a make selection.

        Refetches years for the make and, if the make is set, its models.
        The model selection is reset. Does not search.

        Args:
            make: Selected make (empty for all makes)
        """
        make = make or ""
        self._select(FilterField.MAKE, make)
        self._reset_models()

        year = self._view.get_select(FilterField.YEAR).selected
        loads = [self._load_years(make)]
        if make:
            loads.append(self._load_models(year, make))
        await asyncio.gather(*loads)

    def on_rating_input(self, value: int) -> SafetyRating:
        """
        Handle slider movement; updates the label without any request.

        Args:
            value: Slider value in [0, 5]

        Returns:
            The applied rating

        Raises:
            ValueError: If the value is outside [0, 5]
        """
        rating = SafetyRating(value)
        self._view.set_rating(rating, rating.label)
        return rating

    async def on_search(self) -> Optional[list[Vehicle]]:
        """
        Search with the current selections and render the results.

        On failure the previous results are left untouched.

        Returns:
            Vehicles found, or None if the search failed or was superseded
        """
        state = self._view.read_state()
        params = state.to_search_params()
        ticket = self._sequencer.issue(TARGET_SEARCH)

        try:
            vehicles = await self._catalog_gateway.search_vehicles(params)
        except VehicleCatalogError as err:
            self._fail("search_vehicles", err, UserMessagesEN.SEARCH_FAILED)
            return None

        if not self._sequencer.is_current(TARGET_SEARCH, ticket):
            self._log_stale(TARGET_SEARCH, ticket)
            return None

        self.render_results(vehicles)
        self._log("search_completed", filters=params, results_count=len(vehicles))

        if self._event_publisher:
            await self._event_publisher.publish(
                VehicleSearchCompleted(
                    year=state.year or None,
                    make=state.make or None,
                    model=state.model or None,
                    min_safety_rating=state.min_safety_rating.value,
                    vehicles=vehicles,
                )
            )
        return vehicles

    async def on_reset(self) -> Optional[list[Vehicle]]:
        """
        Clear every filter, reload the unfiltered lists and search again.

        Returns:
            Vehicles found by the refreshing search
        """
        self._select(FilterField.YEAR, "")
        self._select(FilterField.MAKE, "")
        self._reset_models()
        self.on_rating_input(0)

        if self._context.has_nonce:
            await asyncio.gather(self._load_years(""), self._load_makes(""))

        return await self.on_search()

    async def restore(self, state: FilterState) -> Optional[list[Vehicle]]:
        """
        Restore selections from a bookmarked URL.

        Loads the option lists narrowed by the restored values; selections the
        backend no longer offers are cleared. Searches when both year and make
        survive.

        Args:
            state: State decoded from query parameters

        Returns:
            Vehicles found, or None if no search ran
        """
        self._select(FilterField.YEAR, state.year)
        self._select(FilterField.MAKE, state.make)
        self._view.set_select(self._view.get_select(FilterField.MODEL).reset().select(state.model))
        self.on_rating_input(state.min_safety_rating.value)

        if not self._context.has_nonce:
            self._log("restore_skipped", reason="missing_nonce")
            return None

        loads = [self._load_years(state.make), self._load_makes(state.year)]
        if state.make:
            loads.append(self._load_models(state.year, state.make))
        await asyncio.gather(*loads)

        restored = self._view.read_state()
        self._log("restored", query=restored.to_query_string())
        if restored.year and restored.make:
            return await self.on_search()
        return None

    def render_results(self, vehicles: list[Vehicle]) -> str:
        """
        Render vehicles into the results area and update the count.

        Args:
            vehicles: Vehicles in display order

        Returns:
            Rendered markup
        """
        cards = self._presenter.present_all(vehicles)
        html = self._renderer.render(cards)
        self._view.show_results(html, UserMessagesEN.vehicles_found(len(vehicles)))
        return html

    def _select(self, field: FilterField, value: str) -> None:
        self._view.set_select(self._view.get_select(field).select(value))

    def _reset_models(self) -> None:
        self._view.set_select(self._view.get_select(FilterField.MODEL).reset())

    async def _load_years(self, make: str) -> None:
        await self._load_options(
            FilterField.YEAR,
            TARGET_YEARS,
            lambda: self._catalog_gateway.get_years(make or None),
            "get_years",
            UserMessagesEN.LOAD_YEARS_FAILED,
            make=make,
        )

    async def _load_makes(self, year: str) -> None:
        await self._load_options(
            FilterField.MAKE,
            TARGET_MAKES,
            lambda: self._catalog_gateway.get_makes(year or None),
            "get_makes",
            UserMessagesEN.LOAD_MAKES_FAILED,
            year=year,
        )

    async def _load_models(self, year: str, make: str) -> None:
        await self._load_options(
            FilterField.MODEL,
            TARGET_MODELS,
            lambda: self._catalog_gateway.get_models(make, year or None),
            "get_models",
            UserMessagesEN.LOAD_MODELS_FAILED,
            year=year,
            make=make,
        )

    async def _load_options(
        self,
        field: FilterField,
        target: str,
        fetch: Callable[[], Awaitable[list[OptionItem]]],
        backend_action: str,
        failure_message: str,
        **filters: str,
    ) -> None:
        """
        Fetch an option list and repopulate its select.

        The previous contents stay in place on failure, and a response is
        dropped if a newer request for the same select was issued meanwhile.
        """
        ticket = self._sequencer.issue(target)

        try:
            options = await fetch()
        except VehicleCatalogError as err:
            self._fail(backend_action, err, failure_message)
            return

        if not self._sequencer.is_current(target, ticket):
            self._log_stale(target, ticket)
            return

        select = self._view.get_select(field)
        self._view.set_select(select.repopulate(option.name for option in options))
        self._log(
            "options_loaded",
            field=field.value,
            filters=filters,
            options_count=len(options),
        )

    def _log_stale(self, target: str, ticket: int) -> None:
        self._stale_targets.add(target)
        self._log(
            "stale_response_dropped",
            target=target,
            ticket=ticket,
            latest_ticket=self._sequencer.latest(target),
        )
