"""Dependency injection factory functions."""

from typing import Optional

from safequote.adapters.outbound.admin_ajax.admin_ajax_vehicle_catalog_gateway import (
    AdminAjaxVehicleCatalogGateway,
)
from safequote.adapters.outbound.events.in_memory_event_bus import InMemoryEventBus
from safequote.adapters.outbound.notifications.logging_notifier import LoggingNotifier
from safequote.adapters.outbound.notifications.noop_notifier import NoOpNotifier
from safequote.adapters.outbound.rendering.jinja_results_renderer import JinjaResultsRenderer
from safequote.application.dtos.search import VehicleSearchCompleted
from safequote.application.ports.event_publisher import EventPublisher
from safequote.application.ports.filter_view import FilterView
from safequote.application.ports.notifier import Notifier
from safequote.application.ports.results_renderer import ResultsRenderer
from safequote.application.ports.vehicle_catalog_gateway import VehicleCatalogGateway
from safequote.application.use_cases.filter_sync_controller import FilterSyncController
from safequote.application.use_cases.request_sequencer import (
    RequestSequencer,
    RequestSequencerRegistry,
)
from safequote.domain.value_objects.ajax_context import AjaxContext
from safequote.infrastructure.config.settings import settings
from safequote.infrastructure.logging.logger import log_event


def create_ajax_context(nonce: Optional[str] = None) -> AjaxContext:
    """
    Factory function to create the admin-ajax context.

    Args:
        nonce: Nonce supplied by the page (defaults to settings.ajax_nonce)

    Returns:
        AjaxContext instance
    """
    return AjaxContext(ajax_url=settings.ajax_url, nonce=nonce or settings.ajax_nonce or None)


def create_vehicle_catalog_gateway(context: AjaxContext) -> VehicleCatalogGateway:
    """
    Factory function to create vehicle catalog gateway.

    Returns:
        VehicleCatalogGateway instance
    """
    return AdminAjaxVehicleCatalogGateway(context, timeout_seconds=settings.request_timeout_seconds)


def create_results_renderer() -> ResultsRenderer:
    """
    Factory function to create results renderer.

    Returns:
        ResultsRenderer instance
    """
    return JinjaResultsRenderer()


def create_notifier() -> Notifier:
    """
    Factory function to create notifier.

    Returns:
        Notifier instance (logging in debug mode, no-op otherwise)
    """
    if settings.debug_mode:
        return LoggingNotifier()
    return NoOpNotifier()


def create_event_bus() -> InMemoryEventBus:
    """
    Factory function to create the event bus with the default subscribers.

    Returns:
        InMemoryEventBus instance
    """
    bus = InMemoryEventBus()

    def _log_search_completed(event: VehicleSearchCompleted) -> None:
        log_event(
            "events",
            "vehicle_search_completed",
            year=event.year,
            make=event.make,
            model=event.model,
            min_safety_rating=event.min_safety_rating,
            vehicles_count=len(event.vehicles),
        )

    bus.subscribe(VehicleSearchCompleted, _log_search_completed)
    return bus


def create_sequencer_registry() -> RequestSequencerRegistry:
    """
    Factory function to create the per-page request sequencer registry.

    Returns:
        RequestSequencerRegistry instance
    """
    return RequestSequencerRegistry(max_pages=settings.max_tracked_pages)


def create_filter_sync_controller(
    view: FilterView,
    context: AjaxContext,
    event_publisher: Optional[EventPublisher] = None,
    sequencer: Optional[RequestSequencer] = None,
) -> FilterSyncController:
    """
    Factory function to create FilterSyncController with dependencies.

    Args:
        view: Filter panel the controller drives
        context: admin-ajax URL and nonce
        event_publisher: Optional publisher for search events
        sequencer: Optional sequencer shared by the requests of one page

    Returns:
        FilterSyncController instance
    """
    return FilterSyncController(
        create_vehicle_catalog_gateway(context),
        view,
        create_results_renderer(),
        context,
        event_publisher=event_publisher,
        notifier=create_notifier(),
        logger=log_event,
        sequencer=sequencer,
    )
