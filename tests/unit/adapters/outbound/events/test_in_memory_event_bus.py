"""Unit tests for InMemoryEventBus."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from safequote.adapters.outbound.events.in_memory_event_bus import InMemoryEventBus
from safequote.application.dtos.search import VehicleSearchCompleted


def _event() -> VehicleSearchCompleted:
    return VehicleSearchCompleted(
        year="2024", make="Toyota", model=None, min_safety_rating=0, vehicles=[]
    )


@pytest.mark.asyncio
async def test_publish_calls_sync_and_async_handlers():
    """Test both handler kinds receive the event."""
    bus = InMemoryEventBus()
    sync_handler = MagicMock()
    async_handler = AsyncMock()
    bus.subscribe(VehicleSearchCompleted, sync_handler)
    bus.subscribe(VehicleSearchCompleted, async_handler)
    event = _event()

    await bus.publish(event)

    sync_handler.assert_called_once_with(event)
    async_handler.assert_awaited_once_with(event)


@pytest.mark.asyncio
async def test_unsubscribe_stops_delivery():
    """Test the returned function removes the subscription."""
    bus = InMemoryEventBus()
    handler = MagicMock()
    unsubscribe = bus.subscribe(VehicleSearchCompleted, handler)

    unsubscribe()
    unsubscribe()
    await bus.publish(_event())

    handler.assert_not_called()


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_others():
    """Test a raising handler is logged and the next one still runs."""
    bus = InMemoryEventBus()
    after = MagicMock()
    bus.subscribe(VehicleSearchCompleted, MagicMock(side_effect=RuntimeError("boom")))
    bus.subscribe(VehicleSearchCompleted, after)

    await bus.publish(_event())

    after.assert_called_once()


@pytest.mark.asyncio
async def test_publish_without_subscribers_is_noop():
    """Test publishing with nobody listening."""
    await InMemoryEventBus().publish(_event())
