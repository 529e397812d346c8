"""Unit tests for AdminAjaxVehicleCatalogGateway."""

from unittest.mock import AsyncMock, patch

import pytest

from safequote.adapters.outbound.admin_ajax.admin_ajax_vehicle_catalog_gateway import (
    AdminAjaxVehicleCatalogGateway,
)
from safequote.application.ports.vehicle_catalog_gateway import VehicleCatalogError
from safequote.domain.value_objects.ajax_context import AjaxContext


@pytest.fixture
def gateway() -> AdminAjaxVehicleCatalogGateway:
    """Create gateway with a nonce."""
    context = AjaxContext(ajax_url="https://example.test/wp-admin/admin-ajax.php", nonce="n0nce")
    return AdminAjaxVehicleCatalogGateway(context, timeout_seconds=5)


@pytest.mark.asyncio
async def test_get_years_sends_action_and_nonce(gateway):
    """Test unfiltered years request parameters."""
    payload = {"success": True, "data": [{"name": 2025}, {"name": 2024}]}
    with patch.object(gateway, "_get_json", AsyncMock(return_value=payload)) as get_json:
        years = await gateway.get_years()

    get_json.assert_awaited_once_with({"action": "get_years", "nonce": "n0nce"})
    assert [item.name for item in years] == ["2025", "2024"]


@pytest.mark.asyncio
async def test_get_makes_narrowed_by_year(gateway):
    """Test the year filter is forwarded."""
    payload = {"success": True, "data": [{"name": "Honda"}, {"name": "Toyota"}]}
    with patch.object(gateway, "_get_json", AsyncMock(return_value=payload)) as get_json:
        makes = await gateway.get_makes("2024")

    get_json.assert_awaited_once_with({"action": "get_makes", "nonce": "n0nce", "year": "2024"})
    assert [item.name for item in makes] == ["Honda", "Toyota"]


@pytest.mark.asyncio
async def test_get_models_with_make_and_year(gateway):
    """Test models request carries make and year."""
    payload = {"success": True, "data": [{"name": "Camry"}]}
    with patch.object(gateway, "_get_json", AsyncMock(return_value=payload)) as get_json:
        await gateway.get_models("Toyota", "2024")

    get_json.assert_awaited_once_with(
        {"action": "get_models", "nonce": "n0nce", "make": "Toyota", "year": "2024"}
    )


@pytest.mark.asyncio
async def test_get_models_requires_make(gateway):
    """Test models cannot be requested without a make."""
    with patch.object(gateway, "_get_json", AsyncMock()) as get_json:
        with pytest.raises(VehicleCatalogError):
            await gateway.get_models("")

    get_json.assert_not_awaited()


@pytest.mark.asyncio
async def test_blank_option_names_are_skipped(gateway):
    """Test rows without a usable name are dropped."""
    payload = {
        "success": True,
        "data": [{"name": "Kia"}, {"name": ""}, {"name": "  "}, {"label": "x"}, "junk", {"name": None}],
    }
    with patch.object(gateway, "_get_json", AsyncMock(return_value=payload)):
        makes = await gateway.get_makes()

    assert [item.name for item in makes] == ["Kia"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"success": False, "data": "Invalid nonce"},
        {"success": True},
        {"success": True, "data": None},
        {"success": True, "data": {"name": "Kia"}},
        ["not", "an", "envelope"],
    ],
)
async def test_unusable_option_payloads_raise(gateway, payload):
    """Test failed or malformed envelopes raise VehicleCatalogError."""
    with patch.object(gateway, "_get_json", AsyncMock(return_value=payload)):
        with pytest.raises(VehicleCatalogError):
            await gateway.get_years()


@pytest.mark.asyncio
async def test_search_vehicles_posts_form(gateway):
    """Test search posts params with action and nonce and parses vehicles."""
    payload = {
        "success": True,
        "data": {
            "vehicles": [
                {"id": 1, "year": 2024, "make": "Toyota", "model": "Camry", "safety_rating": 5},
                {"id": 2, "year": 2024, "make": "Toyota", "model": "RAV4", "extra": "ignored"},
            ]
        },
    }
    with patch.object(gateway, "_post_form", AsyncMock(return_value=payload)) as post_form:
        vehicles = await gateway.search_vehicles({"make": "Toyota", "minSafetyRating": "4"})

    post_form.assert_awaited_once_with(
        {"action": "search_vehicles", "nonce": "n0nce", "make": "Toyota", "minSafetyRating": "4"}
    )
    assert [vehicle.title for vehicle in vehicles] == ["2024 Toyota Camry", "2024 Toyota RAV4"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"success": False, "data": {"message": "nope"}},
        {"success": True, "data": {}},
        {"success": True, "data": {"vehicles": "none"}},
    ],
)
async def test_unusable_search_payloads_raise(gateway, payload):
    """Test failed or malformed search responses raise VehicleCatalogError."""
    with patch.object(gateway, "_post_form", AsyncMock(return_value=payload)):
        with pytest.raises(VehicleCatalogError):
            await gateway.search_vehicles({})


@pytest.mark.asyncio
async def test_missing_nonce_sends_empty_value():
    """Test requests without a nonce still carry the nonce key."""
    gateway = AdminAjaxVehicleCatalogGateway(AjaxContext(ajax_url="https://example.test/ajax"))
    payload = {"success": True, "data": []}
    with patch.object(gateway, "_get_json", AsyncMock(return_value=payload)) as get_json:
        assert await gateway.get_years("Kia") == []

    get_json.assert_awaited_once_with({"action": "get_years", "nonce": "", "make": "Kia"})


@pytest.mark.asyncio
async def test_numeric_model_names_are_kept(gateway):
    """Test a numeric model (Chrysler 300) does not break the search."""
    payload = {
        "success": True,
        "data": {
            "vehicles": [
                {"id": 1, "year": 2024, "make": "Toyota", "model": "Camry", "safety_rating": 5},
                {"id": 2, "year": 2023, "make": "Chrysler", "model": 300, "safety_rating": 4},
            ]
        },
    }
    with patch.object(gateway, "_post_form", AsyncMock(return_value=payload)):
        vehicles = await gateway.search_vehicles({})

    assert [vehicle.title for vehicle in vehicles] == ["2024 Toyota Camry", "2023 Chrysler 300"]


@pytest.mark.asyncio
async def test_malformed_vehicle_row_is_skipped(gateway):
    """Test one unusable row is logged and the valid rows are still returned."""
    payload = {
        "success": True,
        "data": {
            "vehicles": [
                {"id": 1, "year": 2024, "make": "Toyota", "model": "Camry"},
                {"id": 2, "make": ["not", "a", "string"]},
                "junk",
                {"id": 3, "year": 2024, "make": "Honda", "model": "Accord"},
            ]
        },
    }
    with patch.object(gateway, "_post_form", AsyncMock(return_value=payload)), patch(
        "safequote.adapters.outbound.admin_ajax.admin_ajax_vehicle_catalog_gateway"
        ".log_fetch_failure"
    ) as log_fetch_failure:
        vehicles = await gateway.search_vehicles({})

    assert [vehicle.title for vehicle in vehicles] == ["2024 Toyota Camry", "2024 Honda Accord"]
    assert log_fetch_failure.call_count == 2
    assert log_fetch_failure.call_args_list[0].kwargs["vehicle_id"] == 2
