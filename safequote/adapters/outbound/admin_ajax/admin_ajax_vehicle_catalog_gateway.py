"""WordPress admin-ajax vehicle catalog gateway adapter."""

import asyncio
import json
from typing import Any, Optional

import aiohttp
from pydantic import ValidationError

from safequote.application.dtos.option import OptionItem
from safequote.application.dtos.vehicle import Vehicle
from safequote.application.ports.vehicle_catalog_gateway import (
    VehicleCatalogError,
    VehicleCatalogGateway,
)
from safequote.domain.value_objects.ajax_context import AjaxContext
from safequote.infrastructure.config.settings import settings
from safequote.infrastructure.logging.logger import (
    log_fetch_failure,
    log_option_fetch,
    log_vehicle_search,
)

_HEADERS = {"Accept": "application/json"}


class AdminAjaxVehicleCatalogGateway(VehicleCatalogGateway):
    """Calls the theme's admin-ajax actions (GET for listings, POST for search)."""

    def __init__(self, context: AjaxContext, timeout_seconds: Optional[int] = None) -> None:
        """
        Initialize admin-ajax gateway.

        Args:
            context: admin-ajax URL and nonce
            timeout_seconds: Request timeout (defaults to settings.request_timeout_seconds)
        """
        self._context = context
        self._timeout = aiohttp.ClientTimeout(
            total=timeout_seconds or settings.request_timeout_seconds
        )

    async def get_years(self, make: Optional[str] = None) -> list[OptionItem]:
        """Get model years, optionally narrowed by make."""
        return await self._fetch_options("get_years", {"make": make} if make else {})

    async def get_makes(self, year: Optional[str] = None) -> list[OptionItem]:
        """Get makes, optionally narrowed by year."""
        return await self._fetch_options("get_makes", {"year": year} if year else {})

    async def get_models(self, make: str, year: Optional[str] = None) -> list[OptionItem]:
        """Get models of a make, optionally narrowed by year."""
        if not make:
            raise VehicleCatalogError("get_models requires a make")
        params = {"make": make}
        if year:
            params["year"] = year
        return await self._fetch_options("get_models", params)

    async def search_vehicles(self, params: dict[str, str]) -> list[Vehicle]:
        """
        Search vehicles with a url-encoded POST.

        Args:
            params: Search parameters (already stripped of empty values)

        Returns:
            Vehicles in backend order (malformed rows are logged and skipped)

        Raises:
            VehicleCatalogError: On transport errors or unusable payloads
        """
        payload = await self._post_form(self._with_auth("search_vehicles", params))
        data = self._unwrap("search_vehicles", payload)

        if not isinstance(data, dict) or not isinstance(data.get("vehicles"), list):
            raise VehicleCatalogError("search_vehicles response is missing data.vehicles")

        vehicles = []
        skipped = 0
        for row in data["vehicles"]:
            try:
                vehicles.append(Vehicle.model_validate(row))
            except ValidationError as err:
                skipped += 1
                log_fetch_failure(
                    "search_vehicles",
                    "malformed vehicle row skipped",
                    vehicle_id=row.get("id") if isinstance(row, dict) else None,
                    details=str(err.errors(include_url=False)),
                )

        log_vehicle_search(params, len(vehicles), skipped_rows=skipped)
        return vehicles

    async def _fetch_options(self, action: str, params: dict[str, str]) -> list[OptionItem]:
        payload = await self._get_json(self._with_auth(action, params))
        data = self._unwrap(action, payload)

        if not isinstance(data, list):
            raise VehicleCatalogError(f"{action} response data is not a list")

        options = []
        for row in data:
            if not isinstance(row, dict):
                continue
            name = row.get("name")
            if name is None or isinstance(name, bool) or not str(name).strip():
                continue
            options.append(OptionItem(name=name.strip() if isinstance(name, str) else name))

        log_option_fetch(action, params, options_count=len(options))
        return options

    def _with_auth(self, action: str, params: dict[str, str]) -> dict[str, str]:
        return {"action": action, "nonce": self._context.nonce or "", **params}

    def _unwrap(self, action: str, payload: Any) -> Any:
        """
        Extract `data` from a wp_send_json_success envelope.

        Raises:
            VehicleCatalogError: If success is not true or data is absent
        """
        if not isinstance(payload, dict) or payload.get("success") is not True:
            log_fetch_failure(action, "unsuccessful response")
            raise VehicleCatalogError(f"{action} returned an unsuccessful response")
        if payload.get("data") is None:
            log_fetch_failure(action, "missing data")
            raise VehicleCatalogError(f"{action} response has no data")
        return payload["data"]

    async def _get_json(self, params: dict[str, str]) -> Any:
        action = params.get("action", "")
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(
                    self._context.ajax_url, params=params, headers=_HEADERS
                ) as resp:
                    return await self._read_json(action, resp)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            log_fetch_failure(action, repr(err))
            raise VehicleCatalogError(f"{action} request failed: {err!r}") from err

    async def _post_form(self, data: dict[str, str]) -> Any:
        action = data.get("action", "")
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                # A plain dict body is sent as application/x-www-form-urlencoded
                async with session.post(self._context.ajax_url, data=data, headers=_HEADERS) as resp:
                    return await self._read_json(action, resp)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            log_fetch_failure(action, repr(err))
            raise VehicleCatalogError(f"{action} request failed: {err!r}") from err

    @staticmethod
    async def _read_json(action: str, resp: aiohttp.ClientResponse) -> Any:
        text = await resp.text()
        if resp.status >= 400:
            log_fetch_failure(action, f"HTTP {resp.status}")
            raise VehicleCatalogError(f"{action} HTTP {resp.status} :: {text[:200]}")
        try:
            return json.loads(text)
        except ValueError as err:
            log_fetch_failure(action, "invalid JSON")
            raise VehicleCatalogError(f"{action} JSON parse error :: {text[:200]}") from err
