"""Shared test fixtures — fixed Stock API settings and payload builders."""

from __future__ import annotations

from typing import Any

import pytest

from stock_mcp.config import StockAPISettings
from stock_mcp.server import set_settings_override

TEST_API_KEY = "test-key-123456"


def make_vehicle(vehicle_id: str, price: float | None = None, **fields: Any) -> dict[str, Any]:
    vehicle: dict[str, Any] = {
        "vehicleId": vehicle_id,
        "make": "FIAT",
        "model": "Panda",
        "year": 2021,
        "fuel": "PETROL",
        "condition": "USED",
    }
    if price is not None:
        vehicle["price"] = price
    vehicle.update(fields)
    return vehicle


def make_payload(
    promo: list[dict[str, Any]] | None = None,
    search: list[dict[str, Any]] | None = None,
    *,
    total: int | None = None,
    facets: dict[str, Any] | None = None,
) -> dict[str, Any]:
    response: dict[str, Any] = {
        "promoResults": promo or [],
        "searchResults": search or [],
        "facetResults": facets or {},
    }
    if total is not None:
        response["numResultFound"] = total
    return {"response": response}


@pytest.fixture()
def settings() -> StockAPISettings:
    return StockAPISettings(api_key=TEST_API_KEY)


@pytest.fixture(autouse=True)
def _inject_settings(settings: StockAPISettings):
    """Keep the server wrapper away from the real environment."""
    set_settings_override(settings)
    yield
    set_settings_override(None)
