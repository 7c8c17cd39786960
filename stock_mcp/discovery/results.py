"""Normalize, deduplicate and price-filter upstream vehicle records."""

from __future__ import annotations

import logging
from typing import Any

from stock_mcp.constants import DEFAULT_CONDITION, PRICE_ON_REQUEST, SAMPLE_CAP
from stock_mcp.normalization import (
    display_id,
    format_mileage,
    format_price,
    parse_int,
    parse_price,
    vehicle_key,
)

logger = logging.getLogger(__name__)


def _response_section(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        return {}
    response = payload.get("response")
    return response if isinstance(response, dict) else {}


def _record_list(section: dict[str, Any], key: str) -> list[dict[str, Any]]:
    records = section.get(key)
    if not isinstance(records, list):
        return []
    return [r for r in records if isinstance(r, dict)]


def extract_total(payload: Any) -> int | None:
    """Upstream full match count (``numResultFound``), if reported."""
    return parse_int(_response_section(payload).get("numResultFound")) or None


def extract_facets(payload: Any) -> dict[str, Any]:
    facets = _response_section(payload).get("facetResults")
    return facets if isinstance(facets, dict) else {}


def _identity(key: Any) -> tuple[str, Any]:
    """Strict-equality identity: ``1`` matches ``1.0``, ``"1"`` matches neither."""
    if isinstance(key, (int, float)) and not isinstance(key, bool):
        kind = "number"
    else:
        kind = type(key).__name__
    try:
        hash(key)
    except TypeError:
        key = repr(key)
    return kind, key


def dedupe_vehicles(vehicles: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Drop repeated identifiers; the first occurrence wins."""
    seen: set[tuple[str, Any]] = set()
    unique: list[dict[str, Any]] = []
    for vehicle in vehicles:
        key = _identity(vehicle_key(vehicle))
        if key in seen:
            continue
        seen.add(key)
        unique.append(vehicle)
    return unique


def build_title(vehicle: dict[str, Any]) -> str:
    parts = (vehicle.get("make"), vehicle.get("model"), vehicle.get("version"))
    return " ".join(str(p).strip() for p in parts if p and str(p).strip())


def build_summary(vehicle: dict[str, Any]) -> str:
    """One-line ``•``-joined summary; condition shown only when not USED."""
    parts: list[str] = []
    for field in ("year", "make", "model", "fuel"):
        value = vehicle.get(field)
        if value:
            parts.append(str(value))
    mileage = parse_price(vehicle.get("mileage"))
    if mileage:
        parts.append(format_mileage(mileage, spaced=False))
    condition = vehicle.get("condition")
    if condition and condition != DEFAULT_CONDITION:
        parts.append(str(condition))
    return " • ".join(parts)


def to_display_vehicle(vehicle: dict[str, Any]) -> dict[str, Any]:
    price = parse_price(vehicle.get("price"))
    mileage = parse_price(vehicle.get("mileage"))
    formatted: dict[str, Any] = {
        "id": display_id(vehicle),
        "title": build_title(vehicle),
        "make": vehicle.get("make"),
        "model": vehicle.get("model"),
        "version": vehicle.get("version"),
        "year": vehicle.get("year"),
        "price": format_price(price) if price else PRICE_ON_REQUEST,
        "price_number": price or 0,
        "fuel": vehicle.get("fuel"),
        "condition": vehicle.get("condition"),
        "mileage": format_mileage(mileage) if mileage else None,
        "transmission": vehicle.get("transmission"),
        "summary": build_summary(vehicle),
    }
    return {k: v for k, v in formatted.items() if v is not None}


def normalize_results(payload: Any) -> list[dict[str, Any]]:
    """Merge promo + search results into a deduplicated display sample."""
    section = _response_section(payload)
    promo = _record_list(section, "promoResults")
    search = _record_list(section, "searchResults")
    logger.debug("Combining results: %d promo + %d search", len(promo), len(search))

    unique = dedupe_vehicles(promo + search)
    sample = unique[:SAMPLE_CAP]
    logger.debug("Final sample: %d unique -> %d shown", len(unique), len(sample))
    return [to_display_vehicle(v) for v in sample]


def filter_by_price(
    vehicles: list[dict[str, Any]],
    min_price: float | None = None,
    max_price: float | None = None,
) -> list[dict[str, Any]]:
    """Re-apply price bounds locally.  Vehicles without a price count as 0."""
    if not min_price and not max_price:
        return vehicles

    kept = []
    for vehicle in vehicles:
        price = vehicle.get("price_number") or 0
        if min_price and price < min_price:
            continue
        if max_price and price > max_price:
            continue
        kept.append(vehicle)
    logger.debug("Price filtering: %d -> %d vehicles", len(vehicles), len(kept))
    return kept

