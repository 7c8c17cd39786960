"""Shared normalization and formatting helpers for upstream vehicle records.

Single source of truth — imported by ``discovery.results`` (display records),
``discovery.facets`` (facet counts) and ``config`` (numeric env values).
"""

from __future__ import annotations

from typing import Any

from stock_mcp.constants import CURRENCY_SYMBOL, MILEAGE_UNIT


def clean_numeric_string(raw: str) -> str:
    """Keep only digits, ``'.'``, and ``'-'``."""
    return "".join(c for c in raw if c.isdigit() or c in {".", "-"})


def parse_price(value: Any) -> float | None:
    """Best-effort price parsing.  Returns ``None`` for unparseable input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        cleaned = clean_numeric_string(stripped)
        if not cleaned:
            return None
        try:
            return float(cleaned)
        except ValueError:
            return None
    return None


def parse_int(value: Any) -> int | None:
    """Best-effort integer parsing.  Returns ``None`` for unparseable input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        parsed = parse_price(stripped)
        if parsed is None:
            return None
        return int(parsed)
    return None


def parse_float(value: Any) -> float | None:
    """Best-effort float parsing that preserves sign."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return float(stripped)
        except ValueError:
            return None
    return None


def format_grouped(value: float) -> str:
    """Group thousands with commas; keep up to 3 fraction digits, trimmed."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_price(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{format_grouped(value)}"


def format_mileage(value: float, *, spaced: bool = True) -> str:
    separator = " " if spaced else ""
    return f"{format_grouped(value)}{separator}{MILEAGE_UNIT}"


def vehicle_key(vehicle: dict[str, Any]) -> Any:
    """Deduplication identity: ``vehicleId``, falling back to ``id``."""
    return vehicle.get("vehicleId") or vehicle.get("id")


def display_id(vehicle: dict[str, Any]) -> Any:
    """Identifier shown to users: ``id``, falling back to ``vehicleId``."""
    return vehicle.get("id") or vehicle.get("vehicleId")
