"""Facet breakdown parsing and refinement suggestions."""

from __future__ import annotations

from typing import Any

from stock_mcp.constants import FACET_CATEGORIES, MAX_SUGGESTIONS
from stock_mcp.normalization import parse_int

_TOP_MAKES = 3
_MIN_MAKE_COUNT = 5
_TOP_FUELS = 2
_MIN_FUEL_COUNT = 10
_TOP_BODY_TYPES = 2
_MIN_BODY_TYPE_COUNT = 10

_PRICE_SUGGESTIONS = (
    'Add "under 25000" for budget-friendly options',
    'Add "over 30000" for premium vehicles',
)


def _facet_counts(entries: list[Any]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for item in entries:
        if not isinstance(item, dict):
            continue
        value = item.get("value")
        count = parse_int(item.get("count"))
        if value is None or value == "" or count is None:
            continue
        counts.setdefault(str(value), count)
    return counts


def parse_facet_breakdown(facet_results: Any) -> dict[str, dict[str, int]]:
    """Turn upstream ``facetResults`` into ``{category: {value: count}}``.

    Only ``type``, ``fuelType``, ``make`` and ``bodyType`` are read.  A
    category is present only when its facet list is non-empty, so callers
    check membership before iterating.
    """
    breakdown: dict[str, dict[str, int]] = {}
    if not isinstance(facet_results, dict):
        return breakdown
    for facet_key, category in FACET_CATEGORIES.items():
        entries = facet_results.get(facet_key)
        if not isinstance(entries, list) or not entries:
            continue
        counts = _facet_counts(entries)
        if counts:
            breakdown[category] = counts
    return breakdown


def _ranked(
    counts: dict[str, int] | None,
    *,
    top: int,
    min_count: int | None = None,
) -> list[tuple[str, int]]:
    if not counts:
        return []
    items = list(counts.items())
    if min_count is not None:
        items = [(k, v) for k, v in items if v > min_count]
    # sorted() is stable: ties keep upstream facet order.
    return sorted(items, key=lambda kv: kv[1], reverse=True)[:top]


def suggest_refinements(
    breakdown: dict[str, dict[str, int]],
    current_filters: dict[str, Any] | None = None,
) -> list[str]:
    """Up to four next-query hints, most impactful first."""
    filters = current_filters or {}
    suggestions: list[str] = []

    if not filters.get("make"):
        for make, count in _ranked(breakdown.get("makes"), top=_TOP_MAKES):
            if count > _MIN_MAKE_COUNT:
                suggestions.append(f'Try "{make}" for {count}+ {make} vehicles')

    if not filters.get("fuel"):
        for fuel, count in _ranked(
            breakdown.get("fuel_types"), top=_TOP_FUELS, min_count=_MIN_FUEL_COUNT
        ):
            suggestions.append(
                f'Filter by "{fuel}" for {count} {fuel.lower()} vehicles'
            )

    for body_type, count in _ranked(
        breakdown.get("body_types"), top=_TOP_BODY_TYPES, min_count=_MIN_BODY_TYPE_COUNT
    ):
        suggestions.append(
            f'Search "{body_type}" for {count} {body_type.lower()} options'
        )

    if not filters.get("min_price") and not filters.get("max_price"):
        suggestions.extend(_PRICE_SUGGESTIONS)

    return suggestions[:MAX_SUGGESTIONS]
