"""Shared constants used across the discovery pipeline and tool modules.

Single source of truth for limits, caps, facet keys and user-facing messages.
"""

from __future__ import annotations

DEFAULT_LIMIT = 10
MAX_LIMIT = 50

# Over-fetch factor: headroom for dedup and local price filtering.
UPSTREAM_LIMIT_MULTIPLIER = 3
UPSTREAM_LIMIT_CAP = 50

# Discovery sample ceiling, applied before the caller's limit.
SAMPLE_CAP = 15

MAX_SUGGESTIONS = 4
MAX_MAKES_SHOWN = 8

DEFAULT_CONDITION = "USED"
CURRENCY_SYMBOL = "€"
MILEAGE_UNIT = "km"
PRICE_ON_REQUEST = "Price on request"

# Upstream facet key -> breakdown category.
FACET_CATEGORIES: dict[str, str] = {
    "type": "conditions",
    "fuelType": "fuel_types",
    "make": "makes",
    "bodyType": "body_types",
}

NO_RESULTS_MESSAGE = "No vehicles found matching your criteria."
