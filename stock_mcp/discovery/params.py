"""Map a SearchRequest onto Stock API query parameters."""

from __future__ import annotations

import logging
from typing import Any

from stock_mcp.constants import (
    DEFAULT_LIMIT,
    UPSTREAM_LIMIT_CAP,
    UPSTREAM_LIMIT_MULTIPLIER,
)
from stock_mcp.models import SearchRequest

logger = logging.getLogger(__name__)


def upstream_limit(limit: int | None) -> int:
    return min((limit or DEFAULT_LIMIT) * UPSTREAM_LIMIT_MULTIPLIER, UPSTREAM_LIMIT_CAP)


def build_upstream_query(request: SearchRequest) -> dict[str, Any]:
    """Build the upstream parameter set.

    ``maxPrice`` is deliberately left out: the upstream accepts it but does
    not filter on it, so it is enforced locally by ``filter_by_price``.
    A ``min_price`` of 0 is falsy and therefore not sent.
    """
    params: dict[str, Any] = {}
    if request.make:
        params["make"] = request.make.upper()
    if request.fuel:
        params["fuel"] = request.fuel.upper()
    if request.condition:
        params["condition"] = request.condition.upper()
    if request.min_price:
        params["minPrice"] = request.min_price

    params["limit"] = upstream_limit(request.limit)

    logger.debug("Mapped search parameters: %s", params)
    return params
