"""Vehicle discovery search tool implementation."""

from __future__ import annotations

import logging
from typing import Any

from stock_mcp.clients.stock_api import StockAPIClient, StockAPIClientError
from stock_mcp.config import StockAPISettings
from stock_mcp.discovery.params import build_upstream_query
from stock_mcp.discovery.pipeline import run_discovery
from stock_mcp.models import SearchOutcome, SearchRequest
from stock_mcp.tools.envelope import build_raw_error, build_raw_response

logger = logging.getLogger(__name__)

_TOOL_NAME = "search_vehicles"


def describe_client_error(exc: StockAPIClientError) -> str:
    """Map an upstream failure onto a fixed, user-facing sentence."""
    status = exc.status
    if exc.code == "MISSING_API_KEY":
        return str(exc)
    if status in (401, 403):
        return "Authentication failed. Please check API configuration."
    if status == 404:
        return "Search endpoint not found. Please check API configuration."
    if status is not None and status >= 500:
        return "Stock API is currently unavailable. Please try again later."
    if not status:
        return "Network error: Unable to connect to Stock API."
    return f"Search failed: {exc}"


def _error_outcome(
    *,
    raw: bool,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> SearchOutcome:
    if not raw:
        return SearchOutcome(message, is_error=True)
    return SearchOutcome(
        build_raw_error(_TOOL_NAME, code=code, message=message, details=details),
        is_error=True,
    )


async def search_vehicles_impl(
    request: SearchRequest,
    *,
    settings: StockAPISettings,
    raw: bool = False,
) -> SearchOutcome:
    """Query the Stock API once and return a discovery report.

    Every failure is converted into an ``is_error`` outcome; an empty result
    is informational, not an error.
    """
    logger.debug("Handling search_vehicles with %s", request)
    try:
        query = build_upstream_query(request)
        async with StockAPIClient(settings) as client:
            payload = await client.search(query)
        result = run_discovery(request, payload)
    except StockAPIClientError as exc:
        logger.error(
            "Stock API search failed (code=%s, status=%s): %s",
            exc.code,
            exc.status,
            exc,
        )
        details: dict[str, Any] = {"code": exc.code}
        if exc.status is not None:
            details["status"] = exc.status
        return _error_outcome(
            raw=raw,
            code=exc.code,
            message=describe_client_error(exc),
            details=details,
        )
    except Exception as exc:
        logger.exception("Unexpected error in %s", _TOOL_NAME)
        return _error_outcome(
            raw=raw,
            code="UNEXPECTED_ERROR",
            message=f"Unexpected error: {exc}",
        )

    if raw:
        return SearchOutcome(
            build_raw_response(_TOOL_NAME, result.as_data_context(request))
        )
    return SearchOutcome(result.render())
