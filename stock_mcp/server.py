"""Stock API MCP server — FastMCP entry point for vehicle discovery search."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent

from stock_mcp.config import StockAPISettings
from stock_mcp.models import SearchRequest
from stock_mcp.tools.search import search_vehicles_impl

# Load .env from project root (no extra dependency)
_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"
if _ENV_FILE.is_file():
    for line in _ENV_FILE.read_text().splitlines():
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            k, _, v = line.partition("=")
            os.environ.setdefault(k.strip(), v.strip())

mcp = FastMCP("stock-api-mcp")
logger = logging.getLogger(__name__)

_settings_override: StockAPISettings | None = None


def set_settings_override(settings: StockAPISettings | None) -> None:
    """Inject fixed Stock API settings (e.g. for testing)."""
    global _settings_override  # noqa: PLW0603
    _settings_override = settings


def _get_settings() -> StockAPISettings:
    if _settings_override is not None:
        return _settings_override
    return StockAPISettings.from_env()


# ── Tool registrations ──────────────────────────────────────────────


@mcp.tool()
async def search_vehicles(
    query: str = "",
    make: str = "",
    fuel: str = "",
    condition: str = "",
    minPrice: float | None = None,  # noqa: N803
    maxPrice: float | None = None,  # noqa: N803
    limit: int = 10,
    raw: bool = False,
) -> CallToolResult:
    """Discover vehicle inventory with an overview and sample listings.

    Shows total counts by condition, fuel, make and body type plus up to 15
    representative vehicles and refinement suggestions.

    query: natural language description (e.g. 'BMW diesel under 30000')
    make: vehicle make/brand (e.g. BMW, Fiat, Audi)
    fuel: DIESEL, PETROL, ELECTRIC, HYBRID
    condition: NEW, USED, KM0
    minPrice / maxPrice: price bounds in EUR
    limit: number of vehicles to show (default 10, max 50)
    """
    request = SearchRequest(
        query=query or None,
        make=make or None,
        fuel=fuel or None,
        condition=condition or None,
        min_price=minPrice,
        max_price=maxPrice,
        limit=limit,
    )
    outcome = await search_vehicles_impl(request, settings=_get_settings(), raw=raw)
    return CallToolResult(
        content=[TextContent(type="text", text=outcome.text)],
        isError=outcome.is_error,
    )


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("STOCK_MCP_LOG_LEVEL", "INFO").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = _get_settings()
    logger.info(
        "Stock API MCP server starting (country=%s, base_url=%s, api_key=%s)",
        settings.country,
        settings.base_url,
        settings.masked_key,
    )
    if not settings.api_key:
        logger.error("STOCK_API_KEY is required")
        sys.exit(1)
    mcp.run()


if __name__ == "__main__":
    main()
