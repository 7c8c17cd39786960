"""External API clients."""

from stock_mcp.clients.stock_api import StockAPIClient, StockAPIClientError

__all__ = [
    "StockAPIClient",
    "StockAPIClientError",
]
