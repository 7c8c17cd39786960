"""Stock API connection settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from stock_mcp.normalization import parse_float

DEFAULT_BASE_URL = "https://stock-api.dealerk.com"
DEFAULT_COUNTRY = "it"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass
class StockAPISettings:
    """Credentials and endpoint for the Stock API.

    Built once at the edge and handed to the client; nothing below the server
    module reads the process environment.
    """
    api_key: str = ""
    country: str = DEFAULT_COUNTRY
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> StockAPISettings:
        timeout = parse_float(os.environ.get("STOCK_API_TIMEOUT"))
        return cls(
            api_key=os.environ.get("STOCK_API_KEY", "").strip(),
            country=os.environ.get("STOCK_API_COUNTRY", "").strip() or DEFAULT_COUNTRY,
            base_url=(
                os.environ.get("STOCK_API_BASE_URL", "").strip() or DEFAULT_BASE_URL
            ).rstrip("/"),
            timeout=timeout if timeout and timeout > 0 else DEFAULT_TIMEOUT_SECONDS,
        )

    @property
    def masked_key(self) -> str:
        if not self.api_key:
            return "NOT SET"
        return f"{self.api_key[:8]}..."
