"""Async Stock API client (single attempt, no cache)."""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from stock_mcp import __version__
from stock_mcp.config import StockAPISettings

logger = logging.getLogger(__name__)

SEARCH_PATH = "/classified/search"


class StockAPIClientError(RuntimeError):
    """Raised for Stock API request/config errors with structured metadata."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status = status
        self.details = details or {}


def _format_param(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class StockAPIClient:
    """Async client for the Stock API classified search endpoint."""

    def __init__(self, settings: StockAPISettings) -> None:
        self.settings = settings
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> StockAPIClient:
        if not self.settings.api_key:
            raise StockAPIClientError(
                "STOCK_API_KEY is not configured.",
                code="MISSING_API_KEY",
            )
        self.session = aiohttp.ClientSession(
            headers={
                "Accept": "application/json",
                "User-Agent": f"Stock-API-MCP/{__version__}",
            },
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self.session:
            await self.session.close()

    def _url(self, path: str) -> str:
        s = self.settings
        return f"{s.base_url}/{s.country}/{s.api_key}{path}"

    def _masked_url(self, path: str) -> str:
        s = self.settings
        return f"{s.base_url}/{s.country}/{s.masked_key}{path}"

    async def _request(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        if not self.session:
            raise RuntimeError("Client not entered as context manager")

        query = {k: _format_param(v) for k, v in (params or {}).items()}
        masked = self._masked_url(path)
        logger.debug("Calling Stock API: %s params=%s", masked, query)

        try:
            async with self.session.get(
                self._url(path),
                params=query,
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout),
            ) as resp:
                raw_text = await resp.text()
                payload: Any
                if raw_text:
                    try:
                        payload = json.loads(raw_text)
                    except json.JSONDecodeError:
                        payload = {"raw": raw_text}
                else:
                    payload = {}

                if resp.status >= 400:
                    raise StockAPIClientError(
                        f"API request failed: {resp.status} {resp.reason or ''}".rstrip(),
                        code="STOCK_API_HTTP_ERROR",
                        status=resp.status,
                        details={"url": masked},
                    )

                logger.debug("Stock API response: %.200s", raw_text)
                return payload
        except StockAPIClientError:
            raise
        except TimeoutError as exc:
            raise StockAPIClientError(
                "Stock API request timed out.",
                code="TIMEOUT",
                details={"url": masked, "params": query},
            ) from exc
        except aiohttp.ClientError as exc:
            logger.error("Stock API client error (%s): %s", path, exc)
            raise StockAPIClientError(
                f"Network error calling Stock API: {exc}",
                code="NETWORK_ERROR",
                details={"url": masked, "params": query, "error": str(exc)},
            ) from exc

    async def search(self, query: dict[str, Any]) -> dict[str, Any]:
        """Run a classified search and return the raw response envelope."""
        data = await self._request(SEARCH_PATH, params=query)
        return data if isinstance(data, dict) else {"data": data}
