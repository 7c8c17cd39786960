"""Tests for the Stock API client and its settings."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from stock_mcp.clients.stock_api import StockAPIClient, StockAPIClientError
from stock_mcp.config import StockAPISettings

# ── Fixtures ──────────────────────────────────────────────────────


def _mock_response(status: int = 200, body: Any = None, reason: str = "OK") -> AsyncMock:
    mock_ctx = AsyncMock()
    mock_ctx.__aenter__ = AsyncMock(return_value=mock_ctx)
    mock_ctx.__aexit__ = AsyncMock(return_value=False)
    mock_ctx.status = status
    mock_ctx.reason = reason
    text = body if isinstance(body, str) else json.dumps(body or {})
    mock_ctx.text = AsyncMock(return_value=text)
    return mock_ctx


def _client_with(settings: StockAPISettings, response: Any = None, **kwargs) -> StockAPIClient:
    client = StockAPIClient(settings)
    client.session = MagicMock()
    if "side_effect" in kwargs:
        client.session.get = MagicMock(side_effect=kwargs["side_effect"])
    else:
        client.session.get = MagicMock(return_value=response)
    return client


# ── Settings ──────────────────────────────────────────────────────


class TestSettings:
    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.setenv("STOCK_API_KEY", " abcdefghijkl ")
        monkeypatch.delenv("STOCK_API_COUNTRY", raising=False)
        monkeypatch.delenv("STOCK_API_BASE_URL", raising=False)
        monkeypatch.delenv("STOCK_API_TIMEOUT", raising=False)
        settings = StockAPISettings.from_env()
        assert settings.api_key == "abcdefghijkl"
        assert settings.country == "it"
        assert settings.base_url == "https://stock-api.dealerk.com"
        assert settings.timeout == 10.0

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("STOCK_API_KEY", "k")
        monkeypatch.setenv("STOCK_API_COUNTRY", "es")
        monkeypatch.setenv("STOCK_API_BASE_URL", "https://stock.example.test/")
        monkeypatch.setenv("STOCK_API_TIMEOUT", "3.5")
        settings = StockAPISettings.from_env()
        assert settings.country == "es"
        assert settings.base_url == "https://stock.example.test"
        assert settings.timeout == 3.5

    def test_invalid_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("STOCK_API_TIMEOUT", "soon")
        assert StockAPISettings.from_env().timeout == 10.0

    def test_masked_key(self):
        assert StockAPISettings(api_key="abcdefghijkl").masked_key == "abcdefgh..."
        assert StockAPISettings().masked_key == "NOT SET"


# ── Client ────────────────────────────────────────────────────────


class TestStockAPIClient:
    async def test_search_builds_url_and_params(self, settings):
        payload = {"response": {"numResultFound": 3}}
        client = _client_with(settings, _mock_response(body=payload))

        result = await client.search({"make": "BMW", "minPrice": 15000.0, "limit": 30})

        assert result == payload
        args, kwargs = client.session.get.call_args
        assert args[0] == (
            "https://stock-api.dealerk.com/it/test-key-123456/classified/search"
        )
        assert kwargs["params"] == {"make": "BMW", "minPrice": "15000", "limit": "30"}
        assert client.session.get.call_count == 1

    async def test_http_error_carries_status(self, settings):
        client = _client_with(
            settings, _mock_response(503, body="", reason="Service Unavailable")
        )
        with pytest.raises(StockAPIClientError) as exc_info:
            await client.search({"limit": 30})
        assert exc_info.value.status == 503
        assert exc_info.value.code == "STOCK_API_HTTP_ERROR"
        assert "503" in str(exc_info.value)
        assert settings.api_key not in json.dumps(exc_info.value.details)

    async def test_network_error_has_no_status(self, settings):
        client = _client_with(
            settings, side_effect=aiohttp.ClientConnectionError("connection refused")
        )
        with pytest.raises(StockAPIClientError) as exc_info:
            await client.search({"limit": 30})
        assert exc_info.value.status is None
        assert exc_info.value.code == "NETWORK_ERROR"
        # No retry.
        assert client.session.get.call_count == 1

    async def test_timeout(self, settings):
        client = _client_with(settings, side_effect=TimeoutError())
        with pytest.raises(StockAPIClientError) as exc_info:
            await client.search({"limit": 30})
        assert exc_info.value.code == "TIMEOUT"
        assert exc_info.value.status is None

    async def test_non_json_body_degrades(self, settings):
        client = _client_with(settings, _mock_response(body="<html>maintenance</html>"))
        assert await client.search({}) == {"raw": "<html>maintenance</html>"}

    async def test_non_object_json_is_wrapped(self, settings):
        client = _client_with(settings, _mock_response(body=[1, 2]))
        assert await client.search({}) == {"data": [1, 2]}

    async def test_missing_api_key(self):
        with pytest.raises(StockAPIClientError) as exc_info:
            async with StockAPIClient(StockAPISettings(api_key="")):
                pass
        assert exc_info.value.code == "MISSING_API_KEY"

    async def test_requires_context_manager(self, settings):
        with pytest.raises(RuntimeError, match="context manager"):
            await StockAPIClient(settings).search({})

    async def test_context_manager_opens_and_closes_session(self, settings):
        async with StockAPIClient(settings) as client:
            assert isinstance(client.session, aiohttp.ClientSession)
            session = client.session
        assert session.closed
