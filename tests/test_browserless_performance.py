# tests/test_browserless_performance.py
"""Tests for the Browserless performance API client."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from landing_analyzer.exceptions import AuditFailure
from landing_analyzer.external.browserless_performance import BrowserlessPerformanceAPI


def mock_client(response=None, error=None):
    """Patchable httpx.AsyncClient class whose post returns response or raises error."""
    client = MagicMock()
    client.post = AsyncMock(return_value=response, side_effect=error)
    client_cls = MagicMock()
    client_cls.return_value.__aenter__ = AsyncMock(return_value=client)
    client_cls.return_value.__aexit__ = AsyncMock(return_value=False)
    return client_cls, client


def json_response(data):
    response = MagicMock()
    response.raise_for_status = MagicMock()
    response.json = MagicMock(return_value=data)
    return response


class TestBrowserlessPerformanceAPI:
    """Test suite for BrowserlessPerformanceAPI."""

    @pytest.fixture
    def api(self):
        """Create a client with a test token."""
        return BrowserlessPerformanceAPI(token="test-token", timeout=5)

    def test_payload(self, api):
        """Test the request body asks for a desktop performance audit."""
        payload = api.build_payload("https://example.com")

        assert payload["url"] == "https://example.com"
        settings = payload["config"]["settings"]
        assert settings["onlyCategories"] == ["performance"]
        assert settings["formFactor"] == "desktop"
        assert settings["screenEmulation"]["width"] == 1920

    @pytest.mark.asyncio
    async def test_run_audit(self, api):
        """Test a successful audit returns the Lighthouse result."""
        lhr = {"audits": {}, "categories": {"performance": {"score": 0.8}}}
        client_cls, client = mock_client(json_response(lhr))

        with patch("landing_analyzer.external.browserless_performance.httpx.AsyncClient", client_cls):
            result = await api.run_audit("https://example.com")

        assert result == lhr
        kwargs = client.post.call_args.kwargs
        assert kwargs["params"] == {"token": "test-token"}
        assert kwargs["json"]["url"] == "https://example.com"

    @pytest.mark.asyncio
    async def test_timeout(self, api):
        """Test that a timeout raises AuditFailure."""
        client_cls, _ = mock_client(error=httpx.ReadTimeout("timed out"))

        with patch("landing_analyzer.external.browserless_performance.httpx.AsyncClient", client_cls):
            with pytest.raises(AuditFailure, match="timeout"):
                await api.run_audit("https://example.com")

    @pytest.mark.asyncio
    async def test_http_error(self, api):
        """Test that an error status raises AuditFailure."""
        request = httpx.Request("POST", api.api_url)
        response = MagicMock()
        response.raise_for_status = MagicMock(side_effect=httpx.HTTPStatusError(
            "server error", request=request, response=httpx.Response(500, text="boom", request=request)
        ))
        client_cls, _ = mock_client(response)

        with patch("landing_analyzer.external.browserless_performance.httpx.AsyncClient", client_cls):
            with pytest.raises(AuditFailure, match="500"):
                await api.run_audit("https://example.com")

    @pytest.mark.asyncio
    async def test_response_without_audits(self, api):
        """Test that an unusable body raises AuditFailure."""
        client_cls, _ = mock_client(json_response({"error": "quota"}))

        with patch("landing_analyzer.external.browserless_performance.httpx.AsyncClient", client_cls):
            with pytest.raises(AuditFailure, match="no audits"):
                await api.run_audit("https://example.com")

    @pytest.mark.asyncio
    async def test_connection_error(self, api):
        """Test that transport errors raise AuditFailure."""
        client_cls, _ = mock_client(error=httpx.ConnectError("connection refused"))

        with patch("landing_analyzer.external.browserless_performance.httpx.AsyncClient", client_cls):
            with pytest.raises(AuditFailure, match="connection refused"):
                await api.run_audit("https://example.com")
