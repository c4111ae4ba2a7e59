"""
HTTP Client Unit Tests

Tests for the shared, connection-pooled client.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest


class TestHttpClient:
    """Tests for the HTTP client module."""

    def test_get_http_client_returns_singleton(self):
        """Verify that get_http_client returns the same instance."""
        with patch("app.core.http_client._http_client", None), \
                patch("app.core.http_client.httpx.AsyncClient") as client_cls:
            from app.core.http_client import get_http_client

            client1 = get_http_client()
            client2 = get_http_client()

            assert client1 is client2
            client_cls.assert_called_once()

    def test_http_client_has_connection_limits(self):
        """Verify connection pool limits and HTTP/2 are configured."""
        with patch("app.core.http_client._http_client", None), \
                patch("app.core.http_client.httpx.AsyncClient") as client_cls:
            from app.core.http_client import get_http_client

            get_http_client()

            kwargs = client_cls.call_args.kwargs
            assert kwargs["limits"].max_connections == 50
            assert kwargs["limits"].max_keepalive_connections == 10
            assert kwargs["timeout"].connect == 10.0
            assert kwargs["http2"] is True

    @pytest.mark.asyncio
    async def test_close_http_client_resets_instance(self):
        """Verify closing the client releases the global instance."""
        mock_client = MagicMock()
        mock_client.aclose = AsyncMock()

        with patch("app.core.http_client._http_client", mock_client):
            from app.core import http_client

            await http_client.close_http_client()

            mock_client.aclose.assert_awaited_once()
            assert http_client._http_client is None

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        with patch("app.core.http_client._http_client", None):
            from app.core.http_client import close_http_client

            await close_http_client()
