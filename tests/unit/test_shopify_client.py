"""
Unit tests for the Shopify Storefront GraphQL client.

Tests domain normalization, configuration checks and error mapping.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from storefront_discovery.clients.shopify_client import ShopifyStorefrontClient
from storefront_discovery.core.exceptions import (
    ConfigurationError,
    ConnectionTimeoutError,
    UpstreamError,
)


pytestmark = pytest.mark.unit


def _mock_post(response=None, side_effect=None):
    patcher = patch("storefront_discovery.clients.shopify_client.httpx.AsyncClient")
    MockAsyncClient = patcher.start()
    mock_ctx = AsyncMock()
    mock_ctx.post = AsyncMock(return_value=response, side_effect=side_effect)
    MockAsyncClient.return_value.__aenter__ = AsyncMock(return_value=mock_ctx)
    MockAsyncClient.return_value.__aexit__ = AsyncMock(return_value=False)
    return patcher, MockAsyncClient, mock_ctx


def _response(status_code=200, body=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body if body is not None else {}
    resp.text = text
    return resp


class TestDomainNormalization:

    @pytest.mark.parametrize("raw,expected", [
        ("my-store", "my-store.myshopify.com"),
        ("my-store.myshopify.com", "my-store.myshopify.com"),
        ("https://my-store.myshopify.com/", "my-store.myshopify.com"),
        ("shop.example.com", "shop.example.com"),
        (None, None),
    ])
    def test_normalize(self, raw, expected):
        assert ShopifyStorefrontClient._normalize_store_domain(raw) == expected


class TestCallGraphql:

    @pytest.mark.asyncio
    async def test_posts_query_and_variables(self, mock_settings):
        client = ShopifyStorefrontClient(mock_settings)
        patcher, MockAsyncClient, mock_ctx = _mock_post(_response(body={"data": {"p0": None}}))
        try:
            data = await client.call_graphql("query Q { shop { name } }", {"h0": "shirt"})
        finally:
            patcher.stop()

        assert data == {"data": {"p0": None}}
        args, kwargs = mock_ctx.post.call_args
        assert args[0] == "https://test-store.myshopify.com/api/2025-04/graphql.json"
        assert kwargs["json"] == {"query": "query Q { shop { name } }", "variables": {"h0": "shirt"}}
        assert kwargs["headers"]["X-Shopify-Storefront-Access-Token"] == "storefront_test_token"
        assert MockAsyncClient.call_args.kwargs["timeout"] == 2.0

    @pytest.mark.asyncio
    async def test_timeout_override(self, mock_settings):
        client = ShopifyStorefrontClient(mock_settings)
        patcher, MockAsyncClient, _ = _mock_post(_response(body={"data": {}}))
        try:
            await client.call_graphql("query Q { x }", timeout=0.5)
        finally:
            patcher.stop()
        assert MockAsyncClient.call_args.kwargs["timeout"] == 0.5

    @pytest.mark.asyncio
    async def test_missing_domain(self, mock_settings):
        mock_settings.shopify_store_domain = None
        client = ShopifyStorefrontClient(mock_settings)
        with pytest.raises(ConfigurationError) as exc_info:
            await client.call_graphql("query Q { x }")
        assert exc_info.value.missing_field == "SHOPIFY_STORE_DOMAIN"

    @pytest.mark.asyncio
    async def test_missing_token(self, mock_settings):
        mock_settings.shopify_storefront_api_token = None
        client = ShopifyStorefrontClient(mock_settings)
        with pytest.raises(ConfigurationError) as exc_info:
            await client.call_graphql("query Q { x }")
        assert exc_info.value.missing_field == "SHOPIFY_STOREFRONT_API_TOKEN"

    @pytest.mark.asyncio
    async def test_http_error(self, mock_settings):
        client = ShopifyStorefrontClient(mock_settings)
        patcher, _, _ = _mock_post(_response(status_code=401, text="Unauthorized"))
        try:
            with pytest.raises(UpstreamError) as exc_info:
                await client.call_graphql("query Q { x }")
        finally:
            patcher.stop()
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_graphql_errors(self, mock_settings):
        client = ShopifyStorefrontClient(mock_settings)
        body = {"errors": [{"message": "Field 'nope' doesn't exist"}]}
        patcher, _, _ = _mock_post(_response(body=body))
        try:
            with pytest.raises(UpstreamError) as exc_info:
                await client.call_graphql("query Q { nope }")
        finally:
            patcher.stop()
        assert "GraphQL error" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_timeout(self, mock_settings):
        client = ShopifyStorefrontClient(mock_settings)
        patcher, _, _ = _mock_post(side_effect=httpx.ReadTimeout("slow"))
        try:
            with pytest.raises(ConnectionTimeoutError):
                await client.call_graphql("query Q { x }")
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_network_error(self, mock_settings):
        client = ShopifyStorefrontClient(mock_settings)
        patcher, _, _ = _mock_post(side_effect=httpx.ConnectError("refused"))
        try:
            with pytest.raises(UpstreamError) as exc_info:
                await client.call_graphql("query Q { x }")
        finally:
            patcher.stop()
        assert exc_info.value.service == "Shopify"
