"""
Pytest configuration and shared fixtures for storefront discovery tests.

Provides mocked upstream clients, a test cookie codec, sample index data,
and a FastAPI test client with container dependencies overridden.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient


# ---------------------------------------------------------------------------
# Settings / environment
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no real credentials)."""
    from storefront_discovery.core.config import Settings
    return Settings(
        typesense_collection="products",
        shopify_store_domain="test-store.myshopify.com",
        shopify_storefront_api_token="storefront_test_token",
        shopify_storefront_api_version="2025-04",
        gemini_api_key=None,
        session_secrets=["test-secret"],
        history_cookie_secure=False,
        suggestion_timeout_seconds=1.0,
        catalog_timeout_seconds=2.0,
    )


@pytest.fixture
def typesense_env():
    """A complete Typesense environment mapping."""
    return {
        "TYPESENSE_HOST": "search.test.local",
        "TYPESENSE_PORT": "8108",
        "TYPESENSE_PROTOCOL": "http",
        "TYPESENSE_ADMIN_API_KEY": "admin-key",
        "TYPESENSE_SEARCH_ONLY_API_KEY": "search-key",
    }


# ---------------------------------------------------------------------------
# Clients (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_search_client():
    """Mocked TypesenseClient (HTTP transport only)."""
    client = MagicMock()
    client.search_documents = AsyncMock(return_value={"hits": [], "found": 0})
    return client


@pytest.fixture
def mock_storefront_client():
    """Mocked ShopifyStorefrontClient."""
    client = MagicMock()
    client.call_graphql = AsyncMock(return_value={"data": {}})
    return client


@pytest.fixture
def mock_text_generator():
    """Mocked text-generation capability."""
    generator = MagicMock()
    generator.generate = AsyncMock(return_value="")
    return generator


@pytest.fixture
def cookie_codec():
    """Cookie codec with a test secret; not Secure so TestClient keeps it over http."""
    from storefront_discovery.utils.viewed_handles_cookie import ViewedHandlesCookie
    return ViewedHandlesCookie(secrets=["test-secret"], secure=False)


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_typesense_response():
    """Typesense documents/search response with extra index fields."""
    return {
        "found": 42,
        "page": 1,
        "hits": [
            {
                "document": {
                    "id": "8001",
                    "title": "Lenovo Legion 5 Gaming Laptop",
                    "handle": "lenovo-legion-5",
                    "vendor": "Lenovo",
                    "price": 1299.0,
                    "image": "https://cdn.shopify.com/legion.jpg",
                    "url": "/products/lenovo-legion-5",
                    "available": True,
                    "tags": ["gaming", "laptop"],
                    "sku": "82JW00ABUS",
                },
                "text_match": 578730123365187705,
                "highlights": [],
            },
            {
                "document": {
                    "id": "8002",
                    "title": "Laptop Sleeve 15 inch",
                    "handle": "laptop-sleeve-15",
                },
                "text_match": 578730123365187000,
            },
        ],
    }


@pytest.fixture
def sample_catalog_product():
    """Factory for a Storefront API product node."""
    def _make(handle: str, amount: str = "10.0"):
        return {
            "id": f"gid://shopify/Product/{handle}",
            "handle": handle,
            "title": handle.replace("-", " ").title(),
            "featuredImage": {"url": f"https://cdn.shopify.com/{handle}.jpg", "altText": None},
            "priceRange": {"minVariantPrice": {"amount": amount, "currencyCode": "USD"}},
        }
    return _make


# ---------------------------------------------------------------------------
# FastAPI test client
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_suggestion_service():
    """Mocked SuggestionService."""
    service = MagicMock()
    service.suggest = AsyncMock(return_value=[])
    return service


@pytest.fixture
def client(mock_search_client, mock_storefront_client, mock_suggestion_service, cookie_codec):
    """TestClient with every container dependency pointed at mocks."""
    from storefront_discovery import container
    from storefront_discovery.main import app
    from storefront_discovery.services.history_expander import HistoryExpander
    from storefront_discovery.services.search_service import SearchService

    app.dependency_overrides[container.get_search_service] = lambda: SearchService(
        client_provider=lambda: mock_search_client
    )
    app.dependency_overrides[container.get_suggestion_service] = lambda: mock_suggestion_service
    app.dependency_overrides[container.get_history_expander] = lambda: HistoryExpander(mock_storefront_client)
    app.dependency_overrides[container.get_viewed_handles_cookie] = lambda: cookie_codec

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c

    app.dependency_overrides.clear()
