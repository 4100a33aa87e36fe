"""
Lazy DI container — singleton access to clients and services.

Each getter builds its object once per process. A getter that raises
(for example a ConfigurationError from missing Typesense credentials) caches
nothing, so the error surfaces again on the next request instead of being
hidden behind a half-built singleton.
"""

from functools import lru_cache
from typing import Optional

from storefront_discovery.core.config import settings
from storefront_discovery.clients.typesense_client import (
    CredentialKind,
    TypesenseClient,
    build_search_client,
)
from storefront_discovery.clients.shopify_client import ShopifyStorefrontClient
from storefront_discovery.clients.gemini_client import GeminiClient
from storefront_discovery.services.search_service import SearchService
from storefront_discovery.services.suggestion_service import SuggestionService
from storefront_discovery.services.history_expander import HistoryExpander
from storefront_discovery.utils.viewed_handles_cookie import ViewedHandlesCookie


# -- Clients ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_search_client() -> TypesenseClient:
    return build_search_client(CredentialKind.SEARCH_ONLY)


@lru_cache(maxsize=1)
def get_storefront_client() -> ShopifyStorefrontClient:
    return ShopifyStorefrontClient(settings)


@lru_cache(maxsize=1)
def get_gemini_client() -> Optional[GeminiClient]:
    if not settings.gemini_api_key:
        return None
    return GeminiClient(api_key=settings.gemini_api_key, model=settings.gemini_model)


# -- Services --------------------------------------------------------------

@lru_cache(maxsize=1)
def get_search_service() -> SearchService:
    return SearchService(client_provider=get_search_client, collection=settings.typesense_collection)


@lru_cache(maxsize=1)
def get_suggestion_service() -> SuggestionService:
    return SuggestionService(
        client_provider=get_search_client,
        generator=get_gemini_client(),
        collection=settings.typesense_collection,
    )


@lru_cache(maxsize=1)
def get_history_expander() -> HistoryExpander:
    return HistoryExpander(get_storefront_client(), timeout=settings.catalog_timeout_seconds)


@lru_cache(maxsize=1)
def get_viewed_handles_cookie() -> ViewedHandlesCookie:
    return ViewedHandlesCookie(secrets=settings.session_secrets, secure=settings.history_cookie_secure)
