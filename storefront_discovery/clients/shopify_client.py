import logging
from typing import Any, Dict, Optional

import httpx

from storefront_discovery.core.config import Settings
from storefront_discovery.core.exceptions import (
    ConfigurationError,
    ConnectionTimeoutError,
    UpstreamError,
)

logger = logging.getLogger("shopify_client")


class ShopifyStorefrontClient:
    """HTTP transport for the Shopify Storefront GraphQL API (read-only catalog)."""

    def __init__(self, settings: Settings) -> None:
        raw_domain = settings.shopify_store_domain
        self._store_domain = self._normalize_store_domain(raw_domain)
        self._token = settings.shopify_storefront_api_token
        self._api_version = settings.shopify_storefront_api_version
        self._default_timeout = settings.catalog_timeout_seconds
        logger.info(f"ShopifyStorefrontClient initialized: domain={self._store_domain} (raw: {raw_domain})")

    @staticmethod
    def _normalize_store_domain(domain: Optional[str]) -> Optional[str]:
        """
        Normalize the storefront domain.

        Handles these formats:
        - "my-store" -> "my-store.myshopify.com"
        - "shop.example.com" -> "shop.example.com" (custom domains are kept)
        - "https://my-store.myshopify.com/" -> "my-store.myshopify.com"
        """
        if not domain:
            return domain

        domain = domain.strip().replace("https://", "").replace("http://", "")
        domain = domain.rstrip("/")

        # A bare store name has no dot
        if "." not in domain:
            domain = f"{domain}.myshopify.com"

        return domain

    def _graphql_url(self) -> str:
        if not self._store_domain:
            raise ConfigurationError("SHOPIFY_STORE_DOMAIN")
        if not self._token:
            raise ConfigurationError("SHOPIFY_STOREFRONT_API_TOKEN")
        return f"https://{self._store_domain}/api/{self._api_version}/graphql.json"

    async def call_graphql(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """POST one GraphQL document and return the decoded body.

        Raises:
            ConfigurationError: domain or token missing.
            ConnectionTimeoutError: the request exceeded ``timeout``.
            UpstreamError: transport failure, HTTP error or GraphQL ``errors``.
        """
        url = self._graphql_url()
        payload = {"query": query, "variables": variables or {}}
        headers = {
            "X-Shopify-Storefront-Access-Token": self._token or "",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        logger.info("shopify storefront request variables=%s", len(payload["variables"]))

        try:
            async with httpx.AsyncClient(timeout=timeout or self._default_timeout) as client:
                resp = await client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException:
            raise ConnectionTimeoutError("Shopify")
        except httpx.RequestError as e:
            raise UpstreamError("Shopify", f"network error: {e}")

        logger.info("shopify storefront response status=%s", resp.status_code)
        if resp.status_code >= 400:
            raise UpstreamError("Shopify", resp.text, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError:
            raise UpstreamError("Shopify", "response is not valid JSON", status_code=resp.status_code)
        if data.get("errors"):
            raise UpstreamError("Shopify", f"GraphQL error: {data.get('errors')}")
        return data
