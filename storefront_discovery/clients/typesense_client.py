"""
Typesense client — search-index connection built from environment credentials.

Provides:
- build_search_client(kind, env): pure construction from an env mapping,
  choosing admin or search-only credentials
- TypesenseClient.search_documents: one GET /collections/{c}/documents/search
"""
import logging
import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from storefront_discovery.core.constants.search import TYPESENSE_CONNECTION_TIMEOUT
from storefront_discovery.core.exceptions import (
    ConfigurationError,
    ConnectionTimeoutError,
    UpstreamError,
)

logger = logging.getLogger("typesense_client")

API_KEY_HEADER = "X-TYPESENSE-API-KEY"
READ_TIMEOUT = 10.0


class CredentialKind(str, Enum):
    ADMIN = "admin"
    SEARCH_ONLY = "search_only"


class SearchCredentials(BaseModel):
    """Resolved connection settings for one Typesense node."""
    model_config = ConfigDict(frozen=True)

    kind: CredentialKind
    host: str
    port: int = 443
    protocol: str = "https"
    api_key: str
    timeout_seconds: float = TYPESENSE_CONNECTION_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"


def resolve_credentials(kind: CredentialKind, env: Mapping[str, str]) -> SearchCredentials:
    host = (env.get("TYPESENSE_HOST") or "").strip()
    if not host:
        raise ConfigurationError("TYPESENSE_HOST")

    raw_port = env.get("TYPESENSE_PORT") or "443"
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigurationError("TYPESENSE_PORT", f"TYPESENSE_PORT is not a number: {raw_port!r}")

    protocol = env.get("TYPESENSE_PROTOCOL") or "https"
    admin_key = env.get("TYPESENSE_ADMIN_API_KEY")

    if kind == CredentialKind.ADMIN:
        if not admin_key:
            raise ConfigurationError("TYPESENSE_ADMIN_API_KEY")
        api_key = admin_key
    else:
        api_key = env.get("TYPESENSE_SEARCH_ONLY_API_KEY") or admin_key
        if not api_key:
            raise ConfigurationError(
                "TYPESENSE_SEARCH_ONLY_API_KEY",
                "TYPESENSE_SEARCH_ONLY_API_KEY (or TYPESENSE_ADMIN_API_KEY) is not set",
            )

    return SearchCredentials(kind=kind, host=host, port=port, protocol=protocol, api_key=api_key)


def build_search_client(
    kind: CredentialKind = CredentialKind.SEARCH_ONLY,
    env: Optional[Mapping[str, str]] = None,
) -> "TypesenseClient":
    """Build a Typesense client from an env mapping (defaults to os.environ).

    Raises:
        ConfigurationError: host or the required API key is missing.
    """
    credentials = resolve_credentials(CredentialKind(kind), os.environ if env is None else env)
    return TypesenseClient(credentials)


def _encode_param(value: Any) -> Any:
    # Typesense expects lowercase booleans in the query string
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class TypesenseClient:
    def __init__(self, credentials: SearchCredentials) -> None:
        self._credentials = credentials
        logger.info(
            f"TypesenseClient initialized: node={credentials.base_url} kind={credentials.kind.value}"
        )

    @property
    def credentials(self) -> SearchCredentials:
        return self._credentials

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(READ_TIMEOUT, connect=self._credentials.timeout_seconds)

    async def search_documents(self, collection: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Run a documents/search request and return the decoded response body."""
        url = f"{self._credentials.base_url}/collections/{collection}/documents/search"
        query = {key: _encode_param(value) for key, value in params.items()}
        headers = {
            API_KEY_HEADER: self._credentials.api_key,
            "Accept": "application/json",
        }
        logger.info("typesense request collection=%s q=%r", collection, params.get("q"))

        try:
            async with httpx.AsyncClient(timeout=self._timeout()) as client:
                resp = await client.get(url, params=query, headers=headers)
        except httpx.TimeoutException:
            raise ConnectionTimeoutError("Typesense")
        except httpx.RequestError as e:
            raise UpstreamError("Typesense", f"network error: {e}")

        logger.info("typesense response status=%s collection=%s", resp.status_code, collection)
        if resp.status_code >= 400:
            raise UpstreamError("Typesense", resp.text, status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError:
            raise UpstreamError("Typesense", "response is not valid JSON", status_code=resp.status_code)
