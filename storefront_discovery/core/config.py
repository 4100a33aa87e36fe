import os
from typing import Optional
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


def _split_secrets(raw: str) -> list[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


class Settings(BaseModel):
    # Typesense (host/port/protocol/keys are read by the client factory from the env mapping)
    typesense_collection: str = os.getenv("TYPESENSE_COLLECTION", "products")

    # Shopify Storefront API
    shopify_store_domain: Optional[str] = os.getenv("SHOPIFY_STORE_DOMAIN") or os.getenv("PUBLIC_STORE_DOMAIN")
    shopify_storefront_api_token: Optional[str] = (
        os.getenv("SHOPIFY_STOREFRONT_API_TOKEN") or os.getenv("PUBLIC_STOREFRONT_API_TOKEN")
    )
    shopify_storefront_api_version: str = os.getenv("SHOPIFY_STOREFRONT_API_VERSION", "2025-04")

    # Gemini (suggestions are disabled when no key is configured)
    gemini_api_key: Optional[str] = os.getenv("GEMINI_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    # Recently-viewed cookie. First secret signs, all secrets verify.
    session_secrets: list[str] = _split_secrets(os.getenv("SESSION_SECRET", "dev-secret")) or ["dev-secret"]
    history_cookie_secure: bool = os.getenv("HISTORY_COOKIE_SECURE", "true").lower() in {"1", "true", "yes"}

    # Timeouts for the unbounded-latency dependencies
    suggestion_timeout_seconds: float = float(os.getenv("SUGGESTION_TIMEOUT_SECONDS", "8"))
    catalog_timeout_seconds: float = float(os.getenv("CATALOG_TIMEOUT_SECONDS", "10"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
