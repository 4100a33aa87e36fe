import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront_discovery.container import get_search_client
from storefront_discovery.core.config import settings
from storefront_discovery.core.error_handlers import register_exception_handlers
from storefront_discovery.core.exceptions import ConfigurationError
from storefront_discovery.core.middleware import apply_cors
from storefront_discovery.routes import api_router, health_router

logging.basicConfig(
    level=logging.getLevelName(settings.log_level.upper()),
    format="%(levelname)s:%(name)s:%(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler.

    On startup the index configuration is probed once so a misconfigured
    deployment is visible in the logs; requests still report it as a 500.
    """
    logger.info("=== Storefront Discovery Starting ===")

    try:
        client = get_search_client()
        logger.info(f"Search index: {client.credentials.base_url} ({client.credentials.kind.value} key)")
    except ConfigurationError as e:
        logger.warning(f"Search index not configured: {e}")

    if not settings.gemini_api_key:
        logger.info("GEMINI_API_KEY not set; zero-result suggestions disabled")
    if settings.session_secrets == ["dev-secret"]:
        logger.warning("SESSION_SECRET not set; history cookies are signed with the development secret")

    logger.info("=== Storefront Discovery Ready ===")

    yield

    logger.info("Shutdown complete")


app = FastAPI(title="Storefront Discovery Backend", lifespan=lifespan)

apply_cors(app)
register_exception_handlers(app)

app.include_router(health_router)
app.include_router(api_router)
