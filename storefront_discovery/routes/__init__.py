"""
Route aggregation module.

Combines the storefront routers under the /api prefix.
Health is exported separately for main.py to mount at root.
"""
from fastapi import APIRouter

from storefront_discovery.routes.search import router as search_router
from storefront_discovery.routes.history import router as history_router
from storefront_discovery.routes.health import router as health_router

api_router = APIRouter(prefix="/api")

api_router.include_router(search_router)
api_router.include_router(history_router)

__all__ = ["api_router", "health_router"]
