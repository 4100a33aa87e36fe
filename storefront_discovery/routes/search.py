"""
Search routes — storefront product search and zero-result suggestions.

Provides:
- GET /api/search              – ranked product search
- GET /api/search-suggestions  – alternative queries, always 200
"""
import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from storefront_discovery.container import get_search_service, get_suggestion_service
from storefront_discovery.core.config import settings
from storefront_discovery.schemas.search import SearchQuery, SearchResult, SuggestionsResponse
from storefront_discovery.services.search_service import SearchService
from storefront_discovery.services.suggestion_service import SuggestionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


async def suggest_or_empty(service: SuggestionService, q: str, timeout: float) -> List[str]:
    """Run the suggestion service, degrading to [] on any failure or timeout."""
    try:
        return await asyncio.wait_for(service.suggest(q), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"suggestions timed out after {timeout}s q={q!r}")
    except Exception as e:
        logger.warning(f"suggestions failed q={q!r}: {e}")
    return []


@router.get("/search", response_model=SearchResult, response_model_exclude_unset=True)
async def search(
    request: Request,
    q: Optional[str] = Query(default=None),
    per_page: Optional[str] = Query(default=None, alias="perPage"),
    page: Optional[str] = Query(default=None),
    service: SearchService = Depends(get_search_service),
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> SearchResult:
    """
    Search the product index.

    perPage/page are clamped, never rejected. With the ``suggest`` flag, a
    non-empty query that finds nothing also carries alternative queries.
    """
    query = SearchQuery.from_raw(q, per_page=per_page, page=page)
    result = await service.search(query)

    if "suggest" in request.query_params and query.text and result.found == 0:
        result.suggestions = await suggest_or_empty(suggestions, query.text, settings.suggestion_timeout_seconds)
    return result


@router.get("/search-suggestions", response_model=SuggestionsResponse)
async def search_suggestions(
    q: Optional[str] = Query(default=None),
    service: SuggestionService = Depends(get_suggestion_service),
) -> SuggestionsResponse:
    """Suggest alternative queries for a query that returned no results."""
    text = (q or "").strip()
    if not text:
        return SuggestionsResponse(suggestions=[])
    return SuggestionsResponse(
        suggestions=await suggest_or_empty(service, text, settings.suggestion_timeout_seconds)
    )
