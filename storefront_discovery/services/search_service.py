"""
Search service — ranked full-text product search against Typesense.

Handles:
- Short-circuiting blank queries without touching the index
- Building the tuned ranking request
- Projecting raw documents onto search hits
- Turning any upstream failure into a single SearchError
"""
import logging
from typing import Any, Callable, Dict

from storefront_discovery.clients.typesense_client import TypesenseClient
from storefront_discovery.core.constants.search import HIT_FIELDS, RANKING_PARAMS
from storefront_discovery.core.exceptions import SearchError, UpstreamError
from storefront_discovery.schemas.search import SearchHit, SearchQuery, SearchResult

logger = logging.getLogger(__name__)


class SearchService:
    """Query executor for storefront search."""

    def __init__(self, client_provider: Callable[[], TypesenseClient], collection: str = "products"):
        # The client is resolved lazily so blank queries never need credentials
        self._client_provider = client_provider
        self._collection = collection

    @staticmethod
    def build_search_params(query: SearchQuery) -> Dict[str, Any]:
        params: Dict[str, Any] = {"q": query.text}
        params.update(RANKING_PARAMS)
        params["per_page"] = query.per_page
        params["page"] = query.page
        return params

    @staticmethod
    def project_hit(document: Dict[str, Any]) -> SearchHit:
        """Keep only the display fields; missing ones stay None."""
        return SearchHit(**{field: document.get(field) for field in HIT_FIELDS})

    async def search(self, query: SearchQuery) -> SearchResult:
        if not query.text.strip():
            return SearchResult(hits=[], found=0, page=query.page, per_page=query.per_page)

        client = self._client_provider()
        params = self.build_search_params(query)

        try:
            result = await client.search_documents(self._collection, params)
            hits = [self.project_hit(hit.get("document") or {}) for hit in result.get("hits") or []]
        except UpstreamError as e:
            logger.error(f"Typesense search error q={query.text!r} page={query.page}: {e}")
            raise SearchError(status_code=e.status_code)
        except (TypeError, AttributeError, ValueError) as e:
            logger.error(f"Typesense search returned an unexpected payload q={query.text!r}: {e}")
            raise SearchError()

        found = result.get("found") or 0
        logger.info(f"search q={query.text!r} page={query.page} found={found} returned={len(hits)}")
        return SearchResult(hits=hits, found=found, page=query.page, per_page=query.per_page)
