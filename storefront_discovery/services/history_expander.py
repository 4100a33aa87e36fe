"""
History expander — resolves viewed handles into product records.

One batched Storefront GraphQL request per call: one aliased
``product(handle:)`` sub-query per handle, in input order. Output order is
the input order; handles the catalog no longer knows are skipped.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from storefront_discovery.clients.shopify_client import ShopifyStorefrontClient
from storefront_discovery.core.constants.history import MAX_EXPANDED_HANDLES

logger = logging.getLogger(__name__)

PRODUCT_FIELDS_FRAGMENT = """
fragment ViewedProductFields on Product {
  id
  handle
  title
  featuredImage { url altText }
  priceRange { minVariantPrice { amount currencyCode } }
}
"""


def _alias(index: int) -> str:
    return f"p{index}"


class HistoryExpander:
    def __init__(self, client: ShopifyStorefrontClient, timeout: Optional[float] = None):
        self._client = client
        self._timeout = timeout

    @staticmethod
    def build_batched_query(handles: Sequence[str]) -> Tuple[str, Dict[str, str]]:
        """Build the aliased GraphQL document and its variables for ``handles``."""
        declarations = ", ".join(f"$h{i}: String!" for i in range(len(handles)))
        selections = "\n".join(
            f"  {_alias(i)}: product(handle: $h{i}) {{ ...ViewedProductFields }}"
            for i in range(len(handles))
        )
        query = f"query ViewedProducts({declarations}) {{\n{selections}\n}}\n{PRODUCT_FIELDS_FRAGMENT}"
        variables = {f"h{i}": handle for i, handle in enumerate(handles)}
        return query, variables

    @staticmethod
    def collect_products(handles: Sequence[str], data: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Walk the capped input order and keep every alias that resolved."""
        resolved = data.get("data") or {}
        products: List[Dict[str, Any]] = []
        for i in range(len(handles)):
            node = resolved.get(_alias(i))
            if node:
                products.append(node)
        return products

    async def expand(self, handles: Sequence[str], timeout: Optional[float] = None) -> List[Dict[str, Any]]:
        """Resolve up to MAX_EXPANDED_HANDLES handles in a single round trip.

        Raises:
            UpstreamError: the batched call failed; no partial result is built.
        """
        capped = list(handles[:MAX_EXPANDED_HANDLES])
        if not capped:
            return []

        query, variables = self.build_batched_query(capped)
        data = await self._client.call_graphql(query, variables, timeout=timeout or self._timeout)
        products = self.collect_products(capped, data)

        logger.info(f"history expand requested={len(capped)} resolved={len(products)}")
        return products
