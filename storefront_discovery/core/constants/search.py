"""
Search constants — pagination bounds and the tuned Typesense ranking policy.
"""

DEFAULT_PAGE: int = 1
DEFAULT_PER_PAGE: int = 10
MAX_PER_PAGE: int = 100

# Connection timeout for the Typesense node (seconds)
TYPESENSE_CONNECTION_TIMEOUT: float = 5.0

# Ranking policy for storefront search. Every key here is sent as-is;
# per_page/page/q are added per request.
RANKING_PARAMS: dict[str, object] = {
    # title weighted 8, tags weighted 2
    "query_by": "title,tags",
    "query_by_weights": "8,2",
    "prefix": True,
    "infix": "always,always",
    # 1 typo from 4 chars, 2 typos from 7 chars
    "num_typos": "1,0",
    "min_len_1typo": 4,
    "min_len_2typo": 7,
    "typo_tokens_threshold": 1,
    # SKUs and codes must match exactly
    "enable_typos_for_numerical_tokens": False,
    "enable_typos_for_alpha_numerical_tokens": False,
    # all query words must match; never drop tokens
    "drop_tokens_threshold": 0,
    "exhaustive_search": True,
    "prioritize_exact_match": True,
    "prioritize_token_position": True,
    "prioritize_num_matching_fields": True,
    "text_match_type": "max_score",
    "highlight_full_fields": "title",
}

# Fields projected from an index document onto a search hit
HIT_FIELDS: tuple[str, ...] = ("id", "title", "handle", "vendor", "price", "image", "url", "available")
