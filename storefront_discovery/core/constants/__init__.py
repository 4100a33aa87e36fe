"""
Constants package — re-exports from domain-specific modules.

Usage:
    from storefront_discovery.core.constants.search import RANKING_PARAMS
    from storefront_discovery.core.constants.history import MAX_VIEWED_HANDLES
    # or import everything:
    from storefront_discovery.core.constants import search, history, suggestions
"""

from storefront_discovery.core.constants import search, history, suggestions
from storefront_discovery.core.constants.search import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    DEFAULT_PAGE,
    RANKING_PARAMS,
    HIT_FIELDS,
)
from storefront_discovery.core.constants.history import (
    MAX_VIEWED_HANDLES,
    MAX_EXPANDED_HANDLES,
    HISTORY_COOKIE_NAME,
    HISTORY_COOKIE_MAX_AGE,
    MAX_HANDLE_LENGTH,
    MAX_COOKIE_VALUE_BYTES,
)
from storefront_discovery.core.constants.suggestions import (
    MAX_SUGGESTIONS,
    STOP_WORDS,
    COLORS,
)

__all__ = [
    "search",
    "history",
    "suggestions",
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "DEFAULT_PAGE",
    "RANKING_PARAMS",
    "HIT_FIELDS",
    "MAX_VIEWED_HANDLES",
    "MAX_EXPANDED_HANDLES",
    "HISTORY_COOKIE_NAME",
    "HISTORY_COOKIE_MAX_AGE",
    "MAX_HANDLE_LENGTH",
    "MAX_COOKIE_VALUE_BYTES",
    "MAX_SUGGESTIONS",
    "STOP_WORDS",
    "COLORS",
]
