"""
Search schemas — query, hit and result models.

Wire names follow the storefront's camelCase (perPage); Python code uses
snake_case through field aliases.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from storefront_discovery.core.constants.search import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
)
from storefront_discovery.utils.params import clamp, parse_int


class SearchQuery(BaseModel):
    """A free-text query with clamped pagination."""
    text: str = ""
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE)

    @classmethod
    def from_raw(
        cls,
        q: Optional[str],
        per_page: Optional[str] = None,
        page: Optional[str] = None,
    ) -> "SearchQuery":
        """Build a query from raw request values, clamping instead of rejecting."""
        return cls(
            text=(q or "").strip(),
            page=clamp(parse_int(page, DEFAULT_PAGE), 1),
            per_page=clamp(parse_int(per_page, DEFAULT_PER_PAGE), 1, MAX_PER_PAGE),
        )


class SearchHit(BaseModel):
    """A matched index document projected onto the display fields."""
    id: Optional[str] = None
    title: Optional[str] = None
    handle: Optional[str] = None
    vendor: Optional[str] = None
    price: Optional[Union[float, str]] = None
    image: Optional[str] = None
    url: Optional[str] = None
    available: Optional[bool] = None


class SearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hits: List[SearchHit] = []
    found: int = 0
    page: int
    per_page: int = Field(alias="perPage")
    suggestions: Optional[List[str]] = None


class SuggestionsResponse(BaseModel):
    suggestions: List[str] = []
