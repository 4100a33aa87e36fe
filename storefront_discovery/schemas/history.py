"""
History schemas — recently-viewed tracking and expansion models.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TrackViewResponse(BaseModel):
    ok: bool = True
    handles: List[str] = []


class TrackViewError(BaseModel):
    ok: bool = False
    error: str


class ProductImage(BaseModel):
    url: str
    altText: Optional[str] = None


class Money(BaseModel):
    amount: str
    currencyCode: str


class PriceRange(BaseModel):
    minVariantPrice: Money


class ExpandedProduct(BaseModel):
    """Minimal product record resolved from a viewed handle."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    handle: str
    title: str
    featured_image: Optional[ProductImage] = Field(default=None, alias="featuredImage")
    price_range: Optional[PriceRange] = Field(default=None, alias="priceRange")


class HistoryResponse(BaseModel):
    handles: List[str] = []
    products: Optional[List[ExpandedProduct]] = None
