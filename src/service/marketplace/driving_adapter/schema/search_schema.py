from typing import List, Optional

from src.service.marketplace.domain.product_search import FacetCount, SearchFacets, SearchResult
from src.service.marketplace.driving_adapter.schema.base_schema import CamelModel
from src.service.marketplace.driving_adapter.schema.product_schema import (
    ProductFields,
    SellerResponse,
    product_fields,
    seller_of,
)


class SearchProductItem(ProductFields):
    seller: SellerResponse


class FacetCountResponse(CamelModel):
    value: str
    count: int

    @classmethod
    def of(cls, facet: FacetCount) -> 'FacetCountResponse':
        return cls(value=facet.value, count=facet.count)


class PriceRangeResponse(CamelModel):
    min: float
    max: Optional[float] = None
    count: int


class FacetsResponse(CamelModel):
    categories: List[FacetCountResponse]
    brands: List[FacetCountResponse]
    conditions: List[FacetCountResponse]
    price_ranges: List[PriceRangeResponse]

    @classmethod
    def from_facets(cls, facets: SearchFacets) -> 'FacetsResponse':
        return cls(
            categories=[FacetCountResponse.of(f) for f in facets.categories],
            brands=[FacetCountResponse.of(f) for f in facets.brands],
            conditions=[FacetCountResponse.of(f) for f in facets.conditions],
            price_ranges=[
                PriceRangeResponse(min=r.min, max=r.max, count=r.count) for r in facets.price_ranges
            ],
        )


class SearchResponse(CamelModel):
    products: List[SearchProductItem]
    total_count: int
    facets: FacetsResponse
    suggestions: Optional[List[str]] = None

    @classmethod
    def from_result(cls, result: SearchResult) -> 'SearchResponse':
        return cls(
            products=[
                SearchProductItem(
                    **product_fields(p), seller=SellerResponse.from_entity(seller_of(p))
                )
                for p in result.products
            ],
            total_count=result.total_count,
            facets=FacetsResponse.from_facets(result.facets),
            suggestions=result.suggestions,
        )
