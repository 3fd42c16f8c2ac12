"""
Product search ranking and facets.

Structured filters (category, price, condition, brand, city) are pushed to the database
by the query repository; this module matches the free-text query against the candidates,
ranks them, and derives facets and suggestions before paging.
"""

from collections import Counter
from enum import StrEnum
from typing import Iterable, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.marketplace.domain.entity.product_entity import ProductCondition, ProductEntity


MAX_SEARCH_LIMIT = 100
MAX_SUGGESTIONS = 5

# (min inclusive, max exclusive); None = unbounded
PRICE_BUCKETS: tuple[tuple[float, Optional[float]], ...] = (
    (0, 10000),
    (10000, 25000),
    (25000, 50000),
    (50000, 100000),
    (100000, None),
)


class SearchSort(StrEnum):
    RELEVANCE = 'relevance'
    PRICE_LOW = 'price-low'
    PRICE_HIGH = 'price-high'
    NEWEST = 'newest'
    OLDEST = 'oldest'


@attrs.frozen
class SearchQuery:
    text: str = ''
    category: Optional[str] = None
    subcategory: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    conditions: tuple[ProductCondition, ...] = ()
    brands: tuple[str, ...] = ()
    location: Optional[str] = None
    sort: SearchSort = SearchSort.RELEVANCE
    page: int = 1
    limit: int = 20

    def __attrs_post_init__(self) -> None:
        if self.page < 1 or self.limit < 1 or self.limit > MAX_SEARCH_LIMIT:
            raise DomainError('Invalid pagination parameters')

    @property
    def needle(self) -> str:
        return self.text.strip().lower()


@attrs.frozen
class FacetCount:
    value: str
    count: int


@attrs.frozen
class PriceRangeFacet:
    min: float
    max: Optional[float]
    count: int


@attrs.frozen
class SearchFacets:
    categories: list[FacetCount] = attrs.field(factory=list)
    brands: list[FacetCount] = attrs.field(factory=list)
    conditions: list[FacetCount] = attrs.field(factory=list)
    price_ranges: list[PriceRangeFacet] = attrs.field(factory=list)


@attrs.frozen
class SearchResult:
    products: list[ProductEntity]
    total_count: int
    facets: SearchFacets
    suggestions: Optional[list[str]] = None


def _spec_strings(product: ProductEntity) -> list[str]:
    return [value.lower() for value in product.specifications.values() if isinstance(value, str)]


def matches_text(product: ProductEntity, needle: str) -> bool:
    if not needle:
        return True
    return (
        needle in product.title.lower()
        or needle in product.description.lower()
        or needle in (product.brand or '').lower()
        or any(needle in value for value in _spec_strings(product))
    )


def relevance_score(product: ProductEntity, needle: str) -> int:
    score = 0
    title = product.title.lower()

    if needle in title:
        score += 100
        if title == needle:
            score += 50
        if title.startswith(needle):
            score += 25

    if needle in product.description.lower():
        score += 50

    score += 10 * sum(1 for value in _spec_strings(product) if needle in value)

    if needle in (product.brand or '').lower():
        score += 30

    return score


def _created(product: ProductEntity) -> float:
    return product.created_at.timestamp() if product.created_at else 0.0


def sort_products(
    products: Iterable[ProductEntity], sort: SearchSort, needle: str
) -> list[ProductEntity]:
    items = list(products)
    if sort == SearchSort.PRICE_LOW:
        return sorted(items, key=lambda p: p.price)
    if sort == SearchSort.PRICE_HIGH:
        return sorted(items, key=lambda p: p.price, reverse=True)
    if sort == SearchSort.OLDEST:
        return sorted(items, key=_created)
    if sort == SearchSort.NEWEST or not needle:
        return sorted(items, key=_created, reverse=True)
    return sorted(items, key=lambda p: relevance_score(p, needle), reverse=True)


def _counts(values: Iterable[str]) -> list[FacetCount]:
    # Counter keeps first-seen order
    return [FacetCount(value=value, count=count) for value, count in Counter(values).items()]


def build_facets(products: list[ProductEntity]) -> SearchFacets:
    if not products:
        return SearchFacets()

    price_ranges = []
    for low, high in PRICE_BUCKETS:
        count = sum(1 for p in products if p.price >= low and (high is None or p.price < high))
        if count:
            price_ranges.append(PriceRangeFacet(min=low, max=high, count=count))

    return SearchFacets(
        categories=_counts(p.category for p in products),
        brands=_counts(p.brand for p in products if p.brand),
        conditions=_counts(p.condition.value for p in products),
        price_ranges=price_ranges,
    )


def build_suggestions(products: Iterable[ProductEntity], needle: str) -> list[str]:
    suggestions: dict[str, None] = {}  # insertion-ordered set
    for product in products:
        if needle in product.title.lower():
            suggestions.setdefault(product.title)
        if product.brand and needle in product.brand.lower():
            suggestions.setdefault(product.brand)
    return list(suggestions)[:MAX_SUGGESTIONS]


def run_search(candidates: Iterable[ProductEntity], query: SearchQuery) -> SearchResult:
    needle = query.needle
    matched = [p for p in candidates if matches_text(p, needle)]
    ranked = sort_products(matched, query.sort, needle)
    start = (query.page - 1) * query.limit

    return SearchResult(
        products=ranked[start : start + query.limit],
        total_count=len(ranked),
        facets=build_facets(ranked),
        suggestions=build_suggestions(matched, needle) if needle else None,
    )
