from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.query.search_products_use_case import SearchProductsUseCase
from src.service.marketplace.domain.entity.product_entity import ProductCondition
from src.service.marketplace.domain.product_search import SearchQuery, SearchSort
from src.service.marketplace.driving_adapter.schema.search_schema import SearchResponse


router = APIRouter()


def _split_csv(value: Optional[str]) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(',') if item.strip())


def _parse_conditions(value: Optional[str]) -> tuple[ProductCondition, ...]:
    try:
        return tuple(ProductCondition(item) for item in _split_csv(value))
    except ValueError as e:
        raise DomainError(f'Invalid condition filter: {value}') from e


def _parse_sort(value: str) -> SearchSort:
    try:
        return SearchSort(value)
    except ValueError as e:
        allowed = ', '.join(s.value for s in SearchSort)
        raise DomainError(f'Invalid sortBy: {value}. Must be one of: {allowed}') from e


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def search_products(
    q: str = '',
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
    price_min: Optional[float] = Query(None, alias='priceMin'),
    price_max: Optional[float] = Query(None, alias='priceMax'),
    condition: Optional[str] = None,
    brands: Optional[str] = None,
    location: Optional[str] = None,
    sort_by: str = Query('relevance', alias='sortBy'),
    page: int = 1,
    limit: int = 20,
    use_case: SearchProductsUseCase = Depends(SearchProductsUseCase.depends),
) -> SearchResponse:
    query = SearchQuery(
        text=q,
        category=category or None,
        subcategory=subcategory or None,
        price_min=price_min,
        price_max=price_max,
        conditions=_parse_conditions(condition),
        brands=_split_csv(brands),
        location=location or None,
        sort=_parse_sort(sort_by),
        page=page,
        limit=limit,
    )
    result = await use_case.search(query=query)
    return SearchResponse.from_result(result)
