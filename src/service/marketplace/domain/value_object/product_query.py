from enum import StrEnum
import math
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.marketplace.domain.entity.product_entity import ProductCondition, ProductEntity


class ProductSortField(StrEnum):
    CREATED_AT = 'createdAt'
    UPDATED_AT = 'updatedAt'
    PRICE = 'price'
    TITLE = 'title'


class SortOrder(StrEnum):
    ASC = 'asc'
    DESC = 'desc'


def _optional_condition(value):
    if value is None or isinstance(value, ProductCondition):
        return value
    try:
        return ProductCondition(value)
    except ValueError:
        allowed = ', '.join(c.value for c in ProductCondition)
        raise DomainError(f'Invalid condition: {value}. Must be one of: {allowed}') from None


@attrs.frozen
class ProductFilter:
    """Conjunction of optional listing filters; search is OR-ed over title/description/brand."""

    category: Optional[str] = None
    subcategory: Optional[str] = None
    condition: Optional[ProductCondition] = attrs.field(
        default=None, converter=_optional_condition
    )
    city: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    search: Optional[str] = None

    def __attrs_post_init__(self) -> None:
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise DomainError('minPrice cannot be greater than maxPrice')


@attrs.frozen
class PageRequest:
    page: int = 1
    limit: int = 20

    def __attrs_post_init__(self) -> None:
        if self.page < 1:
            raise DomainError('page must be at least 1')
        if self.limit < 1:
            raise DomainError('limit must be at least 1')

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@attrs.frozen
class ProductSort:
    field: ProductSortField = ProductSortField.CREATED_AT
    order: SortOrder = SortOrder.DESC

    @classmethod
    def parse(cls, *, sort_by: str, sort_order: str) -> 'ProductSort':
        try:
            field = ProductSortField(sort_by)
        except ValueError:
            allowed = ', '.join(f.value for f in ProductSortField)
            raise DomainError(f'Invalid sortBy: {sort_by}. Must be one of: {allowed}') from None
        try:
            order = SortOrder(sort_order.lower())
        except ValueError:
            raise DomainError('sortOrder must be asc or desc') from None
        return cls(field=field, order=order)


@attrs.frozen
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def of(cls, page_request: PageRequest, total: int) -> 'Pagination':
        return cls(
            page=page_request.page,
            limit=page_request.limit,
            total=total,
            total_pages=math.ceil(total / page_request.limit),
        )


@attrs.frozen
class ProductPage:
    products: list[ProductEntity]
    pagination: Pagination
