"""
Product Query Repository Implementation - CQRS Read Side

Listing builds one predicate from the optional filters and shares it between the count
query and the paged fetch. Ratings are aggregated in SQL with an outer-joined subquery,
so raw reviews never leave the database on the listing path.
"""

from typing import List, Optional

from sqlalchemy import ColumnElement, Select, String, cast, func, or_, select
from sqlalchemy.orm import selectinload

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.product_search import SearchQuery
from src.service.marketplace.domain.value_object.product_query import (
    PageRequest,
    ProductFilter,
    ProductSort,
    ProductSortField,
    SortOrder,
)
from src.service.marketplace.domain.value_object.rating_summary import RatingSummary
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.review_model import ReviewModel
from src.service.marketplace.driven_adapter.repo.model_mapper import (
    attach_reviews,
    product_to_entity,
)


JSON_ESCAPED_CHARS = frozenset('"\\')

SORT_COLUMNS = {
    ProductSortField.CREATED_AT: ProductModel.created_at,
    ProductSortField.UPDATED_AT: ProductModel.updated_at,
    ProductSortField.PRICE: ProductModel.price,
    ProductSortField.TITLE: ProductModel.title,
}


def build_product_predicate(product_filter: ProductFilter) -> list[ColumnElement[bool]]:
    conditions: list[ColumnElement[bool]] = []

    if product_filter.category:
        conditions.append(ProductModel.category == product_filter.category)
    if product_filter.subcategory:
        conditions.append(ProductModel.subcategory == product_filter.subcategory)
    if product_filter.condition:
        conditions.append(ProductModel.condition == product_filter.condition.value)
    if product_filter.city:
        conditions.append(ProductModel.city == product_filter.city)
    if product_filter.min_price is not None:
        conditions.append(ProductModel.price >= product_filter.min_price)
    if product_filter.max_price is not None:
        conditions.append(ProductModel.price <= product_filter.max_price)
    if product_filter.search:
        term = product_filter.search
        conditions.append(
            or_(
                ProductModel.title.icontains(term, autoescape=True),
                ProductModel.description.icontains(term, autoescape=True),
                ProductModel.brand.icontains(term, autoescape=True),
            )
        )

    return conditions


def _apply_sort(stmt: Select, sort: ProductSort) -> Select:
    column = SORT_COLUMNS[sort.field]
    if sort.order == SortOrder.ASC:
        return stmt.order_by(column.asc(), ProductModel.id.asc())
    return stmt.order_by(column.desc(), ProductModel.id.desc())


class ProductQueryRepoImpl(SessionScopedRepo, IProductQueryRepo):
    """Product Query Repository Implementation - CQRS Read Side"""

    @Logger.io
    async def list_products(
        self, *, product_filter: ProductFilter, sort: ProductSort, page_request: PageRequest
    ) -> tuple[List[ProductEntity], int]:
        conditions = build_product_predicate(product_filter)

        ratings = (
            select(
                ReviewModel.product_id.label('product_id'),
                func.avg(ReviewModel.rating).label('average_rating'),
                func.count(ReviewModel.id).label('review_count'),
            )
            .group_by(ReviewModel.product_id)
            .subquery()
        )

        async with self._get_session() as session:
            total = await session.scalar(
                select(func.count()).select_from(ProductModel).where(*conditions)
            )

            stmt = (
                select(ProductModel, ratings.c.average_rating, ratings.c.review_count)
                .outerjoin(ratings, ratings.c.product_id == ProductModel.id)
                .where(*conditions)
            )
            stmt = _apply_sort(stmt, sort).offset(page_request.offset).limit(page_request.limit)
            result = await session.execute(stmt)

            products = []
            for product_model, average_rating, review_count in result.all():
                product = product_to_entity(product_model, with_seller=True)
                product.rating = RatingSummary.from_aggregate(
                    average=average_rating, count=review_count
                )
                products.append(product)

            return products, total or 0

    @Logger.io
    async def get_by_id(self, product_id: str) -> Optional[ProductEntity]:
        async with self._get_session() as session:
            product_model = await session.get(ProductModel, product_id)
            return product_to_entity(product_model, with_seller=True) if product_model else None

    @Logger.io
    async def get_detail(self, product_id: str) -> Optional[ProductEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ProductModel)
                .where(ProductModel.id == product_id)
                .options(selectinload(ProductModel.reviews))
            )
            product_model = result.scalar_one_or_none()

            if not product_model:
                return None

            product = product_to_entity(product_model, with_seller=True)
            return attach_reviews(product, list(product_model.reviews))

    @Logger.io
    async def search_candidates(self, query: SearchQuery) -> List[ProductEntity]:
        conditions: list[ColumnElement[bool]] = []

        if query.category:
            conditions.append(ProductModel.category == query.category)
        if query.subcategory:
            conditions.append(ProductModel.subcategory == query.subcategory)
        if query.price_min is not None:
            conditions.append(ProductModel.price >= query.price_min)
        if query.price_max is not None:
            conditions.append(ProductModel.price <= query.price_max)
        if query.conditions:
            conditions.append(ProductModel.condition.in_([c.value for c in query.conditions]))
        if query.brands:
            conditions.append(ProductModel.brand.in_(query.brands))
        if query.location:
            conditions.append(ProductModel.city == query.location)

        needle = query.needle
        # Specification JSON is matched as text: run_search drops hits on keys, and terms
        # that JSON would escape are left to run_search alone
        if needle and needle.isascii() and not JSON_ESCAPED_CHARS & set(needle):
            conditions.append(
                or_(
                    ProductModel.title.icontains(needle, autoescape=True),
                    ProductModel.description.icontains(needle, autoescape=True),
                    ProductModel.brand.icontains(needle, autoescape=True),
                    cast(ProductModel.specifications, String).icontains(needle, autoescape=True),
                )
            )

        async with self._get_session() as session:
            result = await session.execute(
                select(ProductModel)
                .where(*conditions)
                .order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            )
            return [product_to_entity(p, with_seller=True) for p in result.scalars().all()]
