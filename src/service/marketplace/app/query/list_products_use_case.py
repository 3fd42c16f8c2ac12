import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.value_object.product_query import (
    PageRequest,
    Pagination,
    ProductFilter,
    ProductPage,
    ProductSort,
)


class ListProductsUseCase:
    def __init__(self, product_query_repo: IProductQueryRepo) -> None:
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo)

    @Logger.io
    async def list_products(
        self,
        *,
        product_filter: ProductFilter,
        sort: ProductSort,
        page_request: PageRequest,
    ) -> ProductPage:
        if page_request.limit > settings.MAX_PAGE_SIZE:
            raise DomainError(f'limit must be at most {settings.MAX_PAGE_SIZE}')

        started = time.perf_counter()
        products, total = await self.product_query_repo.list_products(
            product_filter=product_filter, sort=sort, page_request=page_request
        )
        metrics.record_query(query='list_products', duration=time.perf_counter() - started)

        Logger.base.info(
            f'📋 [LIST_PRODUCTS] page {page_request.page}: {len(products)} of {total} products'
        )
        return ProductPage(products=products, pagination=Pagination.of(page_request, total))
