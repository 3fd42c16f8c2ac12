import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.product_search import SearchQuery, SearchResult, run_search


class SearchProductsUseCase:
    """
    Full-text product search with facets.

    The repository narrows candidates with the structured filters; matching, ranking,
    facets and suggestions run over that candidate set before paging.
    """

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
    async def search(self, *, query: SearchQuery) -> SearchResult:
        started = time.perf_counter()
        candidates = await self.product_query_repo.search_candidates(query)
        result = run_search(candidates, query)
        metrics.record_query(query='search', duration=time.perf_counter() - started)

        Logger.base.info(
            f'🔍 [SEARCH] "{query.text}" matched {result.total_count} of {len(candidates)}'
        )
        return result
