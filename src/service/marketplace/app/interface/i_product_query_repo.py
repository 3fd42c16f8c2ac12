from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.product_search import SearchQuery
from src.service.marketplace.domain.value_object.product_query import (
    PageRequest,
    ProductFilter,
    ProductSort,
)


class IProductQueryRepo(ABC):
    """Product Query Repository - Handles read operations"""

    @abstractmethod
    async def list_products(
        self, *, product_filter: ProductFilter, sort: ProductSort, page_request: PageRequest
    ) -> tuple[List[ProductEntity], int]:
        """One page of products with seller summary and rating, plus the total match count"""
        pass

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Optional[ProductEntity]:
        """Product with seller and seller user, no reviews"""
        pass

    @abstractmethod
    async def get_detail(self, product_id: str) -> Optional[ProductEntity]:
        """Product with seller, seller user and reviews (newest first) with reviewers"""
        pass

    @abstractmethod
    async def search_candidates(self, query: SearchQuery) -> List[ProductEntity]:
        """Products matching the structured search filters, newest first"""
        pass
