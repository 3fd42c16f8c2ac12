from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.product_entity import ProductEntity


class IProductCommandRepo(ABC):
    """Product Command Repository - Handles write operations"""

    @abstractmethod
    async def create(self, product_entity: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def update(self, product_entity: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def delete(self, *, product_id: str) -> None:
        """Deletes the product together with its reviews"""
        pass
