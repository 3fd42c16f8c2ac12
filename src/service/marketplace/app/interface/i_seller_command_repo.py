from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.seller_entity import SellerEntity


class ISellerCommandRepo(ABC):
    @abstractmethod
    async def create(self, seller_entity: SellerEntity) -> SellerEntity:
        """Raises ConflictError when the user already has a seller profile"""
        pass
