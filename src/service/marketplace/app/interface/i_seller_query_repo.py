from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.seller_entity import SellerEntity


class ISellerQueryRepo(ABC):
    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[SellerEntity]:
        pass
