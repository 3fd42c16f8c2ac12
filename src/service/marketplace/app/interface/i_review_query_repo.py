from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.review_entity import ReviewEntity


class IReviewQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, review_id: str) -> Optional[ReviewEntity]:
        """Review with reviewer summary"""
        pass
