from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.review_entity import ReviewEntity


class IReviewCommandRepo(ABC):
    @abstractmethod
    async def create(self, review_entity: ReviewEntity) -> ReviewEntity:
        pass

    @abstractmethod
    async def update(self, review_entity: ReviewEntity) -> ReviewEntity:
        pass

    @abstractmethod
    async def delete(self, *, review_id: str) -> None:
        pass
