from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_review_command_repo import IReviewCommandRepo
from src.service.marketplace.app.interface.i_review_query_repo import IReviewQueryRepo


class DeleteReviewUseCase:
    def __init__(
        self,
        *,
        review_query_repo: IReviewQueryRepo,
        review_command_repo: IReviewCommandRepo,
    ) -> None:
        self.review_query_repo = review_query_repo
        self.review_command_repo = review_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        review_query_repo: IReviewQueryRepo = Depends(Provide[Container.review_query_repo]),
        review_command_repo: IReviewCommandRepo = Depends(Provide[Container.review_command_repo]),
    ) -> Self:
        return cls(review_query_repo=review_query_repo, review_command_repo=review_command_repo)

    @Logger.io
    async def delete(self, *, review_id: str, user_id: str) -> None:
        review = await self.review_query_repo.get_by_id(review_id)
        if review is None:
            raise NotFoundError('Review not found')

        if not review.is_written_by(user_id):
            raise ForbiddenError('Forbidden: You can only delete your own reviews')

        await self.review_command_repo.delete(review_id=review_id)

        metrics.record_review_write(operation='delete')
        Logger.base.info(f'🗑️ [DELETE_REVIEW] Deleted review {review_id}')
