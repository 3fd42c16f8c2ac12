from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.app.interface.i_review_command_repo import IReviewCommandRepo
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.review_entity import ReviewEntity


class CreateReviewUseCase:
    def __init__(
        self,
        *,
        product_query_repo: IProductQueryRepo,
        review_command_repo: IReviewCommandRepo,
        user_query_repo: IUserQueryRepo,
    ) -> None:
        self.product_query_repo = product_query_repo
        self.review_command_repo = review_command_repo
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
        review_command_repo: IReviewCommandRepo = Depends(Provide[Container.review_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(
            product_query_repo=product_query_repo,
            review_command_repo=review_command_repo,
            user_query_repo=user_query_repo,
        )

    @Logger.io
    async def create(
        self, *, product_id: str, user_id: str, rating: int, comment: Optional[str] = None
    ) -> ReviewEntity:
        review = ReviewEntity(
            product_id=product_id, user_id=user_id, rating=rating, comment=comment
        )

        if await self.product_query_repo.get_by_id(product_id) is None:
            raise NotFoundError('Product not found')

        reviewer = await self.user_query_repo.get_by_id(user_id)
        if reviewer is None:
            raise NotFoundError('User not found')

        created = await self.review_command_repo.create(review)
        created.user = reviewer

        metrics.record_review_write(operation='create')
        Logger.base.info(f'✅ [CREATE_REVIEW] {user_id} reviewed {product_id} ({rating}/5)')
        return created
