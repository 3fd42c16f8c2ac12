from sqlalchemy import delete

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_review_command_repo import IReviewCommandRepo
from src.service.marketplace.domain.entity.review_entity import ReviewEntity
from src.service.marketplace.driven_adapter.model.review_model import ReviewModel
from src.service.marketplace.driven_adapter.repo.model_mapper import review_to_entity


class ReviewCommandRepoImpl(SessionScopedRepo, IReviewCommandRepo):
    @Logger.io
    async def create(self, review_entity: ReviewEntity) -> ReviewEntity:
        async with self._get_session() as session:
            review_model = ReviewModel(
                product_id=review_entity.product_id,
                user_id=review_entity.user_id,
                rating=review_entity.rating,
                comment=review_entity.comment,
            )
            session.add(review_model)
            await self._save(session)

            return review_to_entity(review_model)

    @Logger.io
    async def update(self, review_entity: ReviewEntity) -> ReviewEntity:
        async with self._get_session() as session:
            review_model = await session.get(ReviewModel, review_entity.id)
            if review_model is None:
                raise NotFoundError('Review not found')

            review_model.rating = review_entity.rating
            review_model.comment = review_entity.comment

            await self._save(session)
            return review_to_entity(review_model)

    @Logger.io
    async def delete(self, *, review_id: str) -> None:
        async with self._get_session() as session:
            await session.execute(delete(ReviewModel).where(ReviewModel.id == review_id))
            await self._save(session)
