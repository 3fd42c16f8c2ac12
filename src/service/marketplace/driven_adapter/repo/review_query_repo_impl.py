from typing import Optional

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_review_query_repo import IReviewQueryRepo
from src.service.marketplace.domain.entity.review_entity import ReviewEntity
from src.service.marketplace.driven_adapter.model.review_model import ReviewModel
from src.service.marketplace.driven_adapter.repo.model_mapper import review_to_entity


class ReviewQueryRepoImpl(SessionScopedRepo, IReviewQueryRepo):
    @Logger.io
    async def get_by_id(self, review_id: str) -> Optional[ReviewEntity]:
        async with self._get_session() as session:
            review_model = await session.get(ReviewModel, review_id)
            return review_to_entity(review_model, with_user=True) if review_model else None
