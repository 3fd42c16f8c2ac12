from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from src.service.marketplace.domain.entity.review_entity import ReviewEntity, ReviewUpdate
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.schema.base_schema import CamelModel


class CreateReviewRequest(CamelModel):
    # Range is checked by the domain so ownership is decided first on updates
    rating: int
    comment: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'rating': 5, 'comment': 'Works like new'}}
    )


class UpdateReviewRequest(CamelModel):
    rating: Optional[int] = None
    comment: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={'example': {'rating': 4}})

    def to_update(self) -> ReviewUpdate:
        return ReviewUpdate(**self.sent_fields())


class ReviewerResponse(CamelModel):
    id: str
    first_name: str
    last_name: str

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'ReviewerResponse':
        return cls(id=user.id or '', first_name=user.first_name, last_name=user.last_name)


class ReviewResponse(CamelModel):
    id: str
    product_id: str
    user_id: str
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[ReviewerResponse] = None

    @classmethod
    def from_entity(cls, review: ReviewEntity) -> 'ReviewResponse':
        return cls(
            id=review.id or '',
            product_id=review.product_id,
            user_id=review.user_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            updated_at=review.updated_at,
            user=ReviewerResponse.from_entity(review.user) if review.user else None,
        )
