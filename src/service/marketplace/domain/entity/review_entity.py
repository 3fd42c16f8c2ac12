from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.marketplace.domain.value_object.update_field import UNSET, UnsetType, sent_values


if TYPE_CHECKING:
    from src.service.marketplace.domain.entity.user_entity import UserEntity


MIN_RATING = 1
MAX_RATING = 5


def validate_rating(instance, attribute, value):
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not MIN_RATING <= value <= MAX_RATING
    ):
        raise DomainError(f'Rating must be between {MIN_RATING} and {MAX_RATING}')


def validate_comment(instance, attribute, value):
    if value is not None and not isinstance(value, str):
        raise DomainError('comment must be a string')


@attrs.define
class ReviewEntity:
    product_id: str
    user_id: str
    rating: int = attrs.field(validator=validate_rating)
    comment: Optional[str] = attrs.field(default=None, validator=validate_comment)
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Reviewer summary, filled by query repositories
    user: Optional['UserEntity'] = None

    def is_written_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def apply(self, update: 'ReviewUpdate') -> None:
        for name, value in update.present_fields().items():
            setattr(self, name, value)


@attrs.define
class ReviewUpdate:
    rating: int | None | UnsetType = UNSET
    comment: str | None | UnsetType = UNSET

    def present_fields(self) -> dict[str, Any]:
        return sent_values(self, clearable=frozenset({'comment'}))
