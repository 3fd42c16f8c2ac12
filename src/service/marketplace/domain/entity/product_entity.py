from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.marketplace.domain.value_object.rating_summary import RatingSummary
from src.service.marketplace.domain.value_object.update_field import UNSET, UnsetType, sent_values


if TYPE_CHECKING:
    from src.service.marketplace.domain.entity.review_entity import ReviewEntity
    from src.service.marketplace.domain.entity.seller_entity import SellerEntity


class ProductCondition(StrEnum):
    NEW = 'new'
    USED = 'used'
    REFURBISHED = 'refurbished'


def _required_text(field_name: str):
    def validate(instance, attribute, value):
        if not isinstance(value, str) or not value.strip():
            raise DomainError(f'{field_name} cannot be empty')

    return validate


def validate_positive_price(instance, attribute, value):
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise DomainError('Price must be greater than 0')


def _to_condition(value):
    try:
        return ProductCondition(value)
    except ValueError:
        return value


def validate_condition(instance, attribute, value):
    if value not in ProductCondition.__members__.values():
        allowed = ', '.join(c.value for c in ProductCondition)
        raise DomainError(f'Invalid condition: {value}. Must be one of: {allowed}')


def validate_images(instance, attribute, value):
    if not isinstance(value, list) or not all(isinstance(url, str) for url in value):
        raise DomainError('images must be a list of strings')


def validate_specifications(instance, attribute, value):
    if not isinstance(value, dict):
        raise DomainError('specifications must be an object')


@attrs.define
class ProductEntity:
    seller_id: str
    title: str = attrs.field(validator=_required_text('title'))
    description: str = attrs.field(validator=_required_text('description'))
    price: float = attrs.field(validator=validate_positive_price)
    category: str = attrs.field(validator=_required_text('category'))
    subcategory: str = attrs.field(validator=_required_text('subcategory'))
    condition: ProductCondition = attrs.field(converter=_to_condition, validator=validate_condition)
    city: str = attrs.field(validator=_required_text('city'))
    region: str = attrs.field(validator=_required_text('region'))
    country: str = ''
    brand: Optional[str] = None
    images: list[str] = attrs.field(factory=list, validator=validate_images)
    specifications: dict[str, Any] = attrs.field(factory=dict, validator=validate_specifications)
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Read-side projections, filled by query repositories
    seller: Optional['SellerEntity'] = None
    reviews: list['ReviewEntity'] = attrs.field(factory=list)
    rating: RatingSummary = attrs.field(factory=RatingSummary)

    def is_owned_by(self, user_id: str) -> bool:
        if self.seller is None:
            raise RuntimeError(f'Product {self.id} loaded without its seller')
        return self.seller.user_id == user_id

    def apply(self, update: 'ProductUpdate') -> None:
        """Apply only the fields present in the update; attrs re-runs the validators."""
        for name, value in update.present_fields().items():
            setattr(self, name, value)


@attrs.define
class ProductUpdate:
    title: str | None | UnsetType = UNSET
    description: str | None | UnsetType = UNSET
    price: float | None | UnsetType = UNSET
    category: str | None | UnsetType = UNSET
    subcategory: str | None | UnsetType = UNSET
    condition: str | None | UnsetType = UNSET
    brand: str | None | UnsetType = UNSET
    images: list[str] | None | UnsetType = UNSET
    specifications: dict[str, Any] | None | UnsetType = UNSET
    city: str | None | UnsetType = UNSET
    region: str | None | UnsetType = UNSET

    def present_fields(self) -> dict[str, Any]:
        return sent_values(self, clearable=frozenset({'brand'}))

    def is_empty(self) -> bool:
        return not self.present_fields()
