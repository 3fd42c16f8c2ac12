from datetime import datetime
from typing import TYPE_CHECKING, Optional

import attrs


if TYPE_CHECKING:
    from src.service.marketplace.domain.entity.product_entity import ProductEntity
    from src.service.marketplace.domain.entity.user_entity import UserEntity


@attrs.define
class SellerEntity:
    user_id: str
    business_name: str
    rating: float = 0.0
    total_sales: int = 0
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    # Read-side projections
    user: Optional['UserEntity'] = None
    products: list['ProductEntity'] = attrs.field(factory=list)

    @classmethod
    def open_for(cls, user: 'UserEntity', *, business_name_suffix: str) -> 'SellerEntity':
        """Seller profile created the first time a user lists a product."""
        if not user.id:
            raise ValueError('Cannot open a seller profile for an unsaved user')
        return cls(user_id=user.id, business_name=f'{user.email}{business_name_suffix}')
