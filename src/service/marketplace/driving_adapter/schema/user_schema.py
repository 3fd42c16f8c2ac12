from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, SecretStr, field_validator

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.entity.user_entity import UserEntity, UserProfileUpdate
from src.service.marketplace.domain.value_object.update_field import is_set
from src.service.marketplace.driving_adapter.schema.base_schema import (
    CamelModel,
    check_password_length,
)


class UserResponse(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    city: str
    region: str
    country: str
    is_verified: bool
    is_seller: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '0192f0c4-6a1e-7c3b-9a2d-5f1e8b7c4d21',
                'email': 'abebe@example.com',
                'firstName': 'Abebe',
                'lastName': 'Kebede',
                'phone': '+251911000000',
                'city': 'Addis Ababa',
                'region': 'Addis Ababa',
                'country': 'Ethiopia',
                'isVerified': False,
                'isSeller': False,
                'createdAt': '2025-01-01T00:00:00Z',
            }
        }
    )

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'UserResponse':
        return cls(
            id=user.id or '',
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            city=user.city,
            region=user.region,
            country=user.country,
            is_verified=user.is_verified,
            is_seller=user.is_seller,
            created_at=user.created_at,
        )


class SellerProductSummary(CamelModel):
    id: str
    title: str
    price: float
    images: List[str]
    condition: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, product: ProductEntity) -> 'SellerProductSummary':
        return cls(
            id=product.id or '',
            title=product.title,
            price=product.price,
            images=product.images,
            condition=product.condition.value,
            created_at=product.created_at,
        )


class SellerProfileResponse(CamelModel):
    id: str
    user_id: str
    business_name: str
    rating: float
    total_sales: int
    created_at: Optional[datetime] = None
    products: List[SellerProductSummary] = []

    @classmethod
    def from_entity(cls, seller: SellerEntity) -> 'SellerProfileResponse':
        return cls(
            id=seller.id or '',
            user_id=seller.user_id,
            business_name=seller.business_name,
            rating=seller.rating,
            total_sales=seller.total_sales,
            created_at=seller.created_at,
            products=[SellerProductSummary.from_entity(p) for p in seller.products],
        )


class UserProfileResponse(UserResponse):
    seller: Optional[SellerProfileResponse] = None

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'UserProfileResponse':
        return cls(
            **UserResponse.from_entity(user).model_dump(),
            seller=SellerProfileResponse.from_entity(user.seller) if user.seller else None,
        )


class UpdateUserRequest(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    password: Optional[SecretStr] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {'firstName': 'Abebe', 'city': 'Adama', 'phone': None}
        }
    )

    @field_validator('password')
    @classmethod
    def password_length(cls, value: Optional[SecretStr]) -> Optional[SecretStr]:
        # An empty password leaves the current one in place
        if value is None or not value.get_secret_value():
            return value
        return check_password_length(value)

    def to_update(self) -> UserProfileUpdate:
        fields = self.sent_fields()
        password = fields.pop('password')
        if is_set(password) and password is not None:
            password = password.get_secret_value()
        return UserProfileUpdate(**fields, password=password)
