"""Entity builders and stubs shared by the marketplace unit tests."""

from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import AsyncMock

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.review_entity import ReviewEntity
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.entity.user_entity import UserEntity


BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


def minutes_after_base(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(**overrides: Any) -> UserEntity:
    fields: dict[str, Any] = {
        'id': 'user-1',
        'email': 'seller@test.com',
        'first_name': 'Abebe',
        'last_name': 'Kebede',
        'phone': '+251911000000',
        'city': 'Addis Ababa',
        'region': 'Addis Ababa',
        'country': 'Ethiopia',
        'hashed_password': 'hashed',
    }
    fields.update(overrides)
    return UserEntity(**fields)


def make_seller(user: UserEntity | None = None, **overrides: Any) -> SellerEntity:
    user = user or make_user()
    fields: dict[str, Any] = {
        'id': 'seller-1',
        'user_id': user.id,
        'business_name': f"{user.email}'s Store",
        'user': user,
    }
    fields.update(overrides)
    return SellerEntity(**fields)


def make_product(seller: SellerEntity | None = None, **overrides: Any) -> ProductEntity:
    seller = seller or make_seller()
    fields: dict[str, Any] = {
        'id': 'product-1',
        'seller_id': seller.id,
        'title': 'iPhone 14 Pro',
        'description': 'Deep purple, battery health 92%',
        'price': 85000,
        'category': 'electronics',
        'subcategory': 'phones',
        'condition': 'used',
        'brand': 'Apple',
        'images': ['https://cdn.example.com/iphone.jpg'],
        'specifications': {'storage': '256GB'},
        'city': 'Addis Ababa',
        'region': 'Addis Ababa',
        'country': 'Ethiopia',
        'created_at': BASE_TIME,
        'seller': seller,
    }
    fields.update(overrides)
    return ProductEntity(**fields)


def make_review(**overrides: Any) -> ReviewEntity:
    fields: dict[str, Any] = {
        'id': 'review-1',
        'product_id': 'product-1',
        'user_id': 'buyer-1',
        'rating': 4,
        'comment': 'Good phone',
        'user': make_user(id='buyer-1', email='buyer@test.com', first_name='Sara'),
    }
    fields.update(overrides)
    return ReviewEntity(**fields)


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work whose repositories are AsyncMocks; counts commits."""

    def __init__(self) -> None:
        self.user_query_repo = AsyncMock()
        self.user_command_repo = AsyncMock()
        self.seller_query_repo = AsyncMock()
        self.seller_command_repo = AsyncMock()
        self.product_command_repo = AsyncMock()
        self.commits = 0

    async def _commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass
