"""
Unit tests for CreateProductUseCase

Tests the first-listing flow inside one unit of work:
1. Product fields validated before any repository call
2. Seller profile opened on first listing (business name = email + "'s Store")
3. User flagged as seller
4. Concurrent first listing: seller conflict retried once
"""

import attrs
import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.marketplace.app.command.create_product_use_case import CreateProductUseCase
from src.service.marketplace.domain.entity.product_entity import ProductCondition, ProductEntity
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from test.service.marketplace.unit.helpers import FakeUnitOfWork, make_seller, make_user


PRODUCT_PARAMS = {
    'user_id': 'user-1',
    'title': 'Toyota Corolla 2012',
    'description': 'Single owner, full service history',
    'price': 1200000,
    'category': 'vehicles',
    'subcategory': 'cars',
    'condition': 'used',
    'city': 'Adama',
    'region': 'Oromia',
}


async def _saved_product(product: ProductEntity) -> ProductEntity:
    return attrs.evolve(product, id='product-1')


async def _saved_seller(seller: SellerEntity) -> SellerEntity:
    return attrs.evolve(seller, id='seller-new')


@pytest.fixture
def uow() -> FakeUnitOfWork:
    fake = FakeUnitOfWork()
    fake.user_query_repo.get_by_id.return_value = make_user()
    fake.seller_query_repo.get_by_user_id.return_value = None
    fake.seller_command_repo.create.side_effect = _saved_seller
    fake.product_command_repo.create.side_effect = _saved_product
    return fake


@pytest.fixture
def create_product_use_case(uow: FakeUnitOfWork) -> CreateProductUseCase:
    return CreateProductUseCase(uow=uow)


@pytest.mark.unit
class TestCreateProductUseCase:
    async def test_first_listing__opens_seller_and_flags_user(
        self, create_product_use_case: CreateProductUseCase, uow: FakeUnitOfWork
    ) -> None:
        # Act
        product = await create_product_use_case.create(**PRODUCT_PARAMS)

        # Assert - seller opened with the default profile
        opened: SellerEntity = uow.seller_command_repo.create.await_args.args[0]
        assert opened.user_id == 'user-1'
        assert opened.business_name == "seller@test.com's Store"
        assert opened.rating == 0.0
        assert opened.total_sales == 0
        uow.user_command_repo.mark_as_seller.assert_awaited_once_with(user_id='user-1')

        # Assert - product belongs to the new seller, one commit
        assert product.id == 'product-1'
        assert product.seller_id == 'seller-new'
        assert product.seller is not None
        assert product.seller.user is not None
        assert product.seller.user.is_seller is True
        assert uow.commits == 1

    async def test_defaults__country_images_specifications(
        self, create_product_use_case: CreateProductUseCase
    ) -> None:
        product = await create_product_use_case.create(**PRODUCT_PARAMS)

        assert product.country == 'Ethiopia'
        assert product.images == []
        assert product.specifications == {}
        assert product.brand is None
        assert product.condition == ProductCondition.USED

    async def test_existing_seller__reused(
        self, create_product_use_case: CreateProductUseCase, uow: FakeUnitOfWork
    ) -> None:
        # Arrange
        seller = make_seller(user=None, user_id='user-1')
        uow.seller_query_repo.get_by_user_id.return_value = seller

        # Act
        product = await create_product_use_case.create(**PRODUCT_PARAMS)

        # Assert
        uow.seller_command_repo.create.assert_not_awaited()
        uow.user_command_repo.mark_as_seller.assert_not_awaited()
        assert product.seller_id == 'seller-1'

    async def test_missing_user__not_found(
        self, create_product_use_case: CreateProductUseCase, uow: FakeUnitOfWork
    ) -> None:
        uow.user_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='User not found'):
            await create_product_use_case.create(**PRODUCT_PARAMS)

        uow.product_command_repo.create.assert_not_awaited()
        assert uow.commits == 0

    @pytest.mark.parametrize(
        'overrides,message',
        [
            ({'price': 0}, 'Price must be greater than 0'),
            ({'price': -10}, 'Price must be greater than 0'),
            ({'condition': 'broken'}, 'Invalid condition: broken'),
            ({'title': '  '}, 'title cannot be empty'),
        ],
    )
    async def test_invalid_fields__rejected_before_database(
        self,
        create_product_use_case: CreateProductUseCase,
        uow: FakeUnitOfWork,
        overrides: dict,
        message: str,
    ) -> None:
        with pytest.raises(DomainError, match=message):
            await create_product_use_case.create(**{**PRODUCT_PARAMS, **overrides})

        uow.user_query_repo.get_by_id.assert_not_awaited()

    async def test_concurrent_first_listing__retries_with_existing_seller(
        self, create_product_use_case: CreateProductUseCase, uow: FakeUnitOfWork
    ) -> None:
        # Arrange - another request opens the seller between our read and insert
        winner = make_seller(user=None, id='seller-winner', user_id='user-1')
        uow.seller_query_repo.get_by_user_id.side_effect = [None, winner]
        uow.seller_command_repo.create.side_effect = ConflictError(
            'Seller profile already exists'
        )

        # Act
        product = await create_product_use_case.create(**PRODUCT_PARAMS)

        # Assert
        assert product.seller_id == 'seller-winner'
        uow.product_command_repo.create.assert_awaited_once()
        assert uow.commits == 1
