from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.seller_entity import SellerEntity


class CreateProductUseCase:
    """
    List a product for the caller.

    Flow (one unit of work):
    1. Load the caller and their seller profile
    2. Open the seller profile on first listing and flag the user as a seller
    3. Insert the product and commit

    Two first listings racing for the same user collide on seller.user_id; the loser
    retries once and picks up the seller the winner created.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create(
        self,
        *,
        user_id: str,
        title: str,
        description: str,
        price: float,
        category: str,
        subcategory: str,
        condition: str,
        city: str,
        region: str,
        brand: Optional[str] = None,
        images: Optional[list[str]] = None,
        specifications: Optional[dict[str, Any]] = None,
    ) -> ProductEntity:
        # Validate before touching the database; seller_id is resolved below
        product = ProductEntity(
            seller_id='',
            title=title,
            description=description,
            price=price,
            category=category,
            subcategory=subcategory,
            condition=condition,  # type: ignore[arg-type]
            city=city,
            region=region,
            country=settings.DEFAULT_COUNTRY,
            brand=brand,
            images=images if images is not None else [],
            specifications=specifications if specifications is not None else {},
        )

        try:
            return await self._list_for(user_id=user_id, product=product)
        except ConflictError:
            Logger.base.warning(f'🔁 [CREATE_PRODUCT] Seller for {user_id} opened concurrently')
            return await self._list_for(user_id=user_id, product=product)

    async def _list_for(self, *, user_id: str, product: ProductEntity) -> ProductEntity:
        opened_seller = False

        async with self.uow:
            user = await self.uow.user_query_repo.get_by_id(user_id)
            if user is None:
                raise NotFoundError('User not found')

            seller = await self.uow.seller_query_repo.get_by_user_id(user_id)
            if seller is None:
                seller = await self.uow.seller_command_repo.create(
                    SellerEntity.open_for(
                        user, business_name_suffix=settings.SELLER_BUSINESS_NAME_SUFFIX
                    )
                )
                await self.uow.user_command_repo.mark_as_seller(user_id=user_id)
                user.is_seller = True
                opened_seller = True

            product.seller_id = seller.id  # type: ignore[assignment]
            created = await self.uow.product_command_repo.create(product)
            await self.uow.commit()

        if opened_seller:
            metrics.sellers_opened.inc()
            Logger.base.info(f'🏪 [CREATE_PRODUCT] Opened seller {seller.id} for user {user_id}')

        seller.user = user
        created.seller = seller
        metrics.record_product_write(operation='create')
        Logger.base.info(f'✅ [CREATE_PRODUCT] Created product {created.id}')
        return created
