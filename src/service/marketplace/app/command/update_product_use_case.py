from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity, ProductUpdate


class UpdateProductUseCase:
    def __init__(
        self,
        *,
        product_query_repo: IProductQueryRepo,
        product_command_repo: IProductCommandRepo,
    ) -> None:
        self.product_query_repo = product_query_repo
        self.product_command_repo = product_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
    ) -> Self:
        return cls(product_query_repo=product_query_repo, product_command_repo=product_command_repo)

    @Logger.io
    async def update(
        self, *, product_id: str, user_id: str, product_update: ProductUpdate
    ) -> ProductEntity:
        product = await self.product_query_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError('Product not found')

        if not product.is_owned_by(user_id):
            Logger.base.warning(f'🚫 [UPDATE_PRODUCT] {user_id} is not the owner of {product_id}')
            raise ForbiddenError('Forbidden: You can only update your own products')

        if product_update.is_empty():
            return product

        seller = product.seller
        product.apply(product_update)
        updated = await self.product_command_repo.update(product)
        updated.seller = seller

        metrics.record_product_write(operation='update')
        Logger.base.info(f'✅ [UPDATE_PRODUCT] Updated product {product_id}')
        return updated
