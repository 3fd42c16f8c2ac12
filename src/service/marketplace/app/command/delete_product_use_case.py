from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo


class DeleteProductUseCase:
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
    async def delete(self, *, product_id: str, user_id: str) -> None:
        product = await self.product_query_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError('Product not found')

        if not product.is_owned_by(user_id):
            raise ForbiddenError('Forbidden: You can only delete your own products')

        await self.product_command_repo.delete(product_id=product_id)

        metrics.record_product_write(operation='delete')
        Logger.base.info(f'🗑️ [DELETE_PRODUCT] Deleted product {product_id} and its reviews')
