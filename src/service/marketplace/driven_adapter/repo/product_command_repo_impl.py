from sqlalchemy import delete

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.review_model import ReviewModel
from src.service.marketplace.driven_adapter.repo.model_mapper import product_to_entity


class ProductCommandRepoImpl(SessionScopedRepo, IProductCommandRepo):
    """Product Command Repository Implementation - CQRS Write Side"""

    @Logger.io
    async def create(self, product_entity: ProductEntity) -> ProductEntity:
        async with self._get_session() as session:
            product_model = ProductModel(
                seller_id=product_entity.seller_id,
                title=product_entity.title,
                description=product_entity.description,
                price=product_entity.price,
                brand=product_entity.brand,
                category=product_entity.category,
                subcategory=product_entity.subcategory,
                condition=product_entity.condition.value,
                images=list(product_entity.images),
                specifications=dict(product_entity.specifications),
                city=product_entity.city,
                region=product_entity.region,
                country=product_entity.country,
            )
            session.add(product_model)
            await self._save(session)

            return product_to_entity(product_model)

    @Logger.io
    async def update(self, product_entity: ProductEntity) -> ProductEntity:
        async with self._get_session() as session:
            product_model = await session.get(ProductModel, product_entity.id)
            if product_model is None:
                raise NotFoundError('Product not found')

            product_model.title = product_entity.title
            product_model.description = product_entity.description
            product_model.price = product_entity.price
            product_model.brand = product_entity.brand
            product_model.category = product_entity.category
            product_model.subcategory = product_entity.subcategory
            product_model.condition = product_entity.condition.value
            # New containers so the JSON columns are flagged dirty
            product_model.images = list(product_entity.images)
            product_model.specifications = dict(product_entity.specifications)
            product_model.city = product_entity.city
            product_model.region = product_entity.region

            await self._save(session)
            return product_to_entity(product_model)

    @Logger.io
    async def delete(self, *, product_id: str) -> None:
        async with self._get_session() as session:
            await session.execute(delete(ReviewModel).where(ReviewModel.product_id == product_id))
            await session.execute(delete(ProductModel).where(ProductModel.id == product_id))
            await self._save(session)
