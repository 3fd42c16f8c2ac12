from sqlalchemy.exc import IntegrityError

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel
from src.service.marketplace.driven_adapter.repo.model_mapper import seller_to_entity


class SellerCommandRepoImpl(SessionScopedRepo, ISellerCommandRepo):
    @Logger.io
    async def create(self, seller_entity: SellerEntity) -> SellerEntity:
        async with self._get_session() as session:
            seller_model = SellerModel(
                user_id=seller_entity.user_id,
                business_name=seller_entity.business_name,
                rating=seller_entity.rating,
                total_sales=seller_entity.total_sales,
            )
            session.add(seller_model)
            try:
                await self._save(session)
            except IntegrityError as e:
                raise ConflictError('Seller profile already exists') from e

            return seller_to_entity(seller_model)
