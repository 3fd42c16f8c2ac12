from typing import Optional

from sqlalchemy import select

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel
from src.service.marketplace.driven_adapter.repo.model_mapper import seller_to_entity


class SellerQueryRepoImpl(SessionScopedRepo, ISellerQueryRepo):
    @Logger.io
    async def get_by_user_id(self, user_id: str) -> Optional[SellerEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(SellerModel).where(SellerModel.user_id == user_id)
            )
            seller_model = result.scalar_one_or_none()
            return seller_to_entity(seller_model) if seller_model else None
