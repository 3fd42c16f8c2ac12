from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel
from src.service.marketplace.driven_adapter.repo.model_mapper import (
    newest_first,
    product_to_entity,
    seller_to_entity,
    user_to_entity,
)


class UserQueryRepoImpl(SessionScopedRepo, IUserQueryRepo):
    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        async with self._get_session() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return user_to_entity(user_model)

    @Logger.io
    async def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        async with self._get_session() as session:
            user_model = await session.get(UserModel, user_id)
            return user_to_entity(user_model) if user_model else None

    @Logger.io
    async def exists_by_email(self, email: str) -> bool:
        async with self._get_session() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def get_profile(self, user_id: str) -> Optional[UserEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(UserModel)
                .where(UserModel.id == user_id)
                .options(selectinload(UserModel.seller).selectinload(SellerModel.products))
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            user = user_to_entity(user_model)
            if user_model.seller is not None:
                user.seller = seller_to_entity(user_model.seller)
                user.seller.products = [
                    product_to_entity(p) for p in newest_first(user_model.seller.products)
                ]
            return user
