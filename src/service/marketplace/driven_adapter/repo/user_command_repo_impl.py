from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from src.platform.database.session_scope import SessionScopedRepo
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driven_adapter.model._columns import utc_now
from src.service.marketplace.driven_adapter.model.user_model import UserModel
from src.service.marketplace.driven_adapter.repo.model_mapper import user_to_entity


class UserCommandRepoImpl(SessionScopedRepo, IUserCommandRepo):
    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self._get_session() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                first_name=user_entity.first_name,
                last_name=user_entity.last_name,
                phone=user_entity.phone,
                city=user_entity.city,
                region=user_entity.region,
                country=user_entity.country,
                is_verified=user_entity.is_verified,
                is_seller=user_entity.is_seller,
            )

            session.add(user_model)
            try:
                await self._save(session)
            except IntegrityError as e:
                raise ConflictError('User already exists') from e

            return user_to_entity(user_model)

    @Logger.io
    async def update(self, user_entity: UserEntity) -> UserEntity:
        async with self._get_session() as session:
            user_model = await session.get(UserModel, user_entity.id)
            if user_model is None:
                raise NotFoundError('User not found')

            user_model.first_name = user_entity.first_name
            user_model.last_name = user_entity.last_name
            user_model.phone = user_entity.phone
            user_model.city = user_entity.city
            user_model.region = user_entity.region
            user_model.hashed_password = user_entity.hashed_password

            await self._save(session)
            return user_to_entity(user_model)

    @Logger.io
    async def mark_as_seller(self, *, user_id: str) -> None:
        async with self._get_session() as session:
            await session.execute(
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(is_seller=True, updated_at=utc_now())
            )
            await self._save(session)
