from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity, UserProfileUpdate


class UpdateUserProfileUseCase:
    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        user_command_repo: IUserCommandRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.user_command_repo = user_command_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            user_command_repo=user_command_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def update(
        self, *, user_id: str, caller_id: str, profile_update: UserProfileUpdate
    ) -> UserEntity:
        """Self-only profile edit; a new password is re-hashed before saving."""
        if caller_id != user_id:
            raise ForbiddenError('Forbidden: You can only update your own profile')

        user = await self.user_query_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError('User not found')

        new_password = profile_update.new_password()
        user.apply(profile_update)
        if new_password is not None:
            user.set_password(new_password, self.password_hasher)

        updated = await self.user_command_repo.update(user)
        Logger.base.info(f'✅ [UPDATE_PROFILE] Updated user {user_id}')
        return updated
