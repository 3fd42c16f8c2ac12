from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_token_service import ITokenService
from src.service.marketplace.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.value_object.auth_session import AuthSession


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        token_service: ITokenService = Depends(Provide[Container.token_service]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
            token_service=token_service,
        )

    @Logger.io
    async def register(
        self,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        city: str,
        region: str,
        phone: Optional[str] = None,
    ) -> AuthSession:
        """Create the account and return it with a fresh bearer token."""
        if await self.user_query_repo.exists_by_email(email):
            Logger.base.warning(f'⚠️ [REGISTER] Email already registered: {email}')
            raise ConflictError('User already exists')

        user_entity = UserEntity(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            city=city,
            region=region,
            country=settings.DEFAULT_COUNTRY,
        )
        user_entity.set_password(password, self.password_hasher)

        # The unique index still guards the race between the check above and the insert
        created_user = await self.user_command_repo.create(user_entity)
        token = self.token_service.generate_token(created_user)

        metrics.user_registrations.inc()
        Logger.base.info(f'✅ [REGISTER] Created user {created_user.id}')
        return AuthSession(user=created_user, token=token)
