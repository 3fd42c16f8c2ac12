from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_token_service import ITokenService
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.value_object.auth_session import AuthSession


class LoginUseCase:
    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        token_service: ITokenService = Depends(Provide[Container.token_service]),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
            token_service=token_service,
        )

    @Logger.io
    async def login(self, *, email: str, password: str) -> AuthSession:
        user_entity = await self.user_query_repo.get_by_email(email)

        # Same message for unknown email and wrong password
        if user_entity is None or not user_entity.check_password(password, self.password_hasher):
            metrics.record_login(success=False)
            raise AuthenticationError('Invalid email or password')

        metrics.record_login(success=True)
        Logger.base.info(f'🔑 [LOGIN] User {user_entity.id} logged in')
        return AuthSession(user=user_entity, token=self.token_service.generate_token(user_entity))
