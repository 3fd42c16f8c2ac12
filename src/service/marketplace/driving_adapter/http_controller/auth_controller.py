from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.login_use_case import LoginUseCase
from src.service.marketplace.app.command.register_user_use_case import RegisterUserUseCase
from src.service.marketplace.driving_adapter.schema.auth_schema import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)


router = APIRouter()


@router.post('/register', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> AuthResponse:
    session = await use_case.register(
        email=request.email,
        password=request.password.get_secret_value(),
        first_name=request.first_name,
        last_name=request.last_name,
        phone=request.phone,
        city=request.city,
        region=request.region,
    )
    return AuthResponse.from_session(session)


@router.post('/login', status_code=status.HTTP_200_OK)
@Logger.io
async def login(
    request: LoginRequest,
    use_case: LoginUseCase = Depends(LoginUseCase.depends),
) -> AuthResponse:
    session = await use_case.login(
        email=request.email, password=request.password.get_secret_value()
    )
    return AuthResponse.from_session(session)
