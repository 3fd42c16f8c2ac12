from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.update_user_profile_use_case import (
    UpdateUserProfileUseCase,
)
from src.service.marketplace.app.query.get_user_profile_use_case import GetUserProfileUseCase
from src.service.marketplace.domain.value_object.token_verification import TokenClaims
from src.service.marketplace.driving_adapter.http_controller.auth.bearer_auth import (
    get_current_claims,
)
from src.service.marketplace.driving_adapter.schema.user_schema import (
    UpdateUserRequest,
    UserProfileResponse,
    UserResponse,
)


router = APIRouter()


@router.get('/{user_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_user(
    user_id: str,
    use_case: GetUserProfileUseCase = Depends(GetUserProfileUseCase.depends),
) -> UserProfileResponse:
    user = await use_case.get_profile(user_id=user_id)
    return UserProfileResponse.from_entity(user)


@router.put('/{user_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    claims: TokenClaims = Depends(get_current_claims),
    use_case: UpdateUserProfileUseCase = Depends(UpdateUserProfileUseCase.depends),
) -> UserResponse:
    user = await use_case.update(
        user_id=user_id, caller_id=claims.user_id, profile_update=request.to_update()
    )
    return UserResponse.from_entity(user)
