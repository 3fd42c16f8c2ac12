"""
Bearer token guard for mutating endpoints (stateless, no DB query)
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.service.marketplace.app.interface.i_token_service import ITokenService
from src.service.marketplace.domain.value_object.token_verification import (
    ExpiredToken,
    TokenClaims,
    ValidToken,
)


# auto_error=False: a missing header or a non-Bearer scheme yields None instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: ITokenService = Depends(Provide[Container.token_service]),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError('Unauthorized')

    verification = token_service.verify_token(credentials.credentials)

    if isinstance(verification, ValidToken):
        return verification.claims
    if isinstance(verification, ExpiredToken):
        raise AuthenticationError('Token expired')
    raise AuthenticationError('Invalid token')
