"""
Bearer token issuance and verification (PyJWT)
"""

from datetime import datetime, timedelta, timezone

import jwt

from src.platform.config.core_setting import settings
from src.service.marketplace.app.interface.i_token_service import ITokenService
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.value_object.token_verification import (
    ExpiredToken,
    InvalidToken,
    TokenClaims,
    TokenVerification,
    ValidToken,
)


class JwtTokenService(ITokenService):
    def __init__(
        self,
        *,
        secret: str | None = None,
        algorithm: str | None = None,
        expire_days: int | None = None,
    ) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.token_expire_days = expire_days or settings.ACCESS_TOKEN_EXPIRE_DAYS

    def generate_token(self, user_entity: UserEntity) -> str:
        if not user_entity.id:
            raise ValueError('Cannot issue a token for an unsaved user')

        now = datetime.now(timezone.utc)
        payload = {
            'sub': user_entity.id,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'iat': now,
            'exp': now + timedelta(days=self.token_expire_days),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> TokenVerification:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['exp', 'sub']},
            )
        except jwt.ExpiredSignatureError:
            return ExpiredToken()
        except jwt.PyJWTError as e:
            return InvalidToken(reason=str(e))

        user_id = payload.get('user_id') or payload.get('sub')
        email = payload.get('email')
        if not isinstance(user_id, str) or not isinstance(email, str):
            return InvalidToken(reason='missing user claims')

        return ValidToken(claims=TokenClaims(user_id=user_id, email=email))
