"""
Unit tests for the bcrypt password hasher and the JWT token service
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from pydantic import SecretStr
import pytest

from src.service.marketplace.domain.value_object.token_verification import (
    ExpiredToken,
    InvalidToken,
    ValidToken,
)
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.marketplace.driven_adapter.security.jwt_token_service import JwtTokenService
from test.service.marketplace.unit.helpers import make_user


SECRET = 'unit-test-secret'


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(secret=SECRET, algorithm='HS256', expire_days=7)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


@pytest.mark.unit
class TestJwtTokenService:
    def test_generate_then_verify(self, token_service: JwtTokenService) -> None:
        token = token_service.generate_token(make_user())

        verification = token_service.verify_token(token)

        assert isinstance(verification, ValidToken)
        assert verification.claims.user_id == 'user-1'
        assert verification.claims.email == 'seller@test.com'

    def test_payload__expires_in_configured_days(self, token_service: JwtTokenService) -> None:
        token = token_service.generate_token(make_user())

        payload = jwt.decode(token, SECRET, algorithms=['HS256'])

        assert payload['sub'] == payload['user_id'] == 'user-1'
        assert payload['exp'] - payload['iat'] == int(timedelta(days=7).total_seconds())

    def test_expired(self, token_service: JwtTokenService) -> None:
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {'sub': 'user-1', 'user_id': 'user-1', 'email': 'a@test.com', 'exp': past},
            SECRET,
            algorithm='HS256',
        )

        assert isinstance(token_service.verify_token(token), ExpiredToken)

    @pytest.mark.parametrize(
        'token',
        [
            'not-a-jwt',
            '',
            jwt.encode({'sub': 'user-1', 'exp': 9999999999}, 'other-secret', algorithm='HS256'),
            # Missing exp
            jwt.encode({'sub': 'user-1', 'email': 'a@test.com'}, SECRET, algorithm='HS256'),
            # Missing email
            jwt.encode({'sub': 'user-1', 'exp': 9999999999}, SECRET, algorithm='HS256'),
        ],
    )
    def test_invalid(self, token_service: JwtTokenService, token: str) -> None:
        assert isinstance(token_service.verify_token(token), InvalidToken)

    def test_unsaved_user__no_token(self, token_service: JwtTokenService) -> None:
        with pytest.raises(ValueError):
            token_service.generate_token(make_user(id=None))


@pytest.mark.unit
class TestBcryptPasswordHasher:
    def test_hash_then_verify(self, password_hasher: BcryptPasswordHasher) -> None:
        hashed = password_hasher.hash_password(plain_password=SecretStr('P@ssw0rd123'))

        assert hashed != 'P@ssw0rd123'
        assert password_hasher.verify_password(
            plain_password=SecretStr('P@ssw0rd123'), hashed_password=hashed
        )
        assert not password_hasher.verify_password(
            plain_password=SecretStr('wrong_password'), hashed_password=hashed
        )

    def test_malformed_hash__false(self, password_hasher: BcryptPasswordHasher) -> None:
        assert not password_hasher.verify_password(
            plain_password=SecretStr('P@ssw0rd123'), hashed_password='not-a-bcrypt-hash'
        )

    def test_long_password__truncated_to_72_bytes(
        self, password_hasher: BcryptPasswordHasher
    ) -> None:
        long_password = 'x' * 100

        hashed = password_hasher.hash_password(plain_password=SecretStr(long_password))

        assert bcrypt.checkpw(b'x' * 72, hashed.encode('utf-8'))
