from typing import Optional

from pydantic import ConfigDict, SecretStr, field_validator

from src.service.marketplace.domain.value_object.auth_session import AuthSession
from src.service.marketplace.driving_adapter.schema.base_schema import (
    CamelModel,
    EmailAddress,
    RequiredStr,
    check_password_length,
)
from src.service.marketplace.driving_adapter.schema.user_schema import UserResponse


class RegisterRequest(CamelModel):
    email: EmailAddress
    password: SecretStr
    first_name: RequiredStr
    last_name: RequiredStr
    phone: Optional[str] = None
    city: RequiredStr
    region: RequiredStr

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'email': 'abebe@example.com',
                'password': 'P@ssw0rd123',
                'firstName': 'Abebe',
                'lastName': 'Kebede',
                'phone': '+251911000000',
                'city': 'Addis Ababa',
                'region': 'Addis Ababa',
            }
        }
    )

    @field_validator('password')
    @classmethod
    def password_length(cls, value: SecretStr) -> SecretStr:
        return check_password_length(value)


class LoginRequest(CamelModel):
    email: RequiredStr
    password: SecretStr

    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'abebe@example.com', 'password': 'P@ssw0rd123'}}
    )


class AuthResponse(CamelModel):
    user: UserResponse
    token: str

    @classmethod
    def from_session(cls, session: AuthSession) -> 'AuthResponse':
        return cls(user=UserResponse.from_entity(session.user), token=session.token)
