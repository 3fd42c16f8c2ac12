"""
Shared schema building blocks

Wire format is camelCase; Python attributes stay snake_case.
"""

from typing import Annotated, Any

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, SecretStr
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from src.service.marketplace.domain.value_object.update_field import UNSET


PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72  # bcrypt input limit, in UTF-8 bytes


def _require_text(value: str) -> str:
    # Blank strings count as missing, same as an absent field
    if not value.strip():
        raise PydanticCustomError('missing', 'Field required')
    return value


RequiredStr = Annotated[str, AfterValidator(_require_text)]


def _check_email(value: str) -> str:
    # Format check only; the address is stored exactly as sent
    validate_email(value, check_deliverability=False)
    return value


EmailAddress = Annotated[str, AfterValidator(_require_text), AfterValidator(_check_email)]


def check_password_length(value: SecretStr) -> SecretStr:
    plain = value.get_secret_value()
    if len(plain) < PASSWORD_MIN_LENGTH:
        raise ValueError(f'password must be at least {PASSWORD_MIN_LENGTH} characters')
    if len(plain.encode('utf-8')) > PASSWORD_MAX_LENGTH:
        raise ValueError(f'password must be at most {PASSWORD_MAX_LENGTH} bytes')
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def sent_fields(self) -> dict[str, Any]:
        """Fields present in the request body (null included), everything else UNSET."""
        return {
            name: getattr(self, name) if name in self.model_fields_set else UNSET
            for name in type(self).model_fields
        }


class MessageResponse(CamelModel):
    message: str
