from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import DomainError
from src.service.marketplace.domain.value_object.update_field import (
    UNSET,
    UnsetType,
    is_blank,
    is_set,
    sent_values,
)


if TYPE_CHECKING:
    from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
    from src.service.marketplace.domain.entity.seller_entity import SellerEntity


def _required_text(field_name: str):
    def validate(instance, attribute, value):
        if not isinstance(value, str) or not value.strip():
            raise DomainError(f'{field_name} cannot be empty')

    return validate


def validate_phone(instance, attribute, value):
    if value is not None and not isinstance(value, str):
        raise DomainError('phone must be a string')


@attrs.define
class UserEntity:
    email: str = attrs.field(validator=_required_text('email'))
    first_name: str = attrs.field(validator=_required_text('firstName'))
    last_name: str = attrs.field(validator=_required_text('lastName'))
    city: str = attrs.field(validator=_required_text('city'))
    region: str = attrs.field(validator=_required_text('region'))
    country: str = ''
    phone: Optional[str] = attrs.field(default=None, validator=validate_phone)
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[str] = None
    is_verified: bool = False
    is_seller: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Seller profile with product summaries, filled by the profile query
    seller: Optional['SellerEntity'] = None

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        """Set password using provided password hasher"""
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def check_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> bool:
        if not self.hashed_password:
            return False
        return password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        )

    def apply(self, update: 'UserProfileUpdate') -> None:
        for name, value in update.profile_fields().items():
            setattr(self, name, value)


@attrs.define
class UserProfileUpdate:
    first_name: str | None | UnsetType = UNSET
    last_name: str | None | UnsetType = UNSET
    phone: str | None | UnsetType = UNSET
    city: str | None | UnsetType = UNSET
    region: str | None | UnsetType = UNSET
    password: str | None | UnsetType = attrs.field(default=UNSET, repr=False)

    def profile_fields(self) -> dict[str, Any]:
        fields = sent_values(self, clearable=frozenset({'phone'}))
        fields.pop('password', None)
        return fields

    def new_password(self) -> str | None:
        """Plain password to re-hash, or None when unchanged"""
        if not is_set(self.password) or is_blank(self.password):
            return None
        return self.password
