import attrs

from src.service.marketplace.domain.entity.user_entity import UserEntity


@attrs.frozen
class AuthSession:
    """Authenticated user plus the bearer token issued for them."""

    user: UserEntity
    token: str = attrs.field(repr=False)
