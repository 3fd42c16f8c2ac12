"""Outcome of verifying a bearer token."""

from typing import TypeAlias

import attrs


@attrs.frozen
class TokenClaims:
    user_id: str
    email: str


@attrs.frozen
class ValidToken:
    claims: TokenClaims


@attrs.frozen
class ExpiredToken:
    pass


@attrs.frozen
class InvalidToken:
    reason: str = ''


TokenVerification: TypeAlias = ValidToken | ExpiredToken | InvalidToken
