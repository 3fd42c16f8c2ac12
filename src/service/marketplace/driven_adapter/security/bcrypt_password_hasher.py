import bcrypt
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher


# bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
BCRYPT_MAX_BYTES = 72


def _password_bytes(plain_password: SecretStr) -> bytes:
    return plain_password.get_secret_value().encode('utf-8')[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """Concrete bcrypt implementation of IPasswordHasher"""

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        """Hash password using bcrypt with SecretStr for security"""
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode('utf-8'))
        except ValueError:
            # Malformed stored hash
            return False
