from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.value_object.token_verification import TokenVerification


class ITokenService(ABC):
    @abstractmethod
    def generate_token(self, user_entity: UserEntity) -> str:
        pass

    @abstractmethod
    def verify_token(self, token: str) -> TokenVerification:
        """Never raises: failures come back as ExpiredToken / InvalidToken"""
        pass
