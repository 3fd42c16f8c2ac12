from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User Command Repository - Handles write operations"""

    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Raises ConflictError when the email is already registered"""
        pass

    @abstractmethod
    async def update(self, user_entity: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    async def mark_as_seller(self, *, user_id: str) -> None:
        pass
