from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User Query Repository - Handles read operations"""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def get_profile(self, user_id: str) -> Optional[UserEntity]:
        """User with seller profile and product summaries (newest first)"""
        pass
