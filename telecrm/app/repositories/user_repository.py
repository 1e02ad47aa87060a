from abc import ABC, abstractmethod
from typing import List, Optional

from telecrm.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_open_id(self, open_id: str) -> Optional[User]:
        """Get user by external identity key"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """Get all users, newest first"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
