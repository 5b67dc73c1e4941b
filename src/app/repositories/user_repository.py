from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User directory interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address, ignoring soft-deleted accounts"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_active_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID only if the account is active and not soft-deleted"""
        pass

    @abstractmethod
    async def set_password(self, user_id: UUID, password_hash: str) -> bool:
        """Store a new password hash. Returns False if no such user exists."""
        pass
