from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.errors import translate_store_errors
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User, UserStatus


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address, ignoring soft-deleted accounts"""
        stmt = select(User).where(User.email == email, User.deleted_at.is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_active_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID if active and not soft-deleted"""
        stmt = select(User).where(
            User.id == user_id,
            User.deleted_at.is_(None),
            User.status == UserStatus.active,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def set_password(self, user_id: UUID, password_hash: str) -> bool:
        """Store a new password hash"""
        stmt = update(User).where(User.id == user_id).values(password_hash=password_hash)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
