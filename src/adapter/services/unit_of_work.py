from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.password_reset_request_repository import (
    PasswordResetRequestRepository,
)
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import StoreError, UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.password_reset_requests = PasswordResetRequestRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"commit failed: {exc}") from exc

    async def rollback(self):
        await self.session.rollback()
