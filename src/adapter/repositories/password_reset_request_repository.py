import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.errors import translate_store_errors
from src.app.repositories.password_reset_request_repository import (
    CreateOutcome,
    IPasswordResetRequestRepository,
)
from src.domain.entities import PasswordResetRequest

logger = logging.getLogger(__name__)


class PasswordResetRequestRepository(IPasswordResetRequestRepository):
    """PasswordResetRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self, user_id: UUID, token_digest: str, expires_at: datetime
    ) -> CreateOutcome:
        """
        Insert a reset request.

        The unique constraint on user_id decides conflicts, so two
        instances racing for the same user cannot both succeed. The
        caller must roll back after a conflict or failure.
        """
        reset_request = PasswordResetRequest(
            user_id=user_id, token_digest=token_digest, expires_at=expires_at
        )
        try:
            self.session.add(reset_request)
            await self.session.flush()
            await self.session.refresh(reset_request)
        except IntegrityError:
            return CreateOutcome.conflict()
        except SQLAlchemyError as exc:
            logger.error(f"Insert of password reset request failed: {exc}")
            return CreateOutcome.failed(str(exc))
        return CreateOutcome.created(reset_request)

    @translate_store_errors
    async def get_by_id(self, request_id: UUID) -> Optional[PasswordResetRequest]:
        """Get reset request by ID"""
        stmt = select(PasswordResetRequest).where(PasswordResetRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def delete_by_id(self, request_id: UUID) -> bool:
        """Delete one reset request; False if another transaction got there first"""
        stmt = delete(PasswordResetRequest).where(PasswordResetRequest.id == request_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    @translate_store_errors
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every reset request of a user"""
        stmt = delete(PasswordResetRequest).where(PasswordResetRequest.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    @translate_store_errors
    async def delete_expired(self, now: datetime, user_id: Optional[UUID] = None) -> int:
        """Delete requests with expires_at <= now"""
        stmt = delete(PasswordResetRequest).where(PasswordResetRequest.expires_at <= now)
        if user_id is not None:
            stmt = stmt.where(PasswordResetRequest.user_id == user_id)
        # Stored timestamps may come back naive; skip in-session evaluation
        stmt = stmt.execution_options(synchronize_session=False)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
