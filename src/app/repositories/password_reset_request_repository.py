from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetRequest


class CreateStatus(str, Enum):
    """Outcome of inserting a reset request"""

    created = "created"
    conflict = "conflict"
    failed = "failed"


@dataclass(frozen=True)
class CreateOutcome:
    """
    Typed result of IPasswordResetRequestRepository.create.

    Lets use cases branch on a uniqueness violation without knowing
    which database raised it.
    """

    status: CreateStatus
    request: Optional[PasswordResetRequest] = None
    detail: Optional[str] = None

    @classmethod
    def created(cls, request: PasswordResetRequest) -> "CreateOutcome":
        return cls(status=CreateStatus.created, request=request)

    @classmethod
    def conflict(cls) -> "CreateOutcome":
        return cls(status=CreateStatus.conflict)

    @classmethod
    def failed(cls, detail: str) -> "CreateOutcome":
        return cls(status=CreateStatus.failed, detail=detail)


class IPasswordResetRequestRepository(ABC):
    """PasswordResetRequest repository interface - application layer"""

    @abstractmethod
    async def create(
        self, user_id: UUID, token_digest: str, expires_at: datetime
    ) -> CreateOutcome:
        """Insert a reset request; conflict if the user already has one"""
        pass

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[PasswordResetRequest]:
        """Get reset request by ID"""
        pass

    @abstractmethod
    async def delete_by_id(self, request_id: UUID) -> bool:
        """Delete one reset request. Returns False if it was already gone."""
        pass

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every reset request of a user. Returns count."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime, user_id: Optional[UUID] = None) -> int:
        """Delete requests with expires_at <= now, optionally for one user. Returns count."""
        pass
