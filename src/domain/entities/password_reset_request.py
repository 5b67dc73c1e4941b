"""
PasswordResetRequest Entity

One outstanding password reset attempt.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Interpret a naive timestamp (as SQLite returns them) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class PasswordResetRequest(SQLModel, table=True):
    """
    PasswordResetRequest entity - binds an account to a token digest.

    Business Rules:
    - At most one row per user; expired rows are removed before a new insert
    - token_digest is HMAC-SHA256 of the emailed token, never the token itself
    - Deleted on redemption together with every other row of the same user
    - Expired requests are rejected at redemption time
    """

    __tablename__ = "password_reset_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", unique=True)
    token_digest: str = Field(max_length=64)  # HMAC-SHA256 hex output

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (
        Index("idx_password_reset_request_expires_at", "expires_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        """A request is valid only while expires_at is strictly in the future."""
        return as_utc(self.expires_at) <= as_utc(now)
