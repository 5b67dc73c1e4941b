"""
Password Reset Use Case DTOs (Data Transfer Objects)

Response classes returned by the password reset use cases.
"""

from pydantic import BaseModel


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    status: str
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    message: str


class PurgeExpiredResetRequestsResponse(BaseModel):
    """Response for purge expired reset requests use case"""

    status: str
    purged: int
