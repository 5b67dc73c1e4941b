"""
Password Reset Use Cases

Issuing, redeeming and purging password reset requests.
"""

from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .purge_expired_reset_requests_use_case import PurgeExpiredResetRequestsUseCase
from .dtos import (
    ForgotPasswordResponse,
    ResetPasswordResponse,
    PurgeExpiredResetRequestsResponse,
)

__all__ = [
    # Use Cases
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "PurgeExpiredResetRequestsUseCase",
    # DTOs - Responses
    "ForgotPasswordResponse",
    "ResetPasswordResponse",
    "PurgeExpiredResetRequestsResponse",
]
