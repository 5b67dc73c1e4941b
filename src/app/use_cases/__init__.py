"""
Use Cases

Organized into domain folders:
- password_reset/: Forgot password, reset password, purge expired requests
"""

from .password_reset import (
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    PurgeExpiredResetRequestsUseCase,
)

__all__ = [
    # Password reset
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "PurgeExpiredResetRequestsUseCase",
]
