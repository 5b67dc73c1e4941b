"""
Password Reset Service Domain Entities

Each entity in its own file.
"""

from .enums import UserStatus
from .user import User
from .password_reset_request import PasswordResetRequest, as_utc, utcnow

__all__ = [
    # Enums
    "UserStatus",
    # Entities
    "User",
    "PasswordResetRequest",
    # Time helpers
    "as_utc",
    "utcnow",
]
