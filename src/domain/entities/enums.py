"""
Password Reset Service Domain Enums
"""

from enum import Enum


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    disabled = "disabled"
