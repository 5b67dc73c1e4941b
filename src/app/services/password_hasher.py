from abc import ABC, abstractmethod

# bcrypt reads at most this many bytes of input
MAX_PASSWORD_BYTES = 72


class PasswordRejected(Exception):
    """The hasher cannot accept this password (e.g. too many bytes)"""


class PasswordHasher(ABC):
    """One-way password hashing capability - application layer"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Raises PasswordRejected if the password cannot be hashed"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass
