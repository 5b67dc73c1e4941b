import bcrypt

from src.app.services.password_hasher import MAX_PASSWORD_BYTES, PasswordHasher, PasswordRejected


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation of PasswordHasher (cost factor 12 by default)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        # Never let bcrypt truncate silently
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise PasswordRejected(f"Password is longer than {MAX_PASSWORD_BYTES} bytes")
        try:
            return bcrypt.hashpw(encoded, bcrypt.gensalt(self.rounds)).decode("utf-8")
        except ValueError as exc:
            raise PasswordRejected(str(exc)) from exc

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False
