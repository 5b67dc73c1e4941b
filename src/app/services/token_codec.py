"""
Token Codec

Generates reset tokens and the keyed digests stored in their place.
"""

import hashlib
import hmac
import secrets

from src.app.settings import PasswordResetSettings

TOKEN_BYTES = 32  # 256 bits of entropy


class TokenCodec:
    """
    Generate, digest and verify password reset tokens.

    - Tokens come from the secrets CSPRNG, hex encoded (64 chars)
    - Digest is HMAC-SHA256 under the server secret key
    - Verification compares digests in constant time
    """

    def __init__(self, settings: PasswordResetSettings):
        secret_key = settings.digest_secret_key.get_secret_value()
        if not secret_key:
            raise ValueError("Digest secret key must not be empty")
        self._secret_key = secret_key

    def generate(self) -> str:
        return secrets.token_hex(TOKEN_BYTES)

    def digest(self, token: str) -> str:
        return hmac.new(self._secret_key, token.encode("utf-8"), hashlib.sha256).hexdigest()

    def verify(self, token: str, stored_digest: str) -> bool:
        # compare_digest returns False on length mismatch without inspecting content
        return hmac.compare_digest(
            self.digest(token).encode("utf-8"), stored_digest.encode("utf-8")
        )
