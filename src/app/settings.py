"""
Password reset settings.

Built once at startup from ApplicationConfig and passed explicitly to the
token codec and the use cases.
"""

from datetime import timedelta
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, SecretBytes, field_validator


class PasswordResetSettings(BaseModel):
    """Validated, immutable configuration for the reset flow"""

    model_config = ConfigDict(frozen=True)

    reset_link_base_url: str
    digest_secret_key: SecretBytes
    reset_token_ttl: timedelta = timedelta(hours=1)
    conceal_unknown_email: bool = False

    @field_validator("reset_link_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.rstrip("/")
        if not value:
            raise ValueError("Reset link base URL must not be empty")
        return value

    @field_validator("digest_secret_key")
    @classmethod
    def _require_secret(cls, value: SecretBytes) -> SecretBytes:
        if not value.get_secret_value():
            raise ValueError("Digest secret key must not be empty")
        return value

    @field_validator("reset_token_ttl")
    @classmethod
    def _require_positive_ttl(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("Reset token TTL must be positive")
        return value

    @classmethod
    def from_config(cls, config) -> "PasswordResetSettings":
        secret = config.DIGEST_SECRET_KEY
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        return cls(
            reset_link_base_url=config.RESET_LINK_BASE_URL,
            digest_secret_key=secret,
            reset_token_ttl=timedelta(seconds=int(config.RESET_TOKEN_TTL_SECONDS)),
            conceal_unknown_email=bool(config.RESET_CONCEAL_UNKNOWN_EMAIL),
        )

    def reset_link(self, request_id: str, token: str) -> str:
        query = urlencode({"id": request_id, "token": token})
        return f"{self.reset_link_base_url}/password/reset?{query}"
