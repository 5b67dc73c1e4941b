"""
Reset Password Use Case

Redeems a reset token: verifies it, changes the password and invalidates
every outstanding reset request of the account in one transaction.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.mailer import Mailer
from src.app.services.password_hasher import PasswordHasher, PasswordRejected
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import StoreError, UnitOfWork
from src.domain.entities import utcnow
from .dtos import ResetPasswordResponse

logger = logging.getLogger(__name__)


def _invalid_token() -> Result[ResetPasswordResponse]:
    return Return.err(Error("INVALID_TOKEN", "Invalid or expired password reset token"))


def _server_error() -> Result[ResetPasswordResponse]:
    return Return.err(Error("SERVER_ERROR", "Could not reset password"))


class ResetPasswordUseCase:
    """
    Use case for redeeming a password reset token.

    Business Rules:
    - Unknown id, wrong token, expired request and inactive account all
      produce the same INVALID_TOKEN error
    - The redeemed request is deleted, not marked used; if it is already
      gone a concurrent redemption won and this one fails
    - A password the hasher refuses leaves the request redeemable
    - Password update and deletion of all the user's requests commit together
    - The "password changed" email is best effort
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_codec: TokenCodec,
        password_hasher: PasswordHasher,
        mailer: Mailer,
    ):
        self.uow = uow
        self.token_codec = token_codec
        self.password_hasher = password_hasher
        self.mailer = mailer

    async def execute(
        self, request_id: UUID, token: str, new_password: str
    ) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            request_id: Reset request id from the emailed link
            token: Plaintext token from the emailed link
            new_password: New password to set

        Returns:
            Result with ResetPasswordResponse, or Error

        Errors:
            - INVALID_TOKEN: Request missing, token mismatch, expired, or account inactive
            - INVALID_PASSWORD: The hasher refused the new password, request kept
            - SERVER_ERROR: Store failure, nothing was changed
        """
        async with self.uow:
            try:
                reset_request = await self.uow.password_reset_requests.get_by_id(request_id)
                if reset_request is None:
                    return _invalid_token()

                if not self.token_codec.verify(token, reset_request.token_digest):
                    return _invalid_token()

                if reset_request.is_expired(utcnow()):
                    return _invalid_token()

                user = await self.uow.users.get_active_by_id(reset_request.user_id)
                if user is None:
                    return _invalid_token()

                try:
                    password_hash = self.password_hasher.hash(new_password)
                except PasswordRejected as exc:
                    logger.info(f"New password for request {reset_request.id} rejected: {exc}")
                    return Return.err(Error("INVALID_PASSWORD", str(exc)))

                consumed = await self.uow.password_reset_requests.delete_by_id(reset_request.id)
                if not consumed:
                    logger.info(f"Password reset request {reset_request.id} already redeemed")
                    return _invalid_token()

                if not await self.uow.users.set_password(user.id, password_hash):
                    logger.error(f"User {user.id} vanished during password reset")
                    return _server_error()

                superseded = await self.uow.password_reset_requests.delete_all_for_user(user.id)

                await self.uow.commit()
            except StoreError as exc:
                logger.error(f"Password reset for request {request_id} failed: {exc}")
                return _server_error()

        logger.info(
            f"Password reset for user {user.id} via request {reset_request.id}, "
            f"{superseded} other request(s) invalidated"
        )

        sent = await self.mailer.send(
            user.email, "Password reset", "Your password was successfully reset"
        )
        if sent.is_err():
            logger.warning(f"Password changed email to user {user.id} failed: {sent.error.code}")

        return Return.ok(
            ResetPasswordResponse(status="success", message="Password reset successfully")
        )
