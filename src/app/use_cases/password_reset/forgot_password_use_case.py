"""
Forgot Password Use Case

Issues a single-use reset token and emails the reset link.
"""

import logging

from libs.result import Error, Result, Return
from src.app.repositories.password_reset_request_repository import CreateStatus
from src.app.services.mailer import Mailer
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import StoreError, UnitOfWork
from src.app.settings import PasswordResetSettings
from src.domain.entities import utcnow
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)

CONCEALED_MESSAGE = "If the email exists, a password reset link has been sent"


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset link.

    Business Rules:
    - Token is 256 bits from a CSPRNG; only its HMAC digest is stored
    - Request expires after the configured TTL (default 1 hour)
    - Only one pending request per user; a second one is a conflict
    - Expired requests of the user are cleared before issuing
    - If the email cannot be sent, the request is withdrawn so the user
      can ask again right away
    - With conceal_unknown_email, unknown emails and pending requests
      get the same answer as a successful send
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_codec: TokenCodec,
        mailer: Mailer,
        settings: PasswordResetSettings,
    ):
        self.uow = uow
        self.token_codec = token_codec
        self.mailer = mailer
        self.settings = settings

    def _sent(self, email: str) -> Result[ForgotPasswordResponse]:
        message = CONCEALED_MESSAGE if self.settings.conceal_unknown_email else f"Email sent to {email}"
        return Return.ok(ForgotPasswordResponse(status="sent", message=message))

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Account email address

        Returns:
            Result with ForgotPasswordResponse, or Error

        Errors:
            - USER_NOT_FOUND: No active account with this email
            - RESET_ALREADY_PENDING: An unexpired reset request already exists
            - EMAIL_DELIVERY_FAILED: Reset email could not be sent
            - SERVER_ERROR: Store failure, nothing was persisted
        """
        async with self.uow:
            try:
                user = await self.uow.users.get_by_email(email)
                if user is None:
                    if self.settings.conceal_unknown_email:
                        logger.info("Password reset requested for unknown email")
                        return self._sent(email)
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))

                now = utcnow()
                await self.uow.password_reset_requests.delete_expired(now, user_id=user.id)

                token = self.token_codec.generate()
                outcome = await self.uow.password_reset_requests.create(
                    user.id,
                    self.token_codec.digest(token),
                    now + self.settings.reset_token_ttl,
                )

                if outcome.status == CreateStatus.conflict:
                    logger.info(f"Password reset already pending for user {user.id}")
                    if self.settings.conceal_unknown_email:
                        return self._sent(email)
                    return Return.err(
                        Error(
                            "RESET_ALREADY_PENDING",
                            "Password reset email has already been sent",
                        )
                    )
                if outcome.status == CreateStatus.failed:
                    logger.error(f"Could not store password reset request: {outcome.detail}")
                    return Return.err(Error("SERVER_ERROR", "Could not create password reset request"))

                await self.uow.commit()
            except StoreError as exc:
                logger.error(f"Password reset request failed: {exc}")
                return Return.err(Error("SERVER_ERROR", "Could not create password reset request"))

            reset_request = outcome.request
            logger.info(f"Password reset request {reset_request.id} issued for user {user.id}")

            sent = await self.mailer.send(
                user.email,
                "Reset your password",
                self.settings.reset_link(str(reset_request.id), token),
            )
            if sent.is_err():
                logger.warning(
                    f"Reset email for request {reset_request.id} failed ({sent.error.code}), withdrawing"
                )
                await self._withdraw(reset_request.id)
                return Return.err(
                    Error(
                        "EMAIL_DELIVERY_FAILED",
                        "Password reset email could not be sent, please try again",
                    )
                )

            return self._sent(user.email)

    async def _withdraw(self, request_id) -> None:
        try:
            await self.uow.password_reset_requests.delete_by_id(request_id)
            await self.uow.commit()
        except StoreError as exc:
            # The request stays until it expires
            logger.error(f"Could not withdraw password reset request {request_id}: {exc}")
