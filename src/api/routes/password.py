from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from libs.result import Error
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.api.error import ClientError, ServerError
from src.app.services.mailer import Mailer
from src.app.services.password_hasher import MAX_PASSWORD_BYTES, PasswordHasher
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.settings import PasswordResetSettings
from src.app.use_cases.password_reset import (
    ForgotPasswordResponse,
    ForgotPasswordUseCase,
    ResetPasswordResponse,
    ResetPasswordUseCase,
)
from src.depends import (
    get_mailer,
    get_password_hasher,
    get_password_reset_settings,
    get_token_codec,
    get_unit_of_work,
)

router = APIRouter(prefix="/password", tags=["Password Reset"])


class ForgotPasswordRequest(BaseModel):
    """
    Forgot password HTTP request payload
    """

    email: EmailStr = Field(..., description="Account email address")


@router.post("/forgot", status_code=status.HTTP_200_OK, response_model=ForgotPasswordResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: TokenCodec = Depends(get_token_codec),
    mailer: Mailer = Depends(get_mailer),
    settings: PasswordResetSettings = Depends(get_password_reset_settings),
):
    """
    Forgot Password

    Creates a single-use reset request and emails the reset link.

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: RESET_ALREADY_PENDING
        - 422 Unprocessable Entity: Invalid email (handled by FastAPI)
        - 503 Service Unavailable: EMAIL_DELIVERY_FAILED, request withdrawn
        - 500 Internal Server Error: Server error
    """
    use_case = ForgotPasswordUseCase(uow, token_codec, mailer, settings)
    result = await use_case.execute(request.email)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "RESET_ALREADY_PENDING":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "EMAIL_DELIVERY_FAILED":
            raise ClientError(error, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Reset password HTTP request payload

    bcrypt reads at most 72 bytes, so the limit is checked on the UTF-8
    encoding rather than the character count.
    """

    password: str = Field(..., min_length=8, description="New password")

    @field_validator("password")
    @classmethod
    def _validate_password_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
        return v


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=ResetPasswordResponse)
async def reset_password(
    request: ResetPasswordRequest,
    reset_id: str = Query(..., alias="id", description="Reset request id from the emailed link"),
    token: str = Query(..., description="Reset token from the emailed link"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: TokenCodec = Depends(get_token_codec),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Reset Password

    Redeems the emailed link and sets the new password. Every pending
    reset request of the account is invalidated.

    Raises:
        - 400 Bad Request: INVALID_TOKEN (unknown id, wrong token, expired, inactive account)
        - 422 Unprocessable Entity: Password validation failed, or INVALID_PASSWORD from the hasher
        - 500 Internal Server Error: Server error
    """
    invalid_token = Error("INVALID_TOKEN", "Invalid or expired password reset token")

    # A malformed id gets the same answer as an unknown one
    try:
        request_id = UUID(reset_id)
    except ValueError:
        raise ClientError(invalid_token, status_code=status.HTTP_400_BAD_REQUEST)

    use_case = ResetPasswordUseCase(uow, token_codec, password_hasher, mailer)
    result = await use_case.execute(request_id, token, request.password)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value
