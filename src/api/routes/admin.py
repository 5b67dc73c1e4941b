"""
Admin API Routes - Maintenance Endpoints

For schedulers and internal tooling. Authentication is via Admin API Key.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.password_reset import (
    PurgeExpiredResetRequestsResponse,
    PurgeExpiredResetRequestsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/password-resets/purge-expired",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredResetRequestsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_reset_requests(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Reset Requests

    Deletes password reset requests whose expiry has passed.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = PurgeExpiredResetRequestsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
