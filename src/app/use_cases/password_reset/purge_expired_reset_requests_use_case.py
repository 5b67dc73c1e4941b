"""
Use Case: Purge Expired Reset Requests

Storage hygiene for password reset requests. Redemption checks expiry on
its own, so nothing depends on this running.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import StoreError, UnitOfWork
from src.domain.entities import utcnow
from .dtos import PurgeExpiredResetRequestsResponse

logger = logging.getLogger(__name__)


class PurgeExpiredResetRequestsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PurgeExpiredResetRequestsResponse]:
        async with self.uow:
            try:
                purged = await self.uow.password_reset_requests.delete_expired(utcnow())
                await self.uow.commit()
            except StoreError as exc:
                logger.error(f"Purging expired password reset requests failed: {exc}")
                return Return.err(Error("SERVER_ERROR", "Could not purge reset requests"))

        logger.info(f"Purged {purged} expired password reset request(s)")
        return Return.ok(PurgeExpiredResetRequestsResponse(status="purged", purged=purged))
