"""
Integration tests for POST /admin/password-resets/purge-expired
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.domain.entities import PasswordResetRequest, User, utcnow

ADMIN_HEADERS = {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


async def create_user_with_request(db_session: AsyncSession, email: str, expires_in: timedelta) -> PasswordResetRequest:
    user = User(email=email, password_hash="hashed")
    db_session.add(user)
    await db_session.flush()
    reset_request = PasswordResetRequest(
        user_id=user.id, token_digest="0" * 64, expires_at=utcnow() + expires_in
    )
    db_session.add(reset_request)
    await db_session.commit()
    return reset_request


@pytest.mark.asyncio
async def test_purge_removes_only_expired(client: AsyncClient, db_session: AsyncSession):
    await create_user_with_request(db_session, "old@example.com", timedelta(minutes=-5))
    await create_user_with_request(db_session, "older@example.com", timedelta(days=-1))
    pending = await create_user_with_request(db_session, "new@example.com", timedelta(minutes=30))

    response = await client.post("/admin/password-resets/purge-expired", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"status": "purged", "purged": 2}

    result = await db_session.exec(select(PasswordResetRequest.id))
    assert result.all() == [pending.id]


@pytest.mark.asyncio
async def test_purge_requires_api_key(client: AsyncClient):
    response = await client.post("/admin/password-resets/purge-expired")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_purge_rejects_wrong_api_key(client: AsyncClient):
    response = await client.post(
        "/admin/password-resets/purge-expired", headers={"X-Admin-API-Key": "wrong"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
