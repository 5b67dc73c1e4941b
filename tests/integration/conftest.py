from typing import List, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from libs.result import Error, Result, Return
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mailer import Mailer
from src.depends import get_mailer, get_password_hasher, get_unit_of_work


class RecordingMailer(Mailer):
    """Keeps sent emails in memory; can be switched to fail"""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []
        self.fail = False

    async def send(self, to: str, subject: str, body: str) -> Result[None]:
        if self.fail:
            return Return.err(Error("EMAIL_DELIVERY_FAILED", "Email could not be delivered"))
        self.sent.append((to, subject, body))
        return Return.ok(None)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def password_hasher():
    # Low cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def client(db_session, mailer, password_hasher):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
