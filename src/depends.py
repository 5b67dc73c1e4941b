from functools import lru_cache

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.smtp_mailer import SmtpMailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mailer import Mailer
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_codec import TokenCodec
from src.app.settings import PasswordResetSettings

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_password_reset_settings() -> PasswordResetSettings:
    """Loaded once per process; the digest key must not change at runtime"""
    return PasswordResetSettings.from_config(ApplicationConfig)


@lru_cache
def get_token_codec() -> TokenCodec:
    return TokenCodec(get_password_reset_settings())


@lru_cache
def get_mailer() -> Mailer:
    return SmtpMailer.from_config(ApplicationConfig)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()
