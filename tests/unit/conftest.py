from datetime import timedelta

import pytest
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return
from src.app.services.token_codec import TokenCodec
from src.app.settings import PasswordResetSettings


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_active_by_id = AsyncMock()
    uow.users.set_password = AsyncMock(return_value=True)

    uow.password_reset_requests = MagicMock()
    uow.password_reset_requests.create = AsyncMock()
    uow.password_reset_requests.get_by_id = AsyncMock()
    uow.password_reset_requests.delete_by_id = AsyncMock(return_value=True)
    uow.password_reset_requests.delete_all_for_user = AsyncMock(return_value=0)
    uow.password_reset_requests.delete_expired = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def settings():
    return PasswordResetSettings(
        reset_link_base_url="https://app.example.com",
        digest_secret_key=b"unit-test-digest-key",
        reset_token_ttl=timedelta(hours=1),
    )


@pytest.fixture
def token_codec(settings):
    return TokenCodec(settings)


@pytest.fixture
def mock_mailer():
    mailer = MagicMock()
    mailer.send = AsyncMock(return_value=Return.ok(None))
    return mailer


@pytest.fixture
def mock_password_hasher():
    hasher = MagicMock()
    hasher.hash = MagicMock(side_effect=lambda password: f"hashed:{password}")
    hasher.verify = MagicMock(side_effect=lambda password, hashed: hashed == f"hashed:{password}")
    return hasher
