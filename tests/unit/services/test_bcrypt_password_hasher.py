"""
Unit tests for BcryptPasswordHasher
"""
import pytest

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.app.services.password_hasher import PasswordRejected


def test_hash_and_verify():
    hasher = BcryptPasswordHasher(rounds=4)

    password_hash = hasher.hash("NewPass123!")

    assert password_hash != "NewPass123!"
    assert password_hash.startswith("$2")
    assert hasher.verify("NewPass123!", password_hash)
    assert not hasher.verify("WrongPass123!", password_hash)


def test_verify_malformed_hash():
    assert BcryptPasswordHasher(rounds=4).verify("NewPass123!", "not-a-bcrypt-hash") is False


def test_hash_rejects_more_than_72_bytes():
    hasher = BcryptPasswordHasher(rounds=4)

    # 40 characters, 80 bytes
    with pytest.raises(PasswordRejected):
        hasher.hash("é" * 40)


def test_hash_accepts_72_multibyte_bytes():
    hasher = BcryptPasswordHasher(rounds=4)
    password = "é" * 36

    assert hasher.verify(password, hasher.hash(password))
