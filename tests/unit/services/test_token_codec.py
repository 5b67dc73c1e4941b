"""
Unit tests for TokenCodec
"""
import hashlib
import hmac
import string
from unittest.mock import patch

import pytest

from src.app.services.token_codec import TokenCodec
from src.app.settings import PasswordResetSettings


def test_generate_is_256_bit_hex(token_codec):
    token = token_codec.generate()

    assert len(token) == 64
    assert set(token) <= set(string.hexdigits.lower())


def test_generate_is_not_repeated(token_codec):
    tokens = {token_codec.generate() for _ in range(100)}

    assert len(tokens) == 100


def test_digest_is_hmac_sha256(token_codec):
    expected = hmac.new(b"unit-test-digest-key", b"some-token", hashlib.sha256).hexdigest()

    assert token_codec.digest("some-token") == expected


def test_digest_is_deterministic(token_codec):
    token = token_codec.generate()

    assert token_codec.digest(token) == token_codec.digest(token)
    assert token_codec.digest(token) != token


def test_digest_depends_on_secret_key(token_codec):
    other = TokenCodec(
        PasswordResetSettings(
            reset_link_base_url="https://app.example.com",
            digest_secret_key=b"another-key",
        )
    )
    token = token_codec.generate()

    assert token_codec.digest(token) != other.digest(token)
    assert not other.verify(token, token_codec.digest(token))


def test_verify_matching_token(token_codec):
    token = token_codec.generate()

    assert token_codec.verify(token, token_codec.digest(token)) is True


def test_verify_rejects_other_token(token_codec):
    token = token_codec.generate()
    # Same prefix, different last character
    other = token[:-1] + ("0" if token[-1] != "0" else "1")

    assert token_codec.verify(other, token_codec.digest(token)) is False


@pytest.mark.parametrize("stored", ["", "abc", "f" * 128])
def test_verify_rejects_length_mismatch(token_codec, stored):
    assert token_codec.verify(token_codec.generate(), stored) is False


def test_verify_uses_constant_time_comparison(token_codec):
    token = token_codec.generate()

    with patch(
        "src.app.services.token_codec.hmac.compare_digest", wraps=hmac.compare_digest
    ) as compare:
        assert token_codec.verify(token, token_codec.digest(token))

    compare.assert_called_once()


def test_verify_handles_non_ascii_token(token_codec):
    assert token_codec.verify("pässwörd", token_codec.digest("pässwörd")) is True
