"""Tests for password hashing and JWT helpers."""

from datetime import timedelta

import jwt
import pytest

from videotube.shared.core.exceptions import TokenExpiredError, TokenInvalidError
from videotube.shared.utils.security import SecurityUtils


SECRET = "unit-test-secret"


class TestPasswordHashing:
    def test_hash_is_salted(self):
        first = SecurityUtils.hash_password("s3cret-password")
        second = SecurityUtils.hash_password("s3cret-password")

        assert first != second
        assert first.startswith("$2")

    def test_verify_matches_own_hash(self):
        digest = SecurityUtils.hash_password("s3cret-password")

        assert SecurityUtils.verify_password("s3cret-password", digest) is True
        assert SecurityUtils.verify_password("wrong-password", digest) is False

    @pytest.mark.parametrize("digest", ["", None, "not-a-bcrypt-hash"])
    def test_verify_rejects_missing_or_corrupt_digest(self, digest):
        assert SecurityUtils.verify_password("anything", digest) is False

    async def test_async_variants(self):
        digest = await SecurityUtils.hash_password_async("s3cret-password")

        assert await SecurityUtils.verify_password_async("s3cret-password", digest)
        assert not await SecurityUtils.verify_password_async("nope", digest)


class TestTokens:
    def test_roundtrip_keeps_claims_and_adds_timestamps(self):
        token = SecurityUtils.create_token(
            {"sub": "42", "type": "access"}, SECRET, timedelta(minutes=5)
        )
        payload = SecurityUtils.decode_token(token, SECRET)

        assert payload["sub"] == "42"
        assert payload["type"] == "access"
        assert payload["exp"] > payload["iat"]

    def test_expired_token(self):
        token = SecurityUtils.create_token({"sub": "42"}, SECRET, timedelta(seconds=-5))

        with pytest.raises(TokenExpiredError):
            SecurityUtils.decode_token(token, SECRET)

    def test_wrong_secret(self):
        token = SecurityUtils.create_token({"sub": "42"}, SECRET, timedelta(minutes=5))

        with pytest.raises(TokenInvalidError):
            SecurityUtils.decode_token(token, "another-secret")

    def test_missing_subject(self):
        token = SecurityUtils.create_token({"type": "access"}, SECRET, timedelta(minutes=5))

        with pytest.raises(TokenInvalidError):
            SecurityUtils.decode_token(token, SECRET)

    def test_unsigned_token_rejected(self):
        token = jwt.encode({"sub": "42", "iat": 0, "exp": 9999999999}, None, algorithm="none")

        with pytest.raises(TokenInvalidError):
            SecurityUtils.decode_token(token, SECRET)

    def test_garbage(self):
        with pytest.raises(TokenInvalidError):
            SecurityUtils.decode_token("not.a.jwt", SECRET)
