"""Tests for the token pair lifecycle: issue, verify, rotate, revoke."""

from datetime import timedelta
import uuid

import pytest
from sqlalchemy.exc import OperationalError

from videotube.config.settings import settings
from videotube.shared.core.exceptions import (
    RotationDeniedError,
    ServiceUnavailableError,
    TokenExpiredError,
    TokenInvalidError,
)
from videotube.shared.models import User
from videotube.shared.repositories.user_repository import UserRepository
from videotube.shared.services.token_service import TokenService
from videotube.shared.utils.security import SecurityUtils


@pytest.fixture
async def alice(make_user):
    return await make_user("alice")


class TestIssueAndVerify:
    async def test_issue_stores_refresh_token(self, db_session, alice):
        pair = await TokenService(db_session).issue(alice)

        stored = await UserRepository(db_session).get(alice.id)
        assert stored.refresh_token == pair.refresh_token

    async def test_access_claims(self, db_session, alice):
        pair = await TokenService(db_session).issue(alice)

        claims = TokenService.verify_access(pair.access_token)

        assert claims.user_id == alice.id
        assert claims.username == "alice"
        assert claims.email == "alice@example.com"
        refresh_payload = SecurityUtils.decode_token(
            pair.refresh_token, settings.REFRESH_TOKEN_SECRET, settings.JWT_ALGORITHM
        )
        assert refresh_payload["sub"] == str(alice.id)

    async def test_pairs_are_unique(self, alice):
        first = TokenService.build_pair(alice)
        second = TokenService.build_pair(alice)

        assert first.refresh_token != second.refresh_token

    async def test_refresh_token_is_not_an_access_token(self, alice):
        pair = TokenService.build_pair(alice)

        # Different secret, so the signature check fails first
        with pytest.raises(TokenInvalidError):
            TokenService.verify_access(pair.refresh_token)

    def test_access_token_with_wrong_type(self):
        token = SecurityUtils.create_token(
            {"sub": str(uuid.uuid4()), "type": "refresh"},
            settings.ACCESS_TOKEN_SECRET,
            timedelta(minutes=5),
            settings.JWT_ALGORITHM,
        )

        with pytest.raises(TokenInvalidError):
            TokenService.verify_access(token)

    def test_expired_access_token(self):
        token = SecurityUtils.create_token(
            {"sub": str(uuid.uuid4()), "type": "access"},
            settings.ACCESS_TOKEN_SECRET,
            timedelta(seconds=-1),
            settings.JWT_ALGORITHM,
        )

        with pytest.raises(TokenExpiredError):
            TokenService.verify_access(token)

    def test_non_uuid_subject(self):
        token = SecurityUtils.create_token(
            {"sub": "12", "type": "access"},
            settings.ACCESS_TOKEN_SECRET,
            timedelta(minutes=5),
            settings.JWT_ALGORITHM,
        )

        with pytest.raises(TokenInvalidError):
            TokenService.verify_access(token)


class TestRotate:
    async def test_rotation_replaces_stored_token(self, db_session, alice):
        service = TokenService(db_session)
        first = await service.issue(alice)

        user, second = await service.rotate(first.refresh_token)

        assert user.id == alice.id
        assert second.refresh_token != first.refresh_token
        stored = await UserRepository(db_session).get(alice.id)
        assert stored.refresh_token == second.refresh_token

    async def test_rotated_token_cannot_be_replayed(self, db_session, alice):
        service = TokenService(db_session)
        first = await service.issue(alice)
        _, second = await service.rotate(first.refresh_token)

        with pytest.raises(RotationDeniedError):
            await service.rotate(first.refresh_token)

        # The live token is unaffected by the failed replay
        _, third = await service.rotate(second.refresh_token)
        assert third.refresh_token != second.refresh_token

    async def test_login_elsewhere_invalidates_old_refresh_token(self, db_session, alice):
        service = TokenService(db_session)
        old = await service.issue(alice)
        await service.issue(alice)

        with pytest.raises(RotationDeniedError):
            await service.rotate(old.refresh_token)

    async def test_access_token_is_not_a_refresh_token(self, db_session, alice):
        pair = await TokenService(db_session).issue(alice)

        with pytest.raises(RotationDeniedError):
            await TokenService(db_session).rotate(pair.access_token)

    async def test_expired_refresh_token(self, db_session, alice):
        token = SecurityUtils.create_token(
            {"sub": str(alice.id), "type": "refresh", "jti": "x"},
            settings.REFRESH_TOKEN_SECRET,
            timedelta(seconds=-1),
            settings.JWT_ALGORITHM,
        )

        with pytest.raises(RotationDeniedError):
            await TokenService(db_session).rotate(token)

    async def test_unknown_user(self, db_session):
        ghost = User(
            id=uuid.uuid4(),
            username="ghost",
            email="ghost@example.com",
            full_name="Ghost",
            password_hash="",
        )
        pair = TokenService.build_pair(ghost)

        with pytest.raises(RotationDeniedError):
            await TokenService(db_session).rotate(pair.refresh_token)

    async def test_revoked_session_cannot_rotate(self, db_session, alice):
        service = TokenService(db_session)
        pair = await service.issue(alice)
        await service.revoke(alice.id)

        with pytest.raises(RotationDeniedError):
            await service.rotate(pair.refresh_token)

    async def test_concurrent_rotation_has_one_winner(self, session_factory, alice):
        async with session_factory() as session:
            pair = await TokenService(session).issue(alice)
            await session.commit()

        async with session_factory() as loser_session:
            # The loser read the user while R1 was still current
            await loser_session.get(User, alice.id)
            await loser_session.commit()

            async with session_factory() as winner_session:
                await TokenService(winner_session).rotate(pair.refresh_token)
                await winner_session.commit()

            with pytest.raises(RotationDeniedError):
                await TokenService(loser_session).rotate(pair.refresh_token)

    async def test_transient_write_failure_is_retried(self, db_session, alice, monkeypatch):
        service = TokenService(db_session)
        pair = await service.issue(alice)

        original = UserRepository.replace_refresh_token
        calls = []

        async def flaky(self, user_id, expected, new):
            calls.append(user_id)
            if len(calls) == 1:
                raise OperationalError("UPDATE users", {}, Exception("connection reset"))
            return await original(self, user_id, expected, new)

        monkeypatch.setattr(UserRepository, "replace_refresh_token", flaky)

        _, new_pair = await service.rotate(pair.refresh_token)

        assert len(calls) == 2
        stored = await UserRepository(db_session).get(alice.id)
        assert stored.refresh_token == new_pair.refresh_token

    async def test_persistent_write_failure_is_unavailable(self, db_session, alice, monkeypatch):
        service = TokenService(db_session)
        pair = await service.issue(alice)

        async def broken(self, user_id, expected, new):
            raise OperationalError("UPDATE users", {}, Exception("connection refused"))

        monkeypatch.setattr(UserRepository, "replace_refresh_token", broken)

        with pytest.raises(ServiceUnavailableError):
            await service.rotate(pair.refresh_token)

        # Nothing changed: the presented token is still the live one
        stored = await UserRepository(db_session).get(alice.id)
        assert stored.refresh_token == pair.refresh_token


class TestRevoke:
    async def test_revoke_clears_token_and_is_idempotent(self, db_session, alice):
        service = TokenService(db_session)
        await service.issue(alice)

        await service.revoke(alice.id)
        await service.revoke(alice.id)

        stored = await UserRepository(db_session).get(alice.id)
        assert stored.refresh_token is None

    async def test_access_token_survives_revoke_until_expiry(self, db_session, alice):
        service = TokenService(db_session)
        pair = await service.issue(alice)
        await service.revoke(alice.id)

        assert TokenService.verify_access(pair.access_token).user_id == alice.id


class TestReplaceRefreshToken:
    async def test_stale_expected_value_changes_nothing(self, db_session, alice):
        repo = UserRepository(db_session)
        await repo.set_refresh_token(alice.id, "current")

        assert await repo.replace_refresh_token(alice.id, "stale", "new") is False
        assert await repo.replace_refresh_token(alice.id, "current", "new") is True

        stored = await repo.get(alice.id)
        assert stored.refresh_token == "new"
