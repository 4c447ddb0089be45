"""API tests for registration, login, refresh rotation and logout."""

import pytest
from httpx import AsyncClient

from videotube.api.main import create_application


REFRESH_PATH = "/users/refresh-token"


def set_cookie_headers(response) -> list[str]:
    return response.headers.get_list("set-cookie")


@pytest.fixture
async def alice(make_user):
    return await make_user("alice")


class TestRegister:
    async def test_register_returns_public_profile(self, client: AsyncClient):
        response = await client.post(
            "/users/register",
            json={
                "full_name": "Bob Builder",
                "username": "Bob",
                "email": "Bob@Example.com",
                "password": "correct-horse-battery",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "bob"
        assert body["email"] == "bob@example.com"
        assert "password" not in body
        assert "password_hash" not in body
        assert "refresh_token" not in body

    async def test_duplicate_username_conflicts(self, client: AsyncClient, alice):
        response = await client.post(
            "/users/register",
            json={
                "full_name": "Alice Again",
                "username": "ALICE",
                "email": "other@example.com",
                "password": "correct-horse-battery",
            },
        )

        assert response.status_code == 409

    async def test_validation_error_does_not_echo_input(self, client: AsyncClient):
        response = await client.post(
            "/users/register",
            json={
                "full_name": "Short",
                "username": "shorty",
                "email": "shorty@example.com",
                "password": "tiny",
            },
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "tiny" not in response.text


class TestLogin:
    async def test_login_sets_secure_http_only_cookies(self, login, alice):
        response = await login("alice")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == str(alice.id)
        assert body["access_token"] and body["refresh_token"]

        cookies = set_cookie_headers(response)
        assert len(cookies) == 2
        for header in cookies:
            lowered = header.lower()
            assert "httponly" in lowered
            assert "secure" in lowered
            assert "path=/" in lowered
        assert any(header.startswith("accessToken=") for header in cookies)
        assert any(header.startswith("refreshToken=") for header in cookies)

    async def test_login_by_email(self, client: AsyncClient, alice):
        response = await client.post(
            "/users/login",
            json={"email": "ALICE@example.com", "password": "correct-horse-battery"},
        )

        assert response.status_code == 200

    async def test_wrong_password_and_unknown_user_look_the_same(self, client: AsyncClient, login, alice):
        wrong_password = await login("alice", "not-the-password")
        unknown_user = await login("nobody", "not-the-password")

        assert wrong_password.status_code == unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json()
        assert set_cookie_headers(wrong_password) == []

    async def test_login_requires_an_identifier(self, client: AsyncClient):
        response = await client.post("/users/login", json={"password": "whatever"})

        assert response.status_code == 400


class TestAuthenticatedRequests:
    async def test_cookie_session(self, client: AsyncClient, login, alice):
        await login("alice")

        response = await client.get("/users/me")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    async def test_bearer_header(self, client: AsyncClient, login, alice):
        token = (await login("alice")).json()["access_token"]
        client.cookies.clear()

        response = await client.get("/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200

    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/users/me")

        assert response.status_code == 401

    async def test_refresh_token_is_not_accepted_as_access_token(self, client: AsyncClient, login, alice):
        refresh_token = (await login("alice")).json()["refresh_token"]
        client.cookies.clear()

        response = await client.get(
            "/users/me", headers={"Authorization": f"Bearer {refresh_token}"}
        )

        assert response.status_code == 401


class TestRefreshRotation:
    async def test_rotation_and_replay(self, client: AsyncClient, login, alice):
        first = (await login("alice")).json()

        # Rotate with the cookie
        rotated = await client.post(REFRESH_PATH)
        assert rotated.status_code == 200
        second = rotated.json()
        assert second["refresh_token"] != first["refresh_token"]
        assert any(h.startswith("refreshToken=") for h in set_cookie_headers(rotated))

        # Replaying the first refresh token through the body is denied
        client.cookies.clear()
        replay = await client.post(REFRESH_PATH, json={"refresh_token": first["refresh_token"]})
        assert replay.status_code == 401
        assert replay.json()["error"]["code"] == "ROTATION_DENIED"

        # The second one still works, exactly once
        again = await client.post(REFRESH_PATH, json={"refresh_token": second["refresh_token"]})
        assert again.status_code == 200
        client.cookies.clear()
        twice = await client.post(REFRESH_PATH, json={"refresh_token": second["refresh_token"]})
        assert twice.status_code == 401

    async def test_new_access_token_is_usable(self, client: AsyncClient, login, alice):
        await login("alice")
        access_token = (await client.post(REFRESH_PATH)).json()["access_token"]
        client.cookies.clear()

        response = await client.get(
            "/users/me", headers={"Authorization": f"Bearer {access_token}"}
        )

        assert response.status_code == 200

    async def test_no_refresh_token(self, client: AsyncClient):
        response = await client.post(REFRESH_PATH)

        assert response.status_code == 401

    async def test_forged_refresh_token(self, client: AsyncClient):
        response = await client.post(REFRESH_PATH, json={"refresh_token": "forged.token.value"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "ROTATION_DENIED"


class TestLogout:
    async def test_logout_clears_cookies_and_session(self, client: AsyncClient, login, alice):
        refresh_token = (await login("alice")).json()["refresh_token"]

        response = await client.post("/users/logout")

        assert response.status_code == 200
        assert response.json() == {}
        cleared = set_cookie_headers(response)
        assert any(h.startswith("accessToken=") for h in cleared)
        assert any(h.startswith("refreshToken=") for h in cleared)
        assert all("max-age=0" in h.lower() for h in cleared)

        client.cookies.clear()
        denied = await client.post(REFRESH_PATH, json={"refresh_token": refresh_token})
        assert denied.status_code == 401

    async def test_logout_requires_authentication(self, client: AsyncClient):
        response = await client.post("/users/logout")

        assert response.status_code == 401


class TestChangePassword:
    async def test_wrong_old_password(self, client: AsyncClient, login, alice):
        await login("alice")

        response = await client.post(
            "/users/change-password",
            json={"old_password": "not-the-password", "new_password": "brand-new-secret"},
        )

        assert response.status_code == 401

    async def test_new_password_works_for_login(self, client: AsyncClient, login, alice):
        await login("alice")

        response = await client.post(
            "/users/change-password",
            json={"old_password": "correct-horse-battery", "new_password": "brand-new-secret"},
        )
        assert response.status_code == 200

        client.cookies.clear()
        assert (await login("alice")).status_code == 401
        assert (await login("alice", "brand-new-secret")).status_code == 200


def test_bearer_scheme_is_documented():
    schema = create_application().openapi()

    assert schema["components"]["securitySchemes"]["HTTPBearer"] == {"type": "http", "scheme": "bearer"}
