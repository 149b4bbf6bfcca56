"""Auth Flow: login redirect, provider callback, logout, current user.

Invariants:
    - /api/callback upserts the user, stores one session row, sets an httponly cookie
    - A session is accepted from the cookie or a Bearer token
    - Missing, unknown and expired sessions all answer 401 with the error envelope
    - Emails listed in ADMIN_EMAILS are promoted to admin on login

Design Decisions:
    - The identity provider is an IdentityProviderClient over httpx.MockTransport,
      injected through app.dependency_overrides
"""

from datetime import timedelta

import httpx
import pytest
from sqlalchemy import select

from ecoaware.api.routes.auth import get_identity_provider
from ecoaware.infrastructure.identity_provider import IdentityProviderClient
from ecoaware.main import app
from ecoaware.models.auth_session import AuthSession
from ecoaware.models.user import User


def _provider(handler) -> IdentityProviderClient:
    return IdentityProviderClient(
        "https://idp.test/v1",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture
def provider_claims():
    """Claims the mocked provider returns; tests mutate before calling /callback."""
    claims = {
        "sub": "ext-42",
        "email": "leyla@ecoaware.test",
        "first_name": "Leyla",
        "last_name": "Aliyeva",
        "profile_image_url": "https://img.test/leyla.png",
    }
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.headers.get("X-Session-ID") != "good-session":
            return httpx.Response(401, json={"error": "unknown session"})
        return httpx.Response(200, json=claims)

    app.dependency_overrides[get_identity_provider] = lambda: _provider(handler)
    return {"claims": claims, "requests": seen}


async def test_login_redirects_to_provider(client):
    res = await client.get("/api/login")
    assert res.status_code == 302
    location = res.headers["location"]
    assert location.startswith("https://idp.test/login?redirect_uri=")
    assert "api%2Fcallback" in location


async def test_callback_creates_user_and_session(client, provider_claims, test_db):
    res = await client.get("/api/callback", params={"session_id": "good-session"})

    assert res.status_code == 302
    assert res.headers["location"] == "/"
    set_cookie = res.headers["set-cookie"]
    assert set_cookie.startswith("session_token=")
    assert "httponly" in set_cookie.lower()

    request = provider_claims["requests"][0]
    assert request.url.path == "/v1/session-data"
    assert request.headers["X-Session-ID"] == "good-session"

    user = (await test_db.execute(select(User).where(User.id == "ext-42"))).scalar_one()
    assert user.email == "leyla@ecoaware.test"
    assert user.is_admin is False
    sessions = (await test_db.execute(select(AuthSession))).scalars().all()
    assert len(sessions) == 1
    assert sessions[0].sess["user_id"] == "ext-42"


async def test_callback_cookie_authenticates_following_requests(client, provider_claims):
    res = await client.get("/api/callback", params={"session_id": "good-session"})
    sid = res.cookies["session_token"]

    me = await client.get("/api/auth/user", headers={"Cookie": f"session_token={sid}"})

    assert me.status_code == 200
    body = me.json()
    assert body["id"] == "ext-42"
    assert body["firstName"] == "Leyla"
    assert body["profileImageUrl"] == "https://img.test/leyla.png"


async def test_second_login_updates_profile(client, provider_claims, test_db):
    await client.get("/api/callback", params={"session_id": "good-session"})
    provider_claims["claims"]["first_name"] = "Leyla-Updated"
    await client.get("/api/callback", params={"session_id": "good-session"})

    users = (await test_db.execute(select(User))).scalars().all()
    assert len(users) == 1
    await test_db.refresh(users[0])
    assert users[0].first_name == "Leyla-Updated"


async def test_admin_email_is_promoted(client, provider_claims, test_db):
    provider_claims["claims"]["email"] = "admin@ecoaware.test"
    await client.get("/api/callback", params={"session_id": "good-session"})

    user = (await test_db.execute(select(User).where(User.id == "ext-42"))).scalar_one()
    assert user.is_admin is True


async def test_callback_rejected_by_provider_returns_401(client, provider_claims):
    res = await client.get("/api/callback", params={"session_id": "stale"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHORIZED"


async def test_callback_provider_down_returns_502(client):
    def handler(request):
        return httpx.Response(503)

    app.dependency_overrides[get_identity_provider] = lambda: _provider(handler)
    res = await client.get("/api/callback", params={"session_id": "any"})
    assert res.status_code == 502
    assert res.json()["error"]["code"] == "IDENTITY_PROVIDER_ERROR"


async def test_callback_without_session_id_is_validation_error(client):
    res = await client.get("/api/callback")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_current_user_requires_session(client):
    res = await client.get("/api/auth/user")
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Unauthorized"


async def test_unknown_bearer_token_is_401(client):
    res = await client.get(
        "/api/auth/user", headers={"Authorization": "Bearer not-a-session"},
    )
    assert res.status_code == 401


async def test_expired_session_is_401_and_removed(client, test_db, user, login_as):
    sid = await login_as(user, expires_in=timedelta(seconds=-5))

    res = await client.get("/api/auth/user", headers={"Authorization": f"Bearer {sid}"})

    assert res.status_code == 401
    test_db.expire_all()
    remaining = (await test_db.execute(
        select(AuthSession).where(AuthSession.sid == sid),
    )).scalar_one_or_none()
    assert remaining is None


async def test_logout_deletes_session_and_clears_cookie(client, user, login_as):
    sid = await login_as(user)

    res = await client.get("/api/logout", headers={"Cookie": f"session_token={sid}"})

    assert res.status_code == 302
    assert res.headers["location"] == "/"
    assert 'session_token=""' in res.headers["set-cookie"] or \
        "session_token=;" in res.headers["set-cookie"]
    after = await client.get("/api/auth/user", headers={"Authorization": f"Bearer {sid}"})
    assert after.status_code == 401


async def test_logout_without_session_still_redirects(client):
    res = await client.get("/api/logout")
    assert res.status_code == 302


async def test_public_profile_hides_email(client, user):
    res = await client.get(f"/api/users/{user.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["firstName"] == "Aysel"
    assert "email" not in body
    assert "isAdmin" not in body


async def test_public_profile_unknown_user_is_404(client):
    res = await client.get("/api/users/nobody")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["resource"] == "User"
