"""Auth Routes: login redirect, provider callback, logout, and current user.

Invariants:
    - /login never touches the database; it only redirects to the provider
    - /callback is the only place a session cookie is issued
    - /logout always clears the cookie, even when the session row is already gone

Design Decisions:
    - IdentityProviderClient provided through a dependency so tests override it
"""

import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.api.dependencies import bearer, get_current_user, read_session_token
from ecoaware.config import get_settings
from ecoaware.infrastructure.database import get_db
from ecoaware.infrastructure.identity_provider import IdentityProviderClient
from ecoaware.models.user import User
from ecoaware.schemas.user import UserResponse
from ecoaware.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


def get_identity_provider() -> IdentityProviderClient:
    settings = get_settings()
    return IdentityProviderClient(
        settings.identity_provider_url,
        timeout_seconds=settings.identity_timeout_seconds,
    )


@router.get("/login")
async def login(request: Request):
    """Send the browser to the identity provider."""
    settings = get_settings()
    callback = str(request.url_for("auth_callback"))
    query = urlencode({"redirect_uri": callback})
    return RedirectResponse(
        f"{settings.identity_login_url}?{query}",
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/callback", name="auth_callback")
async def callback(
    session_id: str = Query(min_length=1),
    db: AsyncSession = Depends(get_db),
    provider: IdentityProviderClient = Depends(get_identity_provider),
):
    """Exchange the provider session id, open a local session, set the cookie."""
    settings = get_settings()
    identity = await provider.fetch_identity(session_id)
    _, sid = await AuthService(db, ttl_days=settings.session_ttl_days).login(
        identity, admin_emails=settings.admin_emails,
    )
    response = RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.session_cookie_name,
        sid,
        max_age=settings.session_ttl_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    return response


@router.get("/logout")
async def logout(
    request: Request,
    credentials=Depends(bearer),
    db: AsyncSession = Depends(get_db),
):
    settings = get_settings()
    token = read_session_token(request, credentials)
    if token:
        await AuthService(db).logout(token)
    response = RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response


@router.get("/auth/user", response_model=UserResponse)
async def current_user(user: User = Depends(get_current_user)):
    return user
