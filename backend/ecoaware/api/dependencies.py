"""Request Dependencies: current user, admin gate, and per-request services.

Invariants:
    - The session id is read from the session cookie, else from a Bearer token
    - get_current_user raises AuthenticationError (401) for any unusable session
    - require_admin raises PermissionDeniedError (403) for non-admins
    - user ids used by write routes always come from here, never from request bodies
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.config import get_settings
from ecoaware.core.errors import AuthenticationError, PermissionDeniedError
from ecoaware.infrastructure.database import get_db
from ecoaware.models.user import User
from ecoaware.services.auth_service import AuthService

bearer = HTTPBearer(auto_error=False)


def read_session_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    token = request.cookies.get(get_settings().session_cookie_name)
    if not token and credentials:
        token = credentials.credentials
    return token


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> User:
    token = read_session_token(request, credentials)
    if not token:
        raise AuthenticationError()
    settings = get_settings()
    user = await AuthService(db, ttl_days=settings.session_ttl_days).resolve(token)
    request.state.user_id = user.id
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise PermissionDeniedError()
    return user
