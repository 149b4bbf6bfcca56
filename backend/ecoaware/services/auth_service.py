"""Auth Service: cookie sessions backed by the `sessions` table.

Invariants:
    - login() upserts the user and creates exactly one session row
    - resolve() never returns a user for a missing, expired, or orphaned session
    - Expired rows are deleted when encountered
    - Session ids are 256-bit random tokens (secrets.token_urlsafe)
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.core.errors import AuthenticationError
from ecoaware.infrastructure.identity_provider import ProviderIdentity
from ecoaware.models.auth_session import AuthSession
from ecoaware.models.user import User
from ecoaware.services.user_service import UserService

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AuthService:
    """Login, logout, and session resolution."""

    def __init__(self, db: AsyncSession, ttl_days: int = 7):
        self.db = db
        self.ttl = timedelta(days=ttl_days)
        self.users = UserService(db)

    async def login(
        self, identity: ProviderIdentity, admin_emails: list[str] | None = None,
    ) -> tuple[User, str]:
        """Persist the user and open a session. Returns (user, sid)."""
        admins = {e.lower() for e in (admin_emails or [])}
        is_admin = bool(identity.email and identity.email.lower() in admins)
        user = await self.users.upsert_user(identity, is_admin=is_admin)

        sid = secrets.token_urlsafe(32)
        self.db.add(AuthSession(
            sid=sid,
            sess={"user_id": user.id, "claims": identity.raw},
            expire=datetime.now(timezone.utc) + self.ttl,
        ))
        await self.db.commit()
        logger.info("User logged in", extra={"user_id": user.id})
        return user, sid

    async def resolve(self, sid: str) -> User:
        """Return the user owning a live session or raise AuthenticationError."""
        result = await self.db.execute(
            select(AuthSession).where(AuthSession.sid == sid),
        )
        session = result.scalar_one_or_none()
        if session is None:
            raise AuthenticationError()

        if _as_utc(session.expire) < datetime.now(timezone.utc):
            await self.db.delete(session)
            await self.db.commit()
            raise AuthenticationError("Session expired")

        user = await self.users.get_user(session.sess.get("user_id", ""))
        if user is None:
            raise AuthenticationError()
        return user

    async def logout(self, sid: str) -> None:
        await self.db.execute(delete(AuthSession).where(AuthSession.sid == sid))
        await self.db.commit()
