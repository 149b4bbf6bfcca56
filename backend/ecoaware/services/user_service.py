"""User Service: lookup and login-time upsert of users.

Invariants:
    - upsert_user inserts on first login, otherwise overwrites profile fields
      and bumps updated_at
    - is_admin is only ever raised here (admin_emails), never lowered
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.core.errors import ResourceNotFoundError
from ecoaware.infrastructure.identity_provider import ProviderIdentity
from ecoaware.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """User persistence."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, user_id: str) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_or_404(self, user_id: str) -> User:
        user = await self.get_user(user_id)
        if not user:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def upsert_user(
        self, identity: ProviderIdentity, is_admin: bool = False,
    ) -> User:
        """Insert or update the user behind a provider identity. Flushes, does not commit."""
        user = await self.get_user(identity.sub)
        if user is None:
            user = User(
                id=identity.sub,
                email=identity.email,
                first_name=identity.first_name,
                last_name=identity.last_name,
                profile_image_url=identity.profile_image_url,
                is_admin=is_admin,
            )
            self.db.add(user)
            logger.info("User created", extra={"user_id": identity.sub})
        else:
            user.email = identity.email
            user.first_name = identity.first_name
            user.last_name = identity.last_name
            user.profile_image_url = identity.profile_image_url
            user.is_admin = user.is_admin or is_admin
            user.updated_at = datetime.now(timezone.utc)
        await self.db.flush()
        return user
