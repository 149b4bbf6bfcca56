"""User Schemas: current-user view and public profile view.

Invariants:
    - PublicUserResponse never exposes email or admin flag
"""

from datetime import datetime

from ecoaware.schemas.base import ApiModel


class UserResponse(ApiModel):
    """Full view of the authenticated user."""
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    is_admin: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PublicUserResponse(ApiModel):
    """Author info shown next to posts and comments."""
    id: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    created_at: datetime | None = None
