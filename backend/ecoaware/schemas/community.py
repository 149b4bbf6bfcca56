"""Community Schemas: posts, likes, comments (community and blog).

Invariants:
    - PostCreate.content stripped and non-empty
    - wish posts require event_wish_title; other types drop event_wish_* fields
    - Which post types are accepted is decided by the route (community vs blogs)
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from ecoaware.core.domain_types import PostType
from ecoaware.schemas.base import ApiModel, strip_required


class PostCreate(ApiModel):
    title: str | None = Field(None, max_length=255)
    content: str = Field(min_length=1, max_length=10_000)
    post_type: PostType = PostType.GENERAL
    event_wish_title: str | None = Field(None, max_length=255)
    event_wish_description: str | None = Field(None, max_length=5_000)
    image_url: str | None = Field(None, max_length=1024)
    video_url: str | None = Field(None, max_length=1024)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("title")
    @classmethod
    def blank_title_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def validate_wish_fields(self):
        if self.post_type == PostType.WISH:
            if not self.event_wish_title or not self.event_wish_title.strip():
                raise ValueError("wish posts require event_wish_title")
        else:
            self.event_wish_title = None
            self.event_wish_description = None
        return self


class PostResponse(ApiModel):
    id: int
    user_id: str
    title: str | None = None
    content: str
    post_type: str
    event_wish_title: str | None = None
    event_wish_description: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    likes_count: int
    comments_count: int
    is_published: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LikeResponse(ApiModel):
    id: int
    post_id: int
    user_id: str
    created_at: datetime | None = None


class UserLikeResponse(ApiModel):
    liked: bool


class CommentCreate(ApiModel):
    content: str = Field(min_length=1, max_length=2_000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        return strip_required(v)


class CommentResponse(ApiModel):
    id: int
    post_id: int
    user_id: str
    content: str
    created_at: datetime | None = None
