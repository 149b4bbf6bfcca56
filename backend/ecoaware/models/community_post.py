"""CommunityPost ORM: discussion, review, event wish, feedback or idea.

Invariants:
    - post_type in {general, review, wish} is community content,
      {feedback, idea} is blog content
    - likes_count/comments_count are denormalized counters, updated in the same
      transaction as the post_likes/post_comments row they mirror
    - event_wish_* only meaningful for post_type == "wish"

Design Decisions:
    - One table for community and blog content: both share likes and comments
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ecoaware.db.base import Base


class CommunityPost(Base):
    """Community post entity."""
    __tablename__ = "community_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_type: Mapped[str] = mapped_column(
        String(50), nullable=False, default="general",
    )
    event_wish_title: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    event_wish_description: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    likes_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    comments_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
