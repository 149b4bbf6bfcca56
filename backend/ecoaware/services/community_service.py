"""Community Service: posts, likes and comments for community and blog content.

Invariants:
    - Listings only show published posts of the requested types, newest first
    - likes_count/comments_count change in the same transaction as the row they count
    - Counters never go below zero
    - Only the author or an admin may delete a post or comment
    - Deleting a post deletes its likes and comments

Design Decisions:
    - Counter updates are SQL expressions (col = col + 1), not read-modify-write
    - Child rows deleted explicitly: SQLite test databases do not enforce ON DELETE CASCADE
"""

import logging
from collections.abc import Iterable

from sqlalchemy import case, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.core.domain_types import PostType
from ecoaware.core.errors import (
    BusinessRuleError, ConflictError, PermissionDeniedError, ResourceNotFoundError,
)
from ecoaware.models.community_post import CommunityPost
from ecoaware.models.post_comment import PostComment
from ecoaware.models.post_like import PostLike
from ecoaware.models.user import User
from ecoaware.schemas.community import CommentCreate, PostCreate

logger = logging.getLogger(__name__)


def _decrement(column):
    return case((column > 0, column - 1), else_=0)


class CommunityService:
    """Community posts and their interactions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Posts ───────────────────────────────────────────────────

    async def list_posts(self, post_types: Iterable[PostType]) -> list[CommunityPost]:
        types = [t.value for t in post_types]
        result = await self.db.execute(
            select(CommunityPost)
            .where(CommunityPost.is_published.is_(True))
            .where(CommunityPost.post_type.in_(types))
            .order_by(CommunityPost.created_at.desc(), CommunityPost.id.desc()),
        )
        return list(result.scalars().all())

    async def get_post(self, post_id: int) -> CommunityPost:
        result = await self.db.execute(
            select(CommunityPost).where(CommunityPost.id == post_id),
        )
        post = result.scalar_one_or_none()
        if not post:
            raise ResourceNotFoundError("Post", post_id)
        return post

    async def list_user_posts(self, user_id: str) -> list[CommunityPost]:
        result = await self.db.execute(
            select(CommunityPost)
            .where(CommunityPost.user_id == user_id)
            .order_by(CommunityPost.created_at.desc(), CommunityPost.id.desc()),
        )
        return list(result.scalars().all())

    async def create_post(
        self, user_id: str, data: PostCreate, allowed_types: Iterable[PostType],
    ) -> CommunityPost:
        if data.post_type not in set(allowed_types):
            raise BusinessRuleError(
                f"Post type '{data.post_type.value}' is not allowed here",
                "INVALID_POST_TYPE",
            )
        post = CommunityPost(
            user_id=user_id,
            **data.model_dump(exclude={"post_type"}),
            post_type=data.post_type.value,
        )
        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        logger.info(
            f"Post created ({post.post_type})",
            extra={"user_id": user_id, "resource_id": post.id},
        )
        return post

    async def delete_post(self, post_id: int, actor: User) -> None:
        post = await self.get_post(post_id)
        if post.user_id != actor.id and not actor.is_admin:
            raise PermissionDeniedError("Only the author can delete this post")
        await self.db.execute(delete(PostLike).where(PostLike.post_id == post_id))
        await self.db.execute(delete(PostComment).where(PostComment.post_id == post_id))
        await self.db.delete(post)
        await self.db.commit()
        logger.info(
            f"Post {post_id} deleted", extra={"user_id": actor.id},
        )

    # ─── Likes ───────────────────────────────────────────────────

    async def get_user_like(self, post_id: int, user_id: str) -> PostLike | None:
        result = await self.db.execute(
            select(PostLike)
            .where(PostLike.post_id == post_id)
            .where(PostLike.user_id == user_id),
        )
        return result.scalar_one_or_none()

    async def list_likes(self, post_id: int) -> list[PostLike]:
        await self.get_post(post_id)
        result = await self.db.execute(
            select(PostLike).where(PostLike.post_id == post_id).order_by(PostLike.id),
        )
        return list(result.scalars().all())

    async def like_post(self, post_id: int, user_id: str) -> PostLike:
        await self.get_post(post_id)
        if await self.get_user_like(post_id, user_id):
            raise ConflictError("Post already liked", "ALREADY_LIKED")

        like = PostLike(post_id=post_id, user_id=user_id)
        self.db.add(like)
        await self.db.execute(
            update(CommunityPost)
            .where(CommunityPost.id == post_id)
            .values(likes_count=CommunityPost.likes_count + 1),
        )
        await self.db.commit()
        await self.db.refresh(like)
        return like

    async def unlike_post(self, post_id: int, user_id: str) -> None:
        await self.get_post(post_id)
        like = await self.get_user_like(post_id, user_id)
        if not like:
            raise ResourceNotFoundError("Like", post_id)
        await self.db.delete(like)
        await self.db.execute(
            update(CommunityPost)
            .where(CommunityPost.id == post_id)
            .values(likes_count=_decrement(CommunityPost.likes_count)),
        )
        await self.db.commit()

    # ─── Comments ────────────────────────────────────────────────

    async def list_comments(self, post_id: int) -> list[PostComment]:
        await self.get_post(post_id)
        result = await self.db.execute(
            select(PostComment)
            .where(PostComment.post_id == post_id)
            .order_by(PostComment.created_at.desc(), PostComment.id.desc()),
        )
        return list(result.scalars().all())

    async def create_comment(
        self, post_id: int, user_id: str, data: CommentCreate,
    ) -> PostComment:
        await self.get_post(post_id)
        comment = PostComment(post_id=post_id, user_id=user_id, content=data.content)
        self.db.add(comment)
        await self.db.execute(
            update(CommunityPost)
            .where(CommunityPost.id == post_id)
            .values(comments_count=CommunityPost.comments_count + 1),
        )
        await self.db.commit()
        await self.db.refresh(comment)
        return comment

    async def delete_comment(self, comment_id: int, actor: User) -> None:
        result = await self.db.execute(
            select(PostComment).where(PostComment.id == comment_id),
        )
        comment = result.scalar_one_or_none()
        if not comment:
            raise ResourceNotFoundError("Comment", comment_id)
        if comment.user_id != actor.id and not actor.is_admin:
            raise PermissionDeniedError("Only the author can delete this comment")

        post_id = comment.post_id
        await self.db.delete(comment)
        await self.db.execute(
            update(CommunityPost)
            .where(CommunityPost.id == post_id)
            .values(comments_count=_decrement(CommunityPost.comments_count)),
        )
        await self.db.commit()
