"""Community Routes: discussions, reviews, event wishes; likes and comments.

Invariants:
    - Listing and creation restricted to COMMUNITY_POST_TYPES
    - Like/comment endpoints work on any post id (blogs reuse them)
    - Deletes answer 204 with no body
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.api.dependencies import get_current_user
from ecoaware.core.domain_types import COMMUNITY_POST_TYPES, PostType
from ecoaware.core.errors import BusinessRuleError
from ecoaware.infrastructure.database import get_db
from ecoaware.models.user import User
from ecoaware.schemas.community import (
    CommentCreate, CommentResponse, LikeResponse, PostCreate, PostResponse,
    UserLikeResponse,
)
from ecoaware.services.community_service import CommunityService

router = APIRouter(prefix="/api/community", tags=["community"])


@router.get("/posts", response_model=list[PostResponse])
async def list_posts(
    post_type: PostType | None = Query(None, alias="type"),
    db: AsyncSession = Depends(get_db),
):
    types = COMMUNITY_POST_TYPES
    if post_type is not None:
        if post_type not in COMMUNITY_POST_TYPES:
            raise BusinessRuleError(
                f"'{post_type.value}' is not a community post type",
                "INVALID_POST_TYPE",
            )
        types = {post_type}
    return await CommunityService(db).list_posts(types)


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    return await CommunityService(db).get_post(post_id)


@router.post(
    "/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CommunityService(db).create_post(user.id, body, COMMUNITY_POST_TYPES)


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await CommunityService(db).delete_post(post_id, user)


# ─── Likes ───────────────────────────────────────────────────────

@router.get("/posts/{post_id}/likes", response_model=list[LikeResponse])
async def list_likes(post_id: int, db: AsyncSession = Depends(get_db)):
    return await CommunityService(db).list_likes(post_id)


@router.get("/posts/{post_id}/user-like", response_model=UserLikeResponse)
async def get_user_like(
    post_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    like = await CommunityService(db).get_user_like(post_id, user.id)
    return UserLikeResponse(liked=like is not None)


@router.post(
    "/posts/{post_id}/like",
    response_model=LikeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CommunityService(db).like_post(post_id, user.id)


@router.delete("/posts/{post_id}/like", status_code=status.HTTP_204_NO_CONTENT)
async def unlike_post(
    post_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await CommunityService(db).unlike_post(post_id, user.id)


# ─── Comments ────────────────────────────────────────────────────

@router.get("/posts/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: int, db: AsyncSession = Depends(get_db)):
    return await CommunityService(db).list_comments(post_id)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    body: CommentCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CommunityService(db).create_comment(post_id, user.id, body)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await CommunityService(db).delete_comment(comment_id, user)
