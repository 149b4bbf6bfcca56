"""Blog Routes: feedback and idea posts. Likes go through /api/community."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.api.dependencies import get_current_user
from ecoaware.core.domain_types import BLOG_POST_TYPES
from ecoaware.infrastructure.database import get_db
from ecoaware.models.user import User
from ecoaware.schemas.community import PostCreate, PostResponse
from ecoaware.services.community_service import CommunityService

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=list[PostResponse])
async def list_blogs(db: AsyncSession = Depends(get_db)):
    return await CommunityService(db).list_posts(BLOG_POST_TYPES)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    body: PostCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CommunityService(db).create_post(user.id, body, BLOG_POST_TYPES)
