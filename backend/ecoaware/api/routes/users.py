"""User Routes: public profiles for post and comment authors."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.infrastructure.database import get_db
from ecoaware.schemas.user import PublicUserResponse
from ecoaware.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=PublicUserResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    return await UserService(db).get_user_or_404(user_id)
