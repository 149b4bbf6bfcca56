"""Leaderboard Route: top users by summed quiz score."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.config import get_settings
from ecoaware.infrastructure.database import get_db
from ecoaware.schemas.score import LeaderboardEntry
from ecoaware.services.score_service import ScoreService

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.get("", response_model=list[LeaderboardEntry])
async def get_leaderboard(db: AsyncSession = Depends(get_db)):
    return await ScoreService(db).leaderboard(limit=get_settings().leaderboard_size)
