"""Current-User Routes: everything under /api/user belongs to the caller.

Invariants:
    - Every route requires a session
    - user_id is taken from the session; any user id in a body is ignored
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.api.dependencies import get_current_user
from ecoaware.config import get_settings
from ecoaware.infrastructure.database import get_db
from ecoaware.models.user import User
from ecoaware.schemas.community import PostResponse
from ecoaware.schemas.event import RegistrationCreate, RegistrationResponse
from ecoaware.schemas.problem import ProblemResponse
from ecoaware.schemas.score import DashboardStats, UserScoreCreate, UserScoreResponse
from ecoaware.services.community_service import CommunityService
from ecoaware.services.event_service import EventService
from ecoaware.services.problem_service import ProblemService
from ecoaware.services.score_service import ScoreService

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("/scores", response_model=list[UserScoreResponse])
async def list_scores(
    user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db),
):
    return await ScoreService(db).list_user_scores(user.id)


@router.post(
    "/scores", response_model=UserScoreResponse, status_code=status.HTTP_201_CREATED,
)
async def save_score(
    body: UserScoreCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Store a client-computed quiz result."""
    return await ScoreService(db).create_user_score(user.id, body)


@router.get("/registrations", response_model=list[RegistrationResponse])
async def list_registrations(
    user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db),
):
    return await EventService(db).list_user_registrations(user.id)


@router.post(
    "/registrations",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_for_event(
    body: RegistrationCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await EventService(db).register(user.id, body.event_id)


@router.get("/problems", response_model=list[ProblemResponse])
async def list_my_problems(
    user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db),
):
    return await ProblemService(db).list_user_problems(user.id)


@router.get("/posts", response_model=list[PostResponse])
async def list_my_posts(
    user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db),
):
    return await CommunityService(db).list_user_posts(user.id)


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db),
):
    return await ScoreService(db).dashboard_stats(
        user.id, points_per_question=get_settings().default_question_points,
    )
