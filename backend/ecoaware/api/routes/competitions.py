"""Competition Routes: quiz catalogue, questions, and answer submission.

Invariants:
    - Catalogue is public; questions and submissions require a session
    - Creating competitions and questions requires admin
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.api.dependencies import get_current_user, require_admin
from ecoaware.config import get_settings
from ecoaware.infrastructure.database import get_db
from ecoaware.models.user import User
from ecoaware.schemas.competition import (
    CompetitionCreate, CompetitionResponse, QuestionCreate, QuestionResponse,
    SubmissionCreate,
)
from ecoaware.schemas.score import SubmissionResult, UserScoreResponse
from ecoaware.services.competition_service import CompetitionService

router = APIRouter(prefix="/api/competitions", tags=["competitions"])


def _service(db: AsyncSession) -> CompetitionService:
    return CompetitionService(db, default_points=get_settings().default_question_points)


@router.get("", response_model=list[CompetitionResponse])
async def list_competitions(db: AsyncSession = Depends(get_db)):
    return await _service(db).list_competitions()


@router.get("/{competition_id}", response_model=CompetitionResponse)
async def get_competition(competition_id: int, db: AsyncSession = Depends(get_db)):
    return await _service(db).get_competition(competition_id)


@router.post(
    "", response_model=CompetitionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_competition(
    body: CompetitionCreate,
    _: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await _service(db).create_competition(body)


@router.get("/{competition_id}/questions", response_model=list[QuestionResponse])
async def list_questions(
    competition_id: int,
    _: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await _service(db).list_questions(competition_id)


@router.post(
    "/{competition_id}/questions",
    response_model=QuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    competition_id: int,
    body: QuestionCreate,
    _: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await _service(db).create_question(competition_id, body)


@router.post(
    "/{competition_id}/submissions",
    response_model=SubmissionResult,
    status_code=status.HTTP_201_CREATED,
)
async def submit_answers(
    competition_id: int,
    body: SubmissionCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Score the answers server-side and record the attempt."""
    result = await _service(db).submit_answers(user.id, competition_id, body.answers)
    return SubmissionResult(
        score=result["score"],
        correct_answers=result["correct_answers"],
        total_questions=result["total_questions"],
        max_score=result["max_score"],
        percentage=result["percentage"],
        user_score=UserScoreResponse.model_validate(result["user_score"]),
    )
