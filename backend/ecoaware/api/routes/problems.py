"""Problem Routes: public problem map, reporting, admin status changes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.api.dependencies import get_current_user, require_admin
from ecoaware.core.domain_types import ProblemStatus
from ecoaware.infrastructure.database import get_db
from ecoaware.models.user import User
from ecoaware.schemas.problem import ProblemCreate, ProblemResponse, ProblemStatusUpdate
from ecoaware.services.problem_service import ProblemService

router = APIRouter(prefix="/api/problems", tags=["problems"])


@router.get("", response_model=list[ProblemResponse])
async def list_problems(
    status_filter: ProblemStatus | None = Query(None, alias="status"),
    category: str | None = Query(None, max_length=100),
    db: AsyncSession = Depends(get_db),
):
    return await ProblemService(db).list_problems(status=status_filter, category=category)


@router.get("/{problem_id}", response_model=ProblemResponse)
async def get_problem(problem_id: int, db: AsyncSession = Depends(get_db)):
    return await ProblemService(db).get_problem(problem_id)


@router.post(
    "", response_model=ProblemResponse, status_code=status.HTTP_201_CREATED,
)
async def report_problem(
    body: ProblemCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await ProblemService(db).create_problem(user.id, body)


@router.patch("/{problem_id}/status", response_model=ProblemResponse)
async def update_problem_status(
    problem_id: int,
    body: ProblemStatusUpdate,
    _: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await ProblemService(db).update_status(problem_id, body.status)
