"""Problem Service: environmental problem reports.

Invariants:
    - New reports always start as pending, owned by the reporting user
    - Status changes bump updated_at
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.core.domain_types import ProblemStatus
from ecoaware.core.errors import ResourceNotFoundError
from ecoaware.models.problem import Problem
from ecoaware.schemas.problem import ProblemCreate

logger = logging.getLogger(__name__)


class ProblemService:
    """Problem reports."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_problems(
        self, status: ProblemStatus | None = None, category: str | None = None,
    ) -> list[Problem]:
        query = select(Problem).order_by(Problem.created_at.desc(), Problem.id.desc())
        if status:
            query = query.where(Problem.status == status.value)
        if category:
            query = query.where(Problem.category == category)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_problem(self, problem_id: int) -> Problem:
        result = await self.db.execute(select(Problem).where(Problem.id == problem_id))
        problem = result.scalar_one_or_none()
        if not problem:
            raise ResourceNotFoundError("Problem", problem_id)
        return problem

    async def list_user_problems(self, user_id: str) -> list[Problem]:
        result = await self.db.execute(
            select(Problem)
            .where(Problem.user_id == user_id)
            .order_by(Problem.created_at.desc(), Problem.id.desc()),
        )
        return list(result.scalars().all())

    async def create_problem(self, user_id: str, data: ProblemCreate) -> Problem:
        problem = Problem(
            user_id=user_id, status=ProblemStatus.PENDING.value, **data.model_dump(),
        )
        self.db.add(problem)
        await self.db.commit()
        await self.db.refresh(problem)
        logger.info(
            f"Problem reported: {problem.title}",
            extra={"user_id": user_id, "resource_id": problem.id},
        )
        return problem

    async def update_status(self, problem_id: int, status: ProblemStatus) -> Problem:
        problem = await self.get_problem(problem_id)
        problem.status = status.value
        problem.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        await self.db.refresh(problem)
        logger.info(
            f"Problem {problem_id} status -> {status.value}",
            extra={"resource_id": problem_id},
        )
        return problem
