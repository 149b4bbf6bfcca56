"""Competition Service: quiz catalogue, questions, and server-side scoring.

Invariants:
    - Questions of a competition are returned in insertion (id) order; scoring
      relies on the same order
    - submit_answers persists exactly one UserScore per call
    - Inactive or question-less competitions refuse submissions
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.core.errors import BusinessRuleError, ResourceNotFoundError
from ecoaware.core.quiz_scoring import (
    DEFAULT_POINTS, count_correct, max_score, score_answers, score_percentage,
)
from ecoaware.models.competition import Competition
from ecoaware.models.competition_question import CompetitionQuestion
from ecoaware.models.user_score import UserScore
from ecoaware.schemas.competition import CompetitionCreate, QuestionCreate

logger = logging.getLogger(__name__)


class CompetitionService:
    """Competitions and their questions."""

    def __init__(self, db: AsyncSession, default_points: int = DEFAULT_POINTS):
        self.db = db
        self.default_points = default_points

    async def list_competitions(self) -> list[Competition]:
        result = await self.db.execute(
            select(Competition).order_by(
                Competition.created_at.desc(), Competition.id.desc(),
            ),
        )
        return list(result.scalars().all())

    async def get_competition(self, competition_id: int) -> Competition:
        result = await self.db.execute(
            select(Competition).where(Competition.id == competition_id),
        )
        competition = result.scalar_one_or_none()
        if not competition:
            raise ResourceNotFoundError("Competition", competition_id)
        return competition

    async def create_competition(self, data: CompetitionCreate) -> Competition:
        competition = Competition(
            **data.model_dump(exclude={"difficulty"}),
            difficulty=data.difficulty.value,
        )
        self.db.add(competition)
        await self.db.commit()
        await self.db.refresh(competition)
        logger.info(
            f"Competition created: {competition.title}",
            extra={"resource_id": competition.id},
        )
        return competition

    async def list_questions(self, competition_id: int) -> list[CompetitionQuestion]:
        await self.get_competition(competition_id)
        result = await self.db.execute(
            select(CompetitionQuestion)
            .where(CompetitionQuestion.competition_id == competition_id)
            .order_by(CompetitionQuestion.id),
        )
        return list(result.scalars().all())

    async def create_question(
        self, competition_id: int, data: QuestionCreate,
    ) -> CompetitionQuestion:
        await self.get_competition(competition_id)
        question = CompetitionQuestion(
            competition_id=competition_id, **data.model_dump(),
        )
        self.db.add(question)
        await self.db.commit()
        await self.db.refresh(question)
        return question

    async def submit_answers(
        self, user_id: str, competition_id: int, answers: list[int | None],
    ) -> dict:
        """Score answers against the stored questions and record the attempt."""
        competition = await self.get_competition(competition_id)
        if not competition.is_active:
            raise BusinessRuleError(
                "Competition is not active", "COMPETITION_INACTIVE",
            )
        questions = await self.list_questions(competition_id)
        if not questions:
            raise BusinessRuleError(
                "Competition has no questions yet", "COMPETITION_EMPTY",
            )

        score = score_answers(questions, answers, self.default_points)
        user_score = UserScore(
            user_id=user_id,
            competition_id=competition_id,
            score=score,
            total_questions=len(questions),
        )
        self.db.add(user_score)
        await self.db.commit()
        await self.db.refresh(user_score)
        logger.info(
            f"Quiz {competition_id} submitted: {score} points",
            extra={"user_id": user_id},
        )
        return {
            "score": score,
            "correct_answers": count_correct(questions, answers),
            "total_questions": len(questions),
            "max_score": max_score(questions, self.default_points),
            "percentage": score_percentage(
                score, len(questions), self.default_points,
            ),
            "user_score": user_score,
        }
